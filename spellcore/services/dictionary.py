"""
Dictionary store: an immutable, length-indexed word set built from a word list.
"""
import os
import pickle
import time
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple, Union

from spellcore.services.errors import LoadError
from spellcore.utils.logger import get_logger


logger = get_logger("services.dictionary")

DEFAULT_RANK = 1
COMMENT_PREFIX = "#"

WordSource = Union[str, "os.PathLike[str]", Iterable[str]]

_EMPTY: FrozenSet[str] = frozenset()


def normalize_word(word: str) -> str:
    """Case-folding rule shared by loading and lookup."""
    return word.lower()


def parse_entry(line: str) -> Optional[Tuple[str, int]]:
    """
    Parse one word-list line.

    Accepts `word` or `word <count>`. Blank lines and comments yield None,
    as do entries that are not purely alphabetic or carry a bad count.

    Args:
        line: Raw line from the word list

    Returns:
        (normalized word, rank) or None when the line holds no usable word
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = stripped.split()
    if len(parts) == 1:
        rank = DEFAULT_RANK
    elif len(parts) == 2 and parts[1].isdigit():
        rank = int(parts[1])
    else:
        return None

    word = normalize_word(parts[0])
    if not word.isalpha():
        return None
    return word, rank


class Dictionary:
    """
    Immutable set of known words.

    Words are stored lowercase; lookups fold case the same way. A length index
    lets the candidate generator skip words that cannot be within budget.
    Instances are never mutated after construction, so one dictionary can be
    shared by any number of concurrent checks.

    Keys are case-folded on construction; empty keys are dropped and keys
    that differ only in case keep the highest rank.

    Raises:
        LoadError: If no non-empty word is given
    """

    __slots__ = ("_ranks", "_by_length", "_language")

    def __init__(self, ranks: Mapping[str, int], language: str = "en"):
        normalized: Dict[str, int] = {}
        for word, rank in ranks.items():
            word = normalize_word(word)
            if word and rank > normalized.get(word, -1):
                normalized[word] = rank

        if not normalized:
            raise LoadError("Dictionary needs at least one non-empty word")

        by_length: Dict[int, set] = {}
        for word in normalized:
            by_length.setdefault(len(word), set()).add(word)

        self._ranks: Mapping[str, int] = MappingProxyType(normalized)
        self._by_length: Mapping[int, FrozenSet[str]] = MappingProxyType(
            {length: frozenset(words) for length, words in by_length.items()}
        )
        self._language = language

    def __getstate__(self):
        return {"ranks": dict(self._ranks), "language": self._language}

    def __setstate__(self, state):
        self.__init__(state["ranks"], state["language"])

    @property
    def language(self) -> str:
        return self._language

    def contains(self, word: str) -> bool:
        """Case-insensitive membership check."""
        return normalize_word(word) in self._ranks

    def words_of_length(self, length: int) -> FrozenSet[str]:
        """All words with exactly `length` characters (empty set if none)."""
        return self._by_length.get(length, _EMPTY)

    def rank(self, word: str) -> int:
        """Frequency score of a word, 0 if unknown."""
        return self._ranks.get(normalize_word(word), 0)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._ranks)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ranks))

    def __repr__(self) -> str:
        return f"Dictionary(language={self._language!r}, words={len(self)})"


def build_dictionary(lines: Iterable[str], language: str = "en", source: str = "<iterable>") -> Dictionary:
    """
    Build a Dictionary from word-list lines.

    Args:
        lines: Word-list lines (`word` or `word <count>`)
        language: Language code stored on the dictionary
        source: Description of where the lines came from, for errors and logs

    Returns:
        Loaded Dictionary

    Raises:
        LoadError: If no usable word remains after normalization
    """
    ranks: Dict[str, int] = {}
    skipped = 0

    for line in lines:
        if not isinstance(line, str):
            raise LoadError(f"Word list entries must be text, got {type(line).__name__}", source=source)
        entry = parse_entry(line)
        if entry is None:
            if line.strip() and not line.strip().startswith(COMMENT_PREFIX):
                skipped += 1
            continue
        word, rank = entry
        if rank > ranks.get(word, -1):
            ranks[word] = rank

    if skipped:
        logger.warning(
            "Skipped unusable word list entries",
            source=source,
            skipped=skipped,
        )

    if not ranks:
        logger.error("Word list is empty after normalization", source=source)
        raise LoadError("Dictionary source is empty after normalization", source=source)

    return Dictionary(ranks, language=language)


def load(
    source: WordSource,
    cache_path: Optional[Union[str, "os.PathLike[str]"]] = None,
    language: str = "en",
) -> Dictionary:
    """
    Load a dictionary from a word-list file or from an iterable of lines.

    When `source` is a path and `cache_path` is given, a pickle cache built
    from the same file (path, size and mtime) for the same language is used
    instead of re-parsing (fast path). Otherwise the word list is parsed and
    the cache is rewritten.

    Args:
        source: Path to a newline-delimited word list, or the lines themselves
        cache_path: Optional pickle cache file
        language: Language code stored on the dictionary

    Returns:
        Fully built, read-only Dictionary

    Raises:
        LoadError: If the source is missing, unreadable or empty
    """
    if isinstance(source, (str, os.PathLike)):
        return _load_from_path(Path(source), Path(cache_path) if cache_path else None, language)

    if isinstance(source, (bytes, bytearray)):
        raise LoadError("Dictionary source must be a path or lines of text, got bytes")

    start_time = time.time()
    dictionary = build_dictionary(source, language=language)
    logger.info(
        "Dictionary built from lines",
        word_count=len(dictionary),
        build_time_seconds=round(time.time() - start_time, 3),
    )
    return dictionary


def _load_from_path(path: Path, cache_path: Optional[Path], language: str) -> Dictionary:
    """Load from pickle if it was built from this word list, otherwise parse it."""
    if not path.is_file():
        logger.error("Word list not found", wordlist_path=str(path))
        raise LoadError(f"Word list not found: {path}", source=str(path))

    cache_key = _cache_key(path, language)

    if cache_path is not None and cache_path.is_file():
        dictionary = _load_from_pickle(cache_path, cache_key)
        if dictionary is not None:
            return dictionary

    dictionary = _build_from_wordlist(path, language)

    if cache_path is not None:
        _save_pickle(dictionary, cache_path, cache_key)

    return dictionary


def _cache_key(wordlist_path: Path, language: str) -> Dict[str, object]:
    """What a cache must have been built from to be reused for this load."""
    stat = wordlist_path.stat()
    return {
        "source": str(wordlist_path.resolve()),
        "size": stat.st_size,
        "mtime_ns": stat.st_mtime_ns,
        "language": language,
    }


def _load_from_pickle(cache_path: Path, cache_key: Dict[str, object]) -> Optional[Dictionary]:
    """Load a Dictionary from a pickle file, None if it cannot be used."""
    try:
        start_time = time.time()

        with open(cache_path, "rb") as f:
            payload = pickle.load(f)

        if not isinstance(payload, dict) or payload.get("key") != cache_key:
            logger.info(
                "Pickle was built from a different word list, will rebuild",
                pickle_path=str(cache_path),
                wordlist_path=cache_key["source"],
            )
            return None

        dictionary = payload.get("dictionary")
        if not isinstance(dictionary, Dictionary):
            logger.warning(
                "Pickle does not hold a usable dictionary, will rebuild from word list",
                pickle_path=str(cache_path),
            )
            return None

        logger.info(
            "Dictionary loaded from pickle",
            word_count=len(dictionary),
            load_time_seconds=round(time.time() - start_time, 3),
            pickle_path=str(cache_path),
        )
        return dictionary

    except Exception as e:
        logger.error(
            "Failed to load pickle, will try word list",
            error=str(e),
            pickle_path=str(cache_path),
        )
        return None


def _build_from_wordlist(path: Path, language: str) -> Dictionary:
    """Build a Dictionary by parsing the word list file."""
    start_time = time.time()
    try:
        with open(path, "r", encoding="utf-8") as f:
            dictionary = build_dictionary(f, language=language, source=str(path))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "Failed to read word list",
            error=str(e),
            wordlist_path=str(path),
        )
        raise LoadError(f"Cannot read word list {path}: {e}", source=str(path)) from e

    logger.info(
        "Dictionary built from word list",
        word_count=len(dictionary),
        build_time_seconds=round(time.time() - start_time, 3),
        wordlist_path=str(path),
    )
    return dictionary


def _save_pickle(dictionary: Dictionary, cache_path: Path, cache_key: Dict[str, object]) -> None:
    """Save a Dictionary, tagged with its word list, to a pickle file for fast loading."""
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)

        with open(cache_path, "wb") as f:
            pickle.dump({"key": cache_key, "dictionary": dictionary}, f)

        logger.info("Dictionary saved to pickle", pickle_path=str(cache_path))

    except (OSError, pickle.PicklingError) as e:
        logger.warning(
            "Failed to save pickle (will rebuild on next start)",
            error=str(e),
            pickle_path=str(cache_path),
        )
