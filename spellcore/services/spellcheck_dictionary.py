"""
Dictionary-backed spell-check service using bounded edit-distance suggestions.
"""
from typing import Dict, List

from spellcore.schemas.spellcheck import CheckResult, Suggestion, TokenStatus
from spellcore.services.candidates import (
    DEFAULT_LIMIT,
    DEFAULT_MAX_DISTANCE,
    DEFAULT_MAX_RELAXED_DISTANCE,
    suggest,
)
from spellcore.services.dictionary import Dictionary
from spellcore.services.spellcheck_base import SpellCheckService
from spellcore.utils.logger import get_logger
from spellcore.utils.tokenizer import tokenize
from spellcore.utils.validators import validate_text


logger = get_logger("services.spellcheck_dictionary")

DEFAULT_MIN_WORD_LENGTH = 1
DEFAULT_MAX_TEXT_LENGTH = 100_000


class DictionarySpellCheckService(SpellCheckService):
    """
    Spell-check service over an in-memory Dictionary.

    Holds only the dictionary and immutable options, so a single instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        suggestion_limit: int = DEFAULT_LIMIT,
        max_relaxed_distance: int = DEFAULT_MAX_RELAXED_DISTANCE,
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ):
        """
        Initialize the service.

        Args:
            dictionary: Loaded dictionary
            max_distance: Edit-distance budget for suggestions
            suggestion_limit: Maximum suggestions per unknown word
            max_relaxed_distance: Ceiling when no suggestion is within budget
            min_word_length: Words shorter than this are skipped
            max_text_length: Longer input is rejected
        """
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        if suggestion_limit < 0:
            raise ValueError(f"suggestion_limit must be >= 0, got {suggestion_limit}")

        self._dictionary = dictionary
        self._max_distance = max_distance
        self._suggestion_limit = suggestion_limit
        self._max_relaxed_distance = max_relaxed_distance
        self._min_word_length = min_word_length
        self._max_text_length = max_text_length

        logger.debug(
            "Spell-check service initialized",
            language=dictionary.language,
            word_count=len(dictionary),
            max_distance=max_distance,
            max_relaxed_distance=max_relaxed_distance,
            suggestion_limit=suggestion_limit,
            min_word_length=min_word_length,
        )

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def check(self, text: str) -> List[CheckResult]:
        """
        Check text token by token.

        Args:
            text: Text to check

        Returns:
            One CheckResult per token, in original order

        Raises:
            InvalidInputError: If text is not a str, looks binary or is too long
        """
        validate_text(text, self._max_text_length)

        # Per-call memo; repeated misspellings are scored once
        suggestions_by_word: Dict[str, List[Suggestion]] = {}
        results: List[CheckResult] = []

        for token in tokenize(text):
            if not token.is_word or len(token.text) < self._min_word_length:
                results.append(
                    CheckResult(
                        token=token.text,
                        is_word=token.is_word,
                        status=TokenStatus.SKIPPED,
                        start=token.start,
                    )
                )
                continue

            # Normalize to lowercase for lookup
            word_lower = token.text.lower()
            if word_lower in self._dictionary:
                results.append(
                    CheckResult(
                        token=token.text,
                        is_word=True,
                        status=TokenStatus.CORRECT,
                        start=token.start,
                    )
                )
                continue

            if word_lower not in suggestions_by_word:
                suggestions_by_word[word_lower] = suggest(
                    word_lower,
                    self._dictionary,
                    max_distance=self._max_distance,
                    limit=self._suggestion_limit,
                    max_relaxed_distance=self._max_relaxed_distance,
                )
            results.append(
                CheckResult(
                    token=token.text,
                    is_word=True,
                    status=TokenStatus.UNKNOWN,
                    suggestions=suggestions_by_word[word_lower],
                    start=token.start,
                )
            )

        logger.debug(
            "Text checked",
            tokens=len(results),
            unknown_words=len(suggestions_by_word),
        )
        return results

    def get_language(self) -> str:
        """Get language code."""
        return self._dictionary.language


def check(text: str, dictionary: Dictionary, **options) -> List[CheckResult]:
    """
    Check text against a dictionary without keeping a service around.

    Args:
        text: Text to check
        dictionary: Loaded dictionary
        **options: Keyword arguments accepted by DictionarySpellCheckService

    Returns:
        One CheckResult per token, in original order
    """
    return DictionarySpellCheckService(dictionary, **options).check(text)
