"""
Spell-check service factory and singleton management.

The process holds at most one published service. Loading and reloading build
a complete new Dictionary and service first and then replace the reference,
so readers see either the old service or the new one, never a partial load.
"""
from enum import Enum
from typing import Optional

from spellcore.config import settings
from spellcore.services import dictionary as dictionary_store
from spellcore.services.errors import LoadError
from spellcore.services.spellcheck_dictionary import DictionarySpellCheckService
from spellcore.utils.logger import get_logger

logger = get_logger("services.spellcheck")


class DictionaryState(str, Enum):
    """Lifecycle of the process-wide dictionary."""

    UNLOADED = "unloaded"
    LOADED = "loaded"


# Published service; replaced wholesale, never mutated
_service: Optional[DictionarySpellCheckService] = None


def get_spellcheck_service() -> Optional[DictionarySpellCheckService]:
    """
    Get the singleton spell-check service.

    Returns:
        DictionarySpellCheckService instance if initialized, None otherwise
    """
    return _service


def get_dictionary_state() -> DictionaryState:
    """Report whether a dictionary has been published."""
    return DictionaryState.LOADED if _service is not None else DictionaryState.UNLOADED


def create_spellcheck_service(
    wordlist_path: Optional[str] = None,
    cache_path: Optional[str] = None,
    language: Optional[str] = None,
    max_distance: Optional[int] = None,
    suggestion_limit: Optional[int] = None,
    max_relaxed_distance: Optional[int] = None,
    min_word_length: Optional[int] = None,
    max_text_length: Optional[int] = None,
) -> DictionarySpellCheckService:
    """
    Load a dictionary and build a service without publishing it.

    Arguments left as None fall back to the SPELLCHECK_* settings.

    Returns:
        Ready-to-use DictionarySpellCheckService

    Raises:
        LoadError: If the dictionary cannot be loaded
    """
    wordlist_path = wordlist_path or settings.SPELLCHECK_WORDLIST_PATH
    cache_path = cache_path or settings.SPELLCHECK_CACHE_PATH

    dictionary = dictionary_store.load(
        wordlist_path,
        cache_path=cache_path,
        language=language or settings.SPELLCHECK_LANGUAGE,
    )

    return DictionarySpellCheckService(
        dictionary,
        max_distance=_pick(max_distance, settings.SPELLCHECK_MAX_EDIT_DISTANCE),
        suggestion_limit=_pick(suggestion_limit, settings.SPELLCHECK_SUGGESTION_COUNT),
        max_relaxed_distance=_pick(max_relaxed_distance, settings.SPELLCHECK_MAX_RELAXED_DISTANCE),
        min_word_length=_pick(min_word_length, settings.SPELLCHECK_MIN_WORD_LENGTH),
        max_text_length=_pick(max_text_length, settings.SPELLCHECK_MAX_TEXT_LENGTH),
    )


def initialize_spellcheck(**options) -> DictionarySpellCheckService:
    """
    Initialize the spell-check service singleton.

    Called during startup to pre-load the dictionary. On failure the
    previously published service, if any, stays in place.

    Args:
        **options: Overrides passed to create_spellcheck_service

    Returns:
        The published service

    Raises:
        LoadError: If the dictionary cannot be loaded
    """
    global _service

    logger.info("Initializing spell-check service...")
    try:
        service = create_spellcheck_service(**options)
    except LoadError as e:
        logger.error(
            "Failed to initialize spell-check service",
            error=str(e),
            source=e.source,
        )
        raise

    _service = service
    logger.info(
        "Spell-check service initialized successfully",
        language=service.get_language(),
        word_count=len(service.dictionary),
    )
    return service


def reload_dictionary(**options) -> DictionarySpellCheckService:
    """
    Rebuild the dictionary from its source and swap in a new service.

    In-flight checks keep using the service they already hold.

    Raises:
        LoadError: If the new dictionary cannot be loaded
    """
    previous = _service
    service = initialize_spellcheck(**options)
    logger.info(
        "Dictionary reloaded",
        previous_word_count=len(previous.dictionary) if previous else 0,
        word_count=len(service.dictionary),
    )
    return service


def reset_spellcheck() -> None:
    """Drop the published service, returning to the unloaded state."""
    global _service
    _service = None


def _pick(value: Optional[int], default: int) -> int:
    return default if value is None else value
