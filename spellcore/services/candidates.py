"""
Candidate generation: dictionary words within an edit-distance budget.
"""
from typing import List

from spellcore.schemas.spellcheck import Suggestion
from spellcore.services.dictionary import Dictionary, normalize_word
from spellcore.services.edit_distance import distance
from spellcore.utils.logger import get_logger


logger = get_logger("services.candidates")

DEFAULT_MAX_DISTANCE = 2
DEFAULT_LIMIT = 5
# Widening stops here even if nothing was found
DEFAULT_MAX_RELAXED_DISTANCE = 3


def suggest(
    word: str,
    dictionary: Dictionary,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    limit: int = DEFAULT_LIMIT,
    max_relaxed_distance: int = DEFAULT_MAX_RELAXED_DISTANCE,
) -> List[Suggestion]:
    """
    Find the closest dictionary words to `word`.

    Only words whose length is within the budget of the query's length are
    scored. When the budget yields nothing it is widened one edit at a time
    up to `max_relaxed_distance`.

    Args:
        word: Word to correct (any casing)
        dictionary: Loaded dictionary
        max_distance: Initial edit-distance budget
        limit: Maximum number of suggestions to return
        max_relaxed_distance: Largest budget tried before giving up

    Returns:
        Suggestions ordered by distance, then rank (descending), then word

    Raises:
        ValueError: If max_distance or limit is negative
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    query = normalize_word(word.strip())
    if not query or limit == 0:
        return []

    ceiling = max(max_distance, max_relaxed_distance)
    for budget in range(max_distance, ceiling + 1):
        found = _within_budget(query, dictionary, budget)
        if found:
            if budget > max_distance:
                logger.debug(
                    "Suggestion budget relaxed",
                    word=query,
                    budget=budget,
                    found=len(found),
                )
            found.sort(key=Suggestion.sort_key)
            return found[:limit]

    return []


def _within_budget(query: str, dictionary: Dictionary, budget: int) -> List[Suggestion]:
    """Score every word of plausible length against the query."""
    found = []
    query_length = len(query)
    for length in range(max(1, query_length - budget), query_length + budget + 1):
        for candidate in dictionary.words_of_length(length):
            candidate_distance = distance(query, candidate, budget)
            if candidate_distance is not None:
                found.append(
                    Suggestion(
                        word=candidate,
                        distance=candidate_distance,
                        rank=dictionary.rank(candidate),
                    )
                )
    return found
