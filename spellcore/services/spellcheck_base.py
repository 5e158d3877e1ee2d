"""
Abstract base class for spell-check services.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from spellcore.schemas.spellcheck import CheckResult, SpellingIssue


class SpellCheckService(ABC):
    """
    Abstract base class for spell-check service implementations.

    Concrete implementations receive an already loaded dictionary and must be
    safe to call concurrently: a check may not mutate shared state.
    """

    @abstractmethod
    def check(self, text: str) -> List[CheckResult]:
        """
        Check text token by token.

        Args:
            text: Text to check

        Returns:
            One CheckResult per token, in original order. Joining the tokens
            reproduces the text.

        Raises:
            InvalidInputError: If text is not valid input
        """
        pass

    @abstractmethod
    def get_language(self) -> str:
        """Get the language code this service handles (e.g., 'en')."""
        pass

    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for spelling issues and return suggestions.

        Args:
            text: Text to check for spelling errors

        Returns:
            List of SpellingIssue objects, deduplicated by word
        """
        issues: Dict[str, List[str]] = {}
        for result in self.check(text):
            if not result.is_unknown:
                continue
            word = result.token.lower()
            if word not in issues:
                issues[word] = [s.word for s in result.suggestions]

        return [
            SpellingIssue(word=word, suggestions=suggestions)
            for word, suggestions in issues.items()
        ]

    @staticmethod
    def to_wire(results: List[CheckResult]) -> List[Dict[str, Any]]:
        """Serialize results as `{token, isWord, status, suggestions: [{word, distance}]}`."""
        return [result.model_dump(by_alias=True, mode="json") for result in results]
