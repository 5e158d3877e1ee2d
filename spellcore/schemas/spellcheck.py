"""
Pydantic schemas for spell-check functionality.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TokenStatus(str, Enum):
    """Verdict for a single token."""

    CORRECT = "correct"
    UNKNOWN = "unknown"
    SKIPPED = "skipped"


class Suggestion(BaseModel):
    """A candidate correction for an unknown word."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="Dictionary word (lowercase)")
    distance: int = Field(ge=0, description="Damerau-Levenshtein distance from the checked word")
    rank: int = Field(default=0, exclude=True, description="Frequency score, higher is more common")

    def sort_key(self):
        """Distance ascending, rank descending, then word."""
        return (self.distance, -self.rank, self.word)


class CheckResult(BaseModel):
    """Verdict for one token of the checked text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str = Field(description="Token text with original casing")
    is_word: bool = Field(alias="isWord", description="True for alphabetic runs")
    status: TokenStatus
    suggestions: List[Suggestion] = Field(
        default_factory=list,
        description="Ordered corrections, only for unknown words",
    )
    start: int = Field(default=0, exclude=True, description="Offset of the token in the input")

    @property
    def is_correct(self) -> bool:
        return self.status is TokenStatus.CORRECT

    @property
    def is_unknown(self) -> bool:
        return self.status is TokenStatus.UNKNOWN


class SpellingIssue(BaseModel):
    """A spelling issue with suggested corrections."""

    word: str = Field(description="Misspelled word (lowercase)")
    suggestions: List[str] = Field(description="Suggested corrections ordered by relevance")
