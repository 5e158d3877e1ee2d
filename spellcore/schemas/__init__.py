"""
Pydantic schemas exchanged with callers of the spell-check core.
"""
from spellcore.schemas.spellcheck import (
    CheckResult,
    SpellingIssue,
    Suggestion,
    TokenStatus,
)

__all__ = [
    "CheckResult",
    "SpellingIssue",
    "Suggestion",
    "TokenStatus",
]
