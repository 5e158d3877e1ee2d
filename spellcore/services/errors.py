"""
Exceptions raised by the spell-check core.

Unknown words and empty suggestion lists are results, not errors.
"""


class SpellcheckError(Exception):
    """Base exception for spell-check failures."""
    pass


class LoadError(SpellcheckError):
    """Dictionary source is missing, unreadable, or empty after normalization."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class InvalidInputError(SpellcheckError):
    """Input handed to the checker is not text it can tokenize."""
    pass
