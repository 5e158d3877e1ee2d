"""
Input validation utilities.
"""
from spellcore.services.errors import InvalidInputError
from spellcore.utils.logger import get_logger

logger = get_logger("validators")


def validate_text(text: object, max_length: int) -> str:
    """
    Validate text submitted for spell-checking.

    Checks:
    - Input is a str (bytes and other objects are rejected, not decoded)
    - Input contains no NUL characters (binary payload)
    - Input is encodable as UTF-8 (no lone surrogates)
    - Input is not longer than max_length characters

    Args:
        text: Value received from the caller
        max_length: Maximum number of characters accepted

    Returns:
        The text, unchanged

    Raises:
        InvalidInputError: If validation fails
    """
    if not isinstance(text, str):
        logger.warning("Rejected non-text input", input_type=type(text).__name__)
        raise InvalidInputError(f"Expected text, got {type(text).__name__}")

    if "\x00" in text:
        logger.warning("Rejected binary input", length=len(text))
        raise InvalidInputError("Text contains NUL characters")

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.warning("Rejected input that is not valid UTF-8", error=str(e))
        raise InvalidInputError("Text is not valid UTF-8") from e

    if len(text) > max_length:
        logger.warning(
            "Rejected oversized input",
            length=len(text),
            max_length=max_length,
        )
        raise InvalidInputError(f"Text is too long ({len(text)} > {max_length} characters)")

    return text
