"""
Unit tests for structured logging.
"""
import logging

import pytest

from spellcore.utils.logger import StructuredFormatter, StructuredLogger, get_logger


@pytest.fixture
def captured():
    """Attach a capturing handler to a throwaway logger."""
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("spellcore.tests.capture")
    logger.setLevel(logging.DEBUG)
    handler = ListHandler()
    logger.addHandler(handler)
    yield StructuredLogger(logger), records
    logger.removeHandler(handler)


def test_get_logger_uses_package_namespace():
    """Test loggers live under the spellcore namespace."""
    assert get_logger("services.dictionary").name == "spellcore.services.dictionary"


def test_keyword_arguments_become_extra_fields(captured):
    """Test kwargs are attached to the record."""
    logger, records = captured
    logger.info("Dictionary loaded", word_count=4)
    assert records[0].word_count == 4
    assert records[0].getMessage() == "Dictionary loaded"


def test_reserved_field_names_are_prefixed(captured):
    """Test kwargs that clash with LogRecord attributes get a ctx_ prefix."""
    logger, records = captured
    logger.warning("Clash", name="words.txt", module="x")
    assert records[0].ctx_name == "words.txt"
    assert records[0].ctx_module == "x"
    assert records[0].name == "spellcore.tests.capture"


def test_formatter_renders_extra_fields(captured):
    """Test the formatter appends key=value pairs."""
    logger, records = captured
    logger.error("Failed to read word list", wordlist_path="/tmp/w.txt")
    line = StructuredFormatter().format(records[0])
    assert "| ERROR    |" in line
    assert "spellcore.tests.capture" in line
    assert line.endswith("| wordlist_path=/tmp/w.txt")


def test_formatter_includes_exception(captured):
    """Test exc_info is rendered."""
    logger, records = captured
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.error("Unexpected failure", exc_info=True)
    line = StructuredFormatter().format(records[0])
    assert "RuntimeError: boom" in line
