"""
Pytest configuration and fixtures for spellcore tests.
"""
from pathlib import Path

import pytest

from spellcore.services.dictionary import Dictionary, build_dictionary
from spellcore.services.spellcheck import reset_spellcheck
from spellcore.services.spellcheck_dictionary import DictionarySpellCheckService


SAMPLE_WORDS = ["spell", "check", "hello", "world"]


@pytest.fixture
def sample_dictionary() -> Dictionary:
    """The four-word dictionary used throughout the examples."""
    return build_dictionary(SAMPLE_WORDS)


@pytest.fixture
def ranked_dictionary() -> Dictionary:
    """Dictionary with frequency counts, for ordering tests."""
    return build_dictionary([
        "cat 50",
        "cut 500",
        "cot 5",
        "coat 100",
        "act 20",
        "cast 80",
    ])


@pytest.fixture
def service(sample_dictionary) -> DictionarySpellCheckService:
    """Service over the sample dictionary with default options."""
    return DictionarySpellCheckService(sample_dictionary)


@pytest.fixture
def wordlist_path(tmp_path) -> Path:
    """Word list file on disk with a comment, a blank line and mixed case."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# test word list\n"
        "Spell\n"
        "check 10\n"
        "\n"
        "hello\n"
        "WORLD 3\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clean_spellcheck_singleton():
    """Each test starts and ends with no published service."""
    reset_spellcheck()
    yield
    reset_spellcheck()
