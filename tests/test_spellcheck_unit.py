"""
Unit tests for the dictionary-backed spell-check service.
"""
import random
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from spellcore.schemas.spellcheck import SpellingIssue, TokenStatus
from spellcore.services import spellcheck_dictionary
from spellcore.services.dictionary import build_dictionary
from spellcore.services.errors import InvalidInputError
from spellcore.services.spellcheck_dictionary import DictionarySpellCheckService, check


class TestCheck:
    """Tests for DictionarySpellCheckService.check()."""

    def test_helo_wrold_example(self, service):
        """Test the reference example: two misspellings separated by a space."""
        results = service.check("helo wrold")

        assert [r.token for r in results] == ["helo", " ", "wrold"]

        helo, space, wrold = results
        assert helo.status is TokenStatus.UNKNOWN
        assert helo.suggestions[0].word == "hello"
        assert helo.suggestions[0].distance == 1

        assert space.status is TokenStatus.SKIPPED
        assert space.is_word is False

        assert wrold.status is TokenStatus.UNKNOWN
        assert "world" in [s.word for s in wrold.suggestions]
        # Adjacent transposition counts as a single edit
        assert wrold.suggestions[0].word == "world"
        assert wrold.suggestions[0].distance == 1

    def test_empty_text(self, service):
        """Test empty input yields no results."""
        assert service.check("") == []

    def test_every_dictionary_word_is_correct(self, service, sample_dictionary):
        """Test each known word checks as exactly one correct result."""
        for word in sample_dictionary:
            results = service.check(word)
            assert len(results) == 1
            assert results[0].status is TokenStatus.CORRECT

    def test_case_insensitive_lookup_preserves_casing(self, service):
        """Test lookup folds case but the token keeps it."""
        results = service.check("HeLLo World")
        assert [r.status for r in results] == [
            TokenStatus.CORRECT,
            TokenStatus.SKIPPED,
            TokenStatus.CORRECT,
        ]
        assert results[0].token == "HeLLo"
        assert results[2].token == "World"

    def test_round_trip(self, service):
        """Test concatenating tokens reproduces the input."""
        for text in ["helo wrold", "  Spell-check, please!\n", "x", "42 ??"]:
            assert "".join(r.token for r in service.check(text)) == text

    def test_round_trip_random_text(self, service):
        """Test round trip and token classification over seeded random text."""
        rng = random.Random(2024)
        alphabet = "helowrdspck HELO 0129 .,;'-\n\t éšž 𝔘𝔙 😀"
        for _ in range(200):
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))
            results = service.check(text)
            assert "".join(r.token for r in results) == text
            for result in results:
                assert result.is_word == result.token.isalpha()
                if result.status is not TokenStatus.UNKNOWN:
                    assert result.suggestions == []

    def test_offsets(self, service):
        """Test each result carries the token's start offset."""
        results = service.check("ab, cd")
        assert [r.start for r in results] == [0, 2, 4]

    def test_suggestions_non_decreasing_in_distance(self):
        """Test suggestions are ordered by distance."""
        dictionary = build_dictionary(["cat", "cart", "chart", "art", "carts"])
        results = DictionarySpellCheckService(dictionary, suggestion_limit=10).check("cxrt")
        distances = [s.distance for s in results[0].suggestions]
        assert distances == sorted(distances)

    def test_unknown_without_suggestions(self, service):
        """Test an unknown word with nothing nearby is still a result, not an error."""
        results = service.check("qqqqqqqqqq")
        assert results[0].status is TokenStatus.UNKNOWN
        assert results[0].suggestions == []

    def test_suggestion_limit(self):
        """Test suggestions are truncated to the configured limit."""
        dictionary = build_dictionary(["bat", "cat", "hat", "mat", "rat"])
        service = DictionarySpellCheckService(dictionary, suggestion_limit=2)
        results = service.check("zat")
        assert [s.word for s in results[0].suggestions] == ["bat", "cat"]

    def test_skip_short_words(self, sample_dictionary):
        """Test words shorter than min_word_length are skipped."""
        service = DictionarySpellCheckService(sample_dictionary, min_word_length=3)
        with patch.object(spellcheck_dictionary, "suggest") as mock_suggest:
            results = service.check("to je a")

        word_results = [r for r in results if r.is_word]
        assert all(r.status is TokenStatus.SKIPPED for r in word_results)
        mock_suggest.assert_not_called()

    def test_repeated_misspelling_scored_once(self, service):
        """Test suggestions are computed once per distinct word within a call."""
        with patch.object(
            spellcheck_dictionary, "suggest", wraps=spellcheck_dictionary.suggest
        ) as spy:
            results = service.check("helo Helo HELO")
        assert spy.call_count == 1
        assert all(r.suggestions[0].word == "hello" for r in results if r.is_word)

    def test_rejects_bytes(self, service):
        """Test binary input is rejected before tokenization."""
        with pytest.raises(InvalidInputError):
            service.check(b"helo wrold")

    def test_rejects_oversized_text(self, sample_dictionary):
        """Test input longer than max_text_length is rejected."""
        service = DictionarySpellCheckService(sample_dictionary, max_text_length=5)
        with pytest.raises(InvalidInputError):
            service.check("hello world")

    def test_invalid_options(self, sample_dictionary):
        """Test negative budgets are rejected at construction."""
        with pytest.raises(ValueError):
            DictionarySpellCheckService(sample_dictionary, max_distance=-1)
        with pytest.raises(ValueError):
            DictionarySpellCheckService(sample_dictionary, suggestion_limit=-1)

    def test_concurrent_checks_share_dictionary(self, service):
        """Test concurrent calls on one service give identical results."""
        texts = ["helo wrold", "spel chek", "hello world"] * 10
        expected = [service.check(text) for text in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(service.check, texts))
        assert actual == expected


class TestCheckText:
    """Tests for the deduplicated issue list."""

    def test_deduplication_of_repeated_misspellings(self, service):
        """Test same misspelled word appears only once in results."""
        result = service.check_text("helo Helo helo")
        assert result == [SpellingIssue(word="helo", suggestions=["hello"])]

    def test_correct_word_not_reported(self, service):
        """Test correctly spelled words are not reported."""
        assert service.check_text("hello world") == []

    def test_first_occurrence_order(self, service):
        """Test issues are listed in order of first appearance."""
        result = service.check_text("wrold, helo, wrold")
        assert [issue.word for issue in result] == ["wrold", "helo"]


class TestServiceHelpers:
    """Tests for language, wire format and the module-level check()."""

    def test_get_language(self):
        service = DictionarySpellCheckService(build_dictionary(["danes"], language="sl"))
        assert service.get_language() == "sl"

    def test_to_wire(self, service):
        wire = service.to_wire(service.check("helo!"))
        assert wire == [
            {
                "token": "helo",
                "isWord": True,
                "status": "unknown",
                "suggestions": [{"word": "hello", "distance": 1}],
            },
            {"token": "!", "isWord": False, "status": "skipped", "suggestions": []},
        ]

    def test_module_level_check(self, sample_dictionary):
        results = check("helo", sample_dictionary, suggestion_limit=1)
        assert len(results) == 1
        assert [s.word for s in results[0].suggestions] == ["hello"]
