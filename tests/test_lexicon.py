"""
Tests for the lexicon and string similarity.

Run with: python -m pytest tests/test_lexicon.py -v
"""

from dataclasses import replace

import pytest

from nlu.lexicon import Lexicon, is_typo_match, jaccard, levenshtein


class TestSimilarity:
    """Tests for the blended similarity score."""

    def test_identical_words(self, lexicon):
        assert lexicon.similarity("contract", "contract") == 1.0
        assert lexicon.similarity("Contract", "CONTRACT") == 1.0

    def test_bounded(self, lexicon):
        pairs = [("", "abc"), ("a", "b"), ("contract", "xyz"), ("boeing", "boieng")]
        for a, b in pairs:
            score = lexicon.similarity(a, b)
            assert 0.0 <= score <= 1.0, f"{a}/{b} out of range: {score}"

    def test_symmetric(self, lexicon):
        pairs = [("contrct", "contract"), ("custmer", "customer"), ("shw", "show")]
        for a, b in pairs:
            assert lexicon.similarity(a, b) == pytest.approx(lexicon.similarity(b, a))

    def test_close_words_score_higher(self, lexicon):
        assert lexicon.similarity("contrct", "contract") > lexicon.similarity(
            "contrct", "customer"
        )

    def test_jaccard(self):
        assert jaccard("abc", "abc") == 1.0
        assert jaccard("ab", "cd") == 0.0
        assert jaccard("", "") == 1.0


class TestBestMatch:
    """Tests for dictionary lookup."""

    def test_typo_resolves(self, lexicon):
        assert lexicon.best_match("boieng", 0.7) == "boeing"
        assert lexicon.best_match("expiraton", 0.7) == "expiration"

    def test_no_match_returns_word(self, lexicon):
        assert lexicon.best_match("xqzvw", 0.7) == "xqzvw"

    def test_empty_word(self, lexicon):
        assert lexicon.best_match("", 0.7) == ""

    def test_tie_goes_to_first_entry(self, config):
        small = Lexicon(replace(config, dictionary=("ac", "ad")))
        assert small.similarity("ab", "ac") == small.similarity("ab", "ad")
        assert small.best_match("ab", 0.0) == "ac"

    def test_membership_case_insensitive(self, lexicon):
        assert "Contract" in lexicon
        assert "BOEING" in lexicon
        assert "expirationdate" in lexicon
        assert "xqzvw" not in lexicon


class TestTypoMatch:
    """Tests for edit-distance token matching."""

    def test_levenshtein(self):
        assert levenshtein("contract", "contract") == 0
        assert levenshtein("contrct", "contract") == 1
        assert levenshtein("kitten", "sitting") == 3

    def test_typo_within_tolerance(self):
        assert is_typo_match("contrct", "contract")
        assert is_typo_match("expird", "expired")
        assert is_typo_match("EXPIRED", "expired")

    def test_typo_outside_tolerance(self):
        assert not is_typo_match("cat", "contract")
        assert not is_typo_match("customer", "contract")

    def test_short_keyword_allows_one_edit(self):
        assert is_typo_match("lst", "list")
        assert not is_typo_match("ls", "list")
