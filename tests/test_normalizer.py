"""
Tests for typo and abbreviation normalization.

Run with: python -m pytest tests/test_normalizer.py -v
"""

QUERIES = [
    "shw cntrct 123456",
    "show contract 123456",
    "list all expird contracts",
    "contracts for custmer boieng",
    "what is the expiraton date of contract #1234567",
    "create contract for account 1234567 named 'Alpha'",
    "contracts between 2024-01-01 and 2024-12-31",
    "Show Contract DETAILS",
    "xqzvw plmk",
    "",
]


class TestNormalizer:
    """Tests for Normalizer.normalize."""

    def test_abbreviations(self, normalizer):
        assert normalizer.normalize("shw cntrct 123456") == "show contract 123456"
        assert normalizer.normalize("SHW contrct") == "show contract"

    def test_similarity_correction(self, normalizer):
        assert normalizer.normalize("boieng contracts") == "boeing contracts"

    def test_dictionary_words_untouched(self, normalizer):
        assert normalizer.normalize("Show Contract DETAILS") == "Show Contract DETAILS"

    def test_identifiers_untouched(self, normalizer):
        query = "contract 1234567 account #7654321 AC-123456 2024-01-01 $1,250.00"
        assert normalizer.normalize(query) == query

    def test_unknown_words_preserved(self, normalizer):
        assert normalizer.normalize("xqzvw plmk") == "xqzvw plmk"

    def test_punctuation_kept(self, normalizer):
        assert normalizer.normalize("contrct, please") == "contract, please"

    def test_whitespace_collapsed(self, normalizer):
        assert normalizer.normalize("  show   contract  ") == "show contract"

    def test_empty(self, normalizer):
        assert normalizer.normalize("") == ""
        assert normalizer.normalize("   ") == ""

    def test_idempotent(self, normalizer):
        for query in QUERIES:
            once = normalizer.normalize(query)
            assert normalizer.normalize(once) == once, f"Not idempotent for '{query}'"

    def test_number_tokens_never_change(self, normalizer):
        for query in QUERIES:
            for token in query.split():
                if token.strip("#").isdigit():
                    assert token in normalizer.normalize(query).split()
