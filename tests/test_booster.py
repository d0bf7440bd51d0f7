"""
Tests for keyword boosting and override detectors.

Run with: python -m pytest tests/test_booster.py -v
"""

import pytest

from nlu.booster import KeywordBooster, to_intent
from nlu.catalog import Intent


@pytest.fixture(scope="module")
def booster(config):
    return KeywordBooster(config)


def run(booster, query, category="list_contracts", confidence=0.2):
    return booster.boost(query, query.split(), category, confidence)


class TestOverrides:
    """High-priority patterns short-circuit general scoring."""

    def test_expired_without_number(self, booster):
        intent, confidence = run(booster, "expired contracts")
        assert intent == Intent.LIST_EXPIRED_CONTRACTS
        assert confidence >= 0.85

    def test_expiration_with_number(self, booster):
        intent, confidence = run(booster, "when does contract 123456 expire")
        assert intent == Intent.GET_CONTRACT_EXPIRATION
        assert confidence >= 0.85

    def test_expiration_typo(self, booster):
        intent, _ = run(booster, "expird contracts")
        assert intent == Intent.LIST_EXPIRED_CONTRACTS

    def test_high_confidence_adds_boost(self, booster):
        _, confidence = run(booster, "expired contracts", confidence=0.5)
        assert confidence == pytest.approx(0.9)

    def test_active(self, booster):
        intent, confidence = run(booster, "active contracts")
        assert intent == Intent.LIST_ACTIVE_CONTRACTS
        assert confidence >= 0.8

    def test_active_with_number_is_status(self, booster):
        intent, _ = run(booster, "is contract 123456 active")
        assert intent == Intent.CONTRACT_STATUS

    def test_business_name(self, booster):
        intent, confidence = run(booster, "boeing contracts")
        assert intent == Intent.FILTER_CONTRACTS_BY_CUSTOMER
        assert confidence >= 0.8

    def test_customer_vocabulary(self, booster):
        intent, _ = run(booster, "contracts for customer acme")
        assert intent == Intent.FILTER_CONTRACTS_BY_CUSTOMER

    def test_search(self, booster):
        intent, confidence = run(booster, "search contracts")
        assert intent == Intent.SEARCH_CONTRACTS
        assert confidence >= 0.75

    def test_expiration_beats_customer(self, booster):
        intent, _ = run(booster, "expired boeing contracts")
        assert intent == Intent.LIST_EXPIRED_CONTRACTS

    def test_instructions_disable_overrides(self, booster):
        intent, _ = run(booster, "create contract for boeing", "create_contract", 0.5)
        assert intent == Intent.CREATE_CONTRACT

    def test_clamped(self, booster):
        _, confidence = run(booster, "expired contracts", confidence=0.95)
        assert confidence == 1.0


class TestKeywordScoring:
    """General keyword scoring blended into the statistical confidence."""

    def test_keyword_score(self, booster):
        tokens = "show contract 123456".split()
        score = booster.keyword_score(
            Intent.SHOW_CONTRACT, "show contract 123456", tokens
        )
        # phrases: "show contract", "show"; tokens: "show"
        assert score == pytest.approx((2 * 2 + 1) / (3 + 2))

    def test_keyword_moves_category(self, booster):
        intent, confidence = run(
            booster, "show contract 123456", "get_contract_info", 0.3
        )
        assert intent == Intent.SHOW_CONTRACT
        assert confidence == pytest.approx(0.3 + 0.35 * 1.0)

    def test_no_keywords_keeps_statistical_pick(self, booster):
        intent, confidence = run(booster, "xqzvw plmk", "list_contracts", 0.4)
        assert intent == Intent.LIST_CONTRACTS
        assert confidence == pytest.approx(0.4)

    def test_guidance(self, booster):
        intent, _ = run(booster, "how do i create a contract", "create_contract", 0.4)
        assert intent == Intent.GUIDE_CONTRACT

    def test_short_tokens_need_exact_match(self, booster):
        assert not booster.token_matches("how", "show")
        assert booster.token_matches("show", "show")
        assert booster.token_matches("updte", "update")

    def test_unknown_category_name(self):
        assert to_intent("not_an_intent") == Intent.UNKNOWN
        assert to_intent("show_contract") == Intent.SHOW_CONTRACT


class TestKnownWords:
    """Typo tolerance only applies to words outside the dictionary."""

    @pytest.mark.parametrize(
        "query",
        [
            "inactive contracts",
            "show inactive contracts",
            "what kind of contracts do we have",
            "custom contracts",
        ],
    )
    def test_lookalike_words_do_not_override(self, booster, query):
        assert booster.check_overrides(query, query.split(), 0.2) is None

    def test_inactive_is_not_active(self, booster):
        intent, _ = run(booster, "show inactive contracts")
        assert intent != Intent.LIST_ACTIVE_CONTRACTS

    def test_kind_is_not_find(self, booster):
        intent, _ = run(booster, "what kind of contracts do we have")
        assert intent != Intent.SEARCH_CONTRACTS

    def test_custom_is_not_customer(self, booster):
        intent, _ = run(booster, "custom contracts")
        assert intent != Intent.FILTER_CONTRACTS_BY_CUSTOMER

    def test_dictionary_words_need_exact_match(self, booster):
        assert not booster.token_matches("inactive", "active")
        assert not booster.token_matches("last", "list")
        assert not booster.token_matches("custom", "customer")
        assert booster.token_matches("custmr", "customer")
