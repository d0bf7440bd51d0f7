"""
Keyword heuristics layered over the statistical scorer.

Two passes:
1. Override detectors for cases the statistical model gets wrong
   (expiration, active status, customer names, search). First hit wins.
2. Keyword scoring per intent, blended into the statistical confidence.
"""

import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from nlu.catalog import Intent
from nlu.config import PipelineConfig
from nlu.lexicon import is_typo_match
from utils.logger import get_logger

logger = get_logger(__name__)

CONTRACT_NUMBER = re.compile(r"(?<![\d-])\d{6,8}(?![\d-])")


def contains_phrase(sentence: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", sentence) is not None


def to_intent(category: Union[str, Intent, None]) -> Intent:
    if isinstance(category, Intent):
        return category
    try:
        return Intent(category)
    except ValueError:
        return Intent.UNKNOWN


class KeywordBooster:
    """Adjusts (category, confidence) from keyword evidence in the query."""

    def __init__(self, config: PipelineConfig):
        self.config = config

    # -------------------------------------------------------------------------
    # Matching helpers
    # -------------------------------------------------------------------------

    def token_matches(self, token: str, keyword: str) -> bool:
        if token == keyword:
            return True
        # Known words are never typos ("inactive" is not "active").
        if self.config.in_dictionary(token):
            return False
        # Short words are too close to each other for edit-distance matching.
        shortest = self.config.min_typo_length
        if len(token) < shortest or len(keyword) < shortest:
            return False
        return is_typo_match(token, keyword)

    def mentions(
        self, sentence: str, tokens: Sequence[str], terms: Iterable[str]
    ) -> bool:
        for term in terms:
            if contains_phrase(sentence, term):
                return True
            if " " not in term and any(self.token_matches(t, term) for t in tokens):
                return True
        return False

    def keyword_score(
        self, intent: Intent, sentence: str, tokens: Sequence[str]
    ) -> float:
        """(phrase_matches * 2 + token_matches) / (token_count + 2)"""
        keywords = self.config.intent_keywords.get(intent, ())
        phrase_matches = sum(1 for kw in keywords if contains_phrase(sentence, kw))
        single_words = [kw for kw in keywords if " " not in kw]
        token_matches = sum(
            1
            for token in tokens
            if any(self.token_matches(token, kw) for kw in single_words)
        )
        return (phrase_matches * 2 + token_matches) / (len(tokens) + 2)

    # -------------------------------------------------------------------------
    # Boosting
    # -------------------------------------------------------------------------

    def check_overrides(
        self, sentence: str, tokens: Sequence[str], confidence: float
    ) -> Optional[Tuple[Intent, float]]:
        """Return (intent, confidence) when a high-priority pattern fires."""
        cfg = self.config
        if any(contains_phrase(sentence, term) for term in cfg.instruction_terms):
            return None

        has_number = CONTRACT_NUMBER.search(sentence) is not None

        if self.mentions(sentence, tokens, cfg.expiration_terms):
            intent = (
                Intent.GET_CONTRACT_EXPIRATION
                if has_number
                else Intent.LIST_EXPIRED_CONTRACTS
            )
            return intent, _floor(confidence, cfg.expiration_boost)

        if self.mentions(sentence, tokens, cfg.active_terms):
            intent = Intent.CONTRACT_STATUS if has_number else Intent.LIST_ACTIVE_CONTRACTS
            return intent, _floor(confidence, cfg.active_boost)

        if not has_number and (
            any(t in cfg.business_names for t in tokens)
            or self.mentions(sentence, tokens, cfg.customer_terms)
        ):
            return Intent.FILTER_CONTRACTS_BY_CUSTOMER, _floor(
                confidence, cfg.customer_boost
            )

        if self.mentions(sentence, tokens, cfg.search_terms):
            return Intent.SEARCH_CONTRACTS, _floor(confidence, cfg.search_boost)

        return None

    def boost(
        self,
        normalized_query: str,
        tokens: Optional[Sequence[str]],
        best_category: Union[str, Intent],
        best_confidence: float,
    ) -> Tuple[Intent, float]:
        sentence = normalized_query.lower()
        words: List[str] = [t.lower() for t in (tokens or sentence.split())]
        current = to_intent(best_category)

        override = self.check_overrides(sentence, words, best_confidence)
        if override is not None:
            intent, confidence = override
            logger.debug(f"Override -> {intent.value} ({confidence:.2f})")
            return intent, min(1.0, confidence)

        best_intent, best_score = current, best_confidence
        # The statistical pick goes first so it keeps ties.
        candidates = [current] + [i for i in self.config.intent_keywords if i != current]
        for intent in candidates:
            if intent not in self.config.intent_keywords:
                continue
            score = self.keyword_score(intent, sentence, words)
            if score <= 0:
                continue
            boosted = best_confidence + self.config.keyword_blend * score
            if boosted > best_score:
                best_intent, best_score = intent, boosted

        if best_intent != current:
            logger.debug(
                f"Keyword boost moved {current.value} -> {best_intent.value} "
                f"({best_score:.2f})"
            )
        return best_intent, max(0.0, min(1.0, best_score))


def _floor(confidence: float, boost: Tuple[float, float]) -> float:
    increment, minimum = boost
    return max(confidence + increment, minimum)
