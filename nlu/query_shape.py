"""Query type and action type detection with their confidences."""

import re
from collections import defaultdict
from typing import Dict, List

from rapidfuzz.distance import JaroWinkler

from nlu import catalog
from nlu.catalog import ActionType, QueryType
from nlu.config import PipelineConfig

CONTRACT_NUMBER = re.compile(
    r"\b(?:contract|contrct|cntract|contarct)?\s*(?:num(?:ber)?|no|#)?\s*(\d{6,8})\b"
)
ACCOUNT_NUMBER = re.compile(
    r"\b(?:account|acount|acc(?:ount)?|acct)\s*(?:num(?:ber)?|no|#)?\s*(\d{6,8})\b"
)

CUE_WEIGHT = 3
PATTERN_WEIGHT = 2


def _words(query: str) -> List[str]:
    return re.findall(r"[a-z]+", query.lower())


def _has_cue(words: List[str], cues: List[str]) -> bool:
    return any(cue in words for cue in cues)


class QueryShapeDetector:
    """Classifies the shape (QueryType) and operation (ActionType) of a query."""

    def __init__(self, config: PipelineConfig):
        self.query_floor = config.query_type_floor
        self.action_floor = config.action_type_floor

    # -------------------------------------------------------------------------
    # Query type
    # -------------------------------------------------------------------------

    def detect_query_type(self, query: str) -> QueryType:
        words = _words(query)
        for query_type, cues in catalog.QUERY_TYPE_CUES:
            if _has_cue(words, cues):
                return query_type
        if CONTRACT_NUMBER.search(query.lower()):
            return QueryType.SPECIFIC
        if _has_cue(words, catalog.FILTER_CUES):
            return QueryType.FILTER
        return QueryType.GENERAL

    def query_type_votes(self, query: str) -> Dict[QueryType, int]:
        words = _words(query)
        lowered = query.lower()
        votes: Dict[QueryType, int] = defaultdict(int)
        for query_type, cues in catalog.QUERY_TYPE_CUES:
            if _has_cue(words, cues):
                votes[query_type] += CUE_WEIGHT
        if _has_cue(words, catalog.FILTER_CUES):
            votes[QueryType.FILTER] += CUE_WEIGHT
        if CONTRACT_NUMBER.search(lowered):
            votes[QueryType.SPECIFIC] += PATTERN_WEIGHT
        if ACCOUNT_NUMBER.search(lowered):
            votes[QueryType.FILTER] += PATTERN_WEIGHT
        return votes

    def query_type_confidence(self, query: str) -> float:
        query_type = self.detect_query_type(query)
        if query_type is QueryType.GENERAL:
            return 0.0
        votes = self.query_type_votes(query)
        top = max(votes.values(), default=0)
        share = votes[query_type] / top if top else 0.0
        return max(share, self.query_floor)

    # -------------------------------------------------------------------------
    # Action type
    # -------------------------------------------------------------------------

    def detect_action_type(self, query: str) -> ActionType:
        words = _words(query)
        for action_type, cues in catalog.ACTION_TYPE_CUES:
            if _has_cue(words, cues):
                return action_type
        return ActionType.UNKNOWN

    def action_type_scores(self, query: str) -> Dict[ActionType, float]:
        words = _words(query)
        scores: Dict[ActionType, float] = defaultdict(float)
        for keyword, action_type in catalog.ACTION_KEYWORDS.items():
            best = max(
                (JaroWinkler.normalized_similarity(w, keyword) for w in words),
                default=0.0,
            )
            if best > 0.7:
                scores[action_type] += best
            if keyword in words:
                scores[action_type] += 1.0
        return scores

    def action_type_confidence(self, query: str) -> float:
        action_type = self.detect_action_type(query)
        if action_type is ActionType.UNKNOWN:
            return 0.0
        scores = self.action_type_scores(query)
        top = max(scores.values(), default=0.0)
        share = scores[action_type] / top if top else 0.0
        return max(share, self.action_floor)
