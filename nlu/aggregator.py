"""Final confidence, threshold filtering, missing fields and action directives."""

from typing import List, Mapping, Sequence, Tuple

from nlu.catalog import Intent
from nlu.config import PipelineConfig
from utils.logger import get_logger

logger = get_logger(__name__)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class ConfidenceAggregator:
    """Combines shape confidences and entity evidence, then applies thresholds."""

    def __init__(self, config: PipelineConfig):
        self.config = config

    def finalize(
        self,
        query_type_confidence: float,
        action_type_confidence: float,
        entities: Mapping,
        missing_fields: Sequence[str] = (),
    ) -> float:
        """(q + a) / 2 + bonus * min(|entities|, cap) - penalty * |missing|, clamped."""
        cfg = self.config
        base = (query_type_confidence + action_type_confidence) / 2
        bonus = cfg.entity_bonus * min(len(entities), cfg.entity_bonus_cap)
        penalty = cfg.missing_field_penalty * len(missing_fields)
        return clamp(base + bonus - penalty)

    def accept(self, intent: Intent, confidence: float) -> Intent:
        """Return intent, or UNKNOWN when confidence is under its threshold."""
        if intent is Intent.UNKNOWN:
            return intent
        threshold = self.config.threshold_for(intent)
        if confidence < threshold:
            logger.debug(
                f"Rejected {intent.value}: {confidence:.2f} < threshold {threshold:.2f}"
            )
            return Intent.UNKNOWN
        return intent

    def missing_fields(self, intent: Intent, entities: Mapping) -> List[str]:
        required = self.config.required_fields.get(intent, ())
        return [name for name in required if name not in entities]

    def directive(self, intent: Intent, entities: Mapping, missing: List[str]) -> str:
        if intent is Intent.SHOW_CONTRACT:
            if "contractNumber" in entities:
                return "retrieve_and_display"
            return "request_contract_number"
        if intent is Intent.CREATE_CONTRACT:
            return "request_missing_fields" if missing else "proceed_with_creation"
        return self.config.directives.get(intent, "clarify_intent")

    def resolve(
        self,
        intent: Intent,
        boosted_confidence: float,
        query_type_confidence: float,
        action_type_confidence: float,
        entities: Mapping,
    ) -> Tuple[Intent, float, List[str], str]:
        """Run the final stage: (intent, confidence, missing_fields, directive)."""
        missing = self.missing_fields(intent, entities)
        evidence = self.finalize(
            query_type_confidence, action_type_confidence, entities, missing
        )
        confidence = clamp(max(boosted_confidence, evidence))

        accepted = self.accept(intent, confidence)
        if accepted is Intent.UNKNOWN:
            missing = []
        return accepted, confidence, missing, self.directive(accepted, entities, missing)
