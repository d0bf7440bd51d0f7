"""
Contract query classifier.

Pipeline:
1. Normalize typos and abbreviations
2. Statistical scoring over the normalized tokens
3. Keyword boosting / overrides
4. Entity extraction from the original text
5. Confidence aggregation and per-intent threshold
"""

import time
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from nlu.aggregator import ConfidenceAggregator
from nlu.booster import KeywordBooster
from nlu.catalog import Intent
from nlu.config import PipelineConfig, Settings, build_default_config, load_settings
from nlu.entities import EntityExtractor
from nlu.errors import NotInitializedError
from nlu.lexicon import Lexicon
from nlu.model_store import load_model, save_model
from nlu.normalizer import Normalizer
from nlu.query_shape import QueryShapeDetector
from nlu.schemas import ClassificationResult
from nlu.scorer import CategoryScorer, IntentModel, TrainingParameters, train_intent_model
from nlu.statistics import UsageStatistics
from nlu.training_data import iter_training_samples
from utils.logger import get_logger

logger = get_logger(__name__)


class ContractIntentClassifier:
    """Turns one line of text into intent, confidence and entities."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        model: Optional[IntentModel] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.config = config or build_default_config()
        self.settings = settings or load_settings()
        self.lexicon = Lexicon(self.config)
        self.normalizer = Normalizer(self.lexicon)
        self.scorer = CategoryScorer(model)
        self.booster = KeywordBooster(self.config)
        self.shape = QueryShapeDetector(self.config)
        self.extractor = EntityExtractor(self.config, clock=clock)
        self.aggregator = ConfidenceAggregator(self.config)
        self.statistics = UsageStatistics()

    @property
    def is_ready(self) -> bool:
        return self.scorer.is_loaded

    # -------------------------------------------------------------------------
    # Model lifecycle
    # -------------------------------------------------------------------------

    def train(
        self,
        params: Optional[TrainingParameters] = None,
        samples: Optional[Iterable] = None,
    ) -> IntentModel:
        """Train on the seed corpus (or given samples) and use the result."""
        if params is None:
            params = TrainingParameters(
                iterations=self.settings.train_iterations,
                cutoff=self.settings.train_cutoff,
                algorithm=self.settings.algorithm,
            )
        if samples is None:
            samples = iter_training_samples(self.normalizer)
        model = train_intent_model(samples, params)
        self.scorer.model = model
        return model

    def load(self, path: Optional[Path] = None) -> IntentModel:
        model = load_model(path or self.settings.model_path)
        self.scorer.model = model
        return model

    def save(self, path: Optional[Path] = None) -> Path:
        if not self.scorer.is_loaded:
            raise NotInitializedError("Nothing to save: no intent model loaded")
        return save_model(self.scorer.model, path or self.settings.model_path)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def classify(self, query: str) -> ClassificationResult:
        if not self.scorer.is_loaded:
            raise NotInitializedError("classify() called before an intent model was loaded")

        start_time = time.perf_counter()
        original = query or ""
        text = original.strip()

        if not text:
            result = ClassificationResult(
                intent=Intent.UNKNOWN,
                confidence=0.0,
                action_required=self.aggregator.directive(Intent.UNKNOWN, {}, []),
                original_query=original,
            )
            self._record(result, start_time)
            return result

        normalized = self.normalizer.normalize(text)
        tokens = normalized.split()

        scores = self.scorer.score(tokens)
        intent, boosted = self.booster.boost(
            normalized, tokens, scores.best_category, scores.best_confidence
        )

        entities = self.extractor.extract(text)

        query_type = self.shape.detect_query_type(normalized)
        action_type = self.shape.detect_action_type(normalized)
        intent, confidence, missing, directive = self.aggregator.resolve(
            intent,
            boosted,
            self.shape.query_type_confidence(normalized),
            self.shape.action_type_confidence(normalized),
            entities,
        )

        result = ClassificationResult(
            intent=intent,
            confidence=confidence,
            entities=entities,
            missing_fields=missing,
            action_required=directive,
            original_query=original,
            normalized_query=normalized,
            query_type=query_type,
            action_type=action_type,
            intent_scores=scores.distribution,
        )
        self._record(result, start_time)
        logger.debug(
            f"'{original}' -> {intent.value} ({confidence:.2f}), "
            f"entities={sorted(entities)}"
        )
        return result

    def classify_batch(self, queries: Iterable[str]) -> List[ClassificationResult]:
        return [self.classify(query) for query in queries]

    def _record(self, result: ClassificationResult, start_time: float):
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self.statistics.record(result.intent, elapsed_ms)


# =============================================================================
# SINGLETON
# =============================================================================

_classifier_instance = None


def get_classifier(settings: Optional[Settings] = None) -> ContractIntentClassifier:
    """Get or create the shared classifier.

    Loads the model from the configured path, training on the seed corpus when
    no saved model exists yet.
    """
    global _classifier_instance
    if _classifier_instance is None:
        classifier = ContractIntentClassifier(settings=settings)
        if classifier.settings.model_path.exists():
            classifier.load()
        else:
            logger.info(
                f"No model at {classifier.settings.model_path}, training on seed corpus"
            )
            classifier.train()
        _classifier_instance = classifier
    return _classifier_instance
