"""
Pipeline configuration.

Two layers:
- `PipelineConfig`: the immutable vocabulary, thresholds and weights every
  component is constructed with. Built once at startup.
- `Settings`: runtime knobs read from the environment (.env supported).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple

from dotenv import load_dotenv

from nlu import catalog
from nlu.catalog import Intent

load_dotenv()


@dataclass(frozen=True)
class PipelineConfig:
    """Read-only tables and constants shared by the pipeline components."""

    dictionary: Tuple[str, ...]
    abbreviations: Mapping[str, str]
    thresholds: Mapping[Intent, float]
    intent_keywords: Mapping[Intent, Tuple[str, ...]]
    business_names: Tuple[str, ...]
    contract_fields: Tuple[str, ...]
    field_synonyms: Mapping[str, str]
    required_fields: Mapping[Intent, Tuple[str, ...]]
    directives: Mapping[Intent, str]

    expiration_terms: Tuple[str, ...] = tuple(catalog.EXPIRATION_TERMS)
    active_terms: Tuple[str, ...] = tuple(catalog.ACTIVE_TERMS)
    customer_terms: Tuple[str, ...] = tuple(catalog.CUSTOMER_TERMS)
    search_terms: Tuple[str, ...] = tuple(catalog.SEARCH_TERMS)
    instruction_terms: Tuple[str, ...] = tuple(catalog.INSTRUCTION_TERMS)

    # similarity = jaro_winkler*w0 + jaccard*w1 + subsequence*w2
    similarity_weights: Tuple[float, float, float] = (0.5, 0.3, 0.2)
    min_similarity: float = 0.7

    keyword_blend: float = 0.35
    min_typo_length: int = 4
    expiration_boost: Tuple[float, float] = (0.4, 0.85)
    active_boost: Tuple[float, float] = (0.3, 0.8)
    customer_boost: Tuple[float, float] = (0.3, 0.8)
    search_boost: Tuple[float, float] = (0.3, 0.75)

    entity_bonus: float = 0.1
    entity_bonus_cap: int = 5
    missing_field_penalty: float = 0.05
    query_type_floor: float = 0.5
    action_type_floor: float = 0.6

    _lookup: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "_lookup", frozenset(word.lower() for word in self.dictionary)
        )

    def in_dictionary(self, word: str) -> bool:
        return word.lower() in self._lookup

    def threshold_for(self, intent: Intent) -> float:
        return self.thresholds.get(intent, 1.0)


def _ordered_unique(words):
    seen = set()
    out = []
    for word in words:
        key = word.lower()
        if key not in seen:
            seen.add(key)
            out.append(word)
    return tuple(out)


def build_default_config() -> PipelineConfig:
    """Freeze the catalog tables into a PipelineConfig."""
    abbreviations = {k.lower(): v for k, v in catalog.ABBREVIATIONS.items()}

    # Abbreviation targets are dictionary words so normalization is idempotent.
    dictionary = _ordered_unique(
        list(catalog.CONTRACT_FIELDS)
        + list(catalog.BUSINESS_TERMS)
        + list(catalog.ACTION_WORDS)
        + list(catalog.BUSINESS_NAMES)
        + list(catalog.COMMON_WORDS)
        + list(catalog.MONTH_NAMES)
        + list(abbreviations.values())
    )

    return PipelineConfig(
        dictionary=dictionary,
        abbreviations=MappingProxyType(abbreviations),
        thresholds=MappingProxyType(dict(catalog.INTENT_THRESHOLDS)),
        intent_keywords=MappingProxyType(
            {intent: tuple(words) for intent, words in catalog.INTENT_KEYWORDS.items()}
        ),
        business_names=tuple(catalog.BUSINESS_NAMES),
        contract_fields=tuple(catalog.CONTRACT_FIELDS),
        field_synonyms=MappingProxyType(dict(catalog.FIELD_SYNONYMS)),
        required_fields=MappingProxyType(
            {intent: tuple(fields) for intent, fields in catalog.REQUIRED_FIELDS.items()}
        ),
        directives=MappingProxyType(dict(catalog.ACTION_DIRECTIVES)),
    )


# =============================================================================
# RUNTIME SETTINGS
# =============================================================================

DEFAULT_MODEL_PATH = Path("models") / "contract_intents.joblib"


@dataclass(frozen=True)
class Settings:
    """Environment-driven settings for training and model loading."""

    model_path: Path = DEFAULT_MODEL_PATH
    train_iterations: int = 200
    train_cutoff: int = 1
    algorithm: str = "maxent"


def load_settings() -> Settings:
    return Settings(
        model_path=Path(os.getenv("CONTRACT_NLU_MODEL_PATH", str(DEFAULT_MODEL_PATH))),
        train_iterations=int(os.getenv("CONTRACT_NLU_TRAIN_ITERATIONS", "200")),
        train_cutoff=int(os.getenv("CONTRACT_NLU_TRAIN_CUTOFF", "1")),
        algorithm=os.getenv("CONTRACT_NLU_ALGORITHM", "maxent").lower(),
    )
