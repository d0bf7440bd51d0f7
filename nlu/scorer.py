"""
Statistical intent scorer.

Wraps a scikit-learn text classifier trained on (label, tokens) pairs:
TF-IDF features over whitespace tokens, then either a maximum-entropy model
(LogisticRegression) or multinomial Naive Bayes.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.naive_bayes import MultinomialNB
from sklearn.preprocessing import LabelEncoder

from nlu.errors import NotInitializedError
from utils.logger import get_logger

logger = get_logger(__name__)

ALGORITHMS = ("maxent", "naive_bayes")

_NUMBER = re.compile(r"^[#$]?\d[\d.,/-]*$")


def token_features(tokens: Sequence[str]) -> List[str]:
    """Lowercased unigrams and bigrams; numeric tokens collapse to one feature."""
    words = ["<num>" if _NUMBER.match(t) else t.lower() for t in tokens]
    bigrams = [f"{a} {b}" for a, b in zip(words, words[1:])]
    return words + bigrams


@dataclass(frozen=True)
class TrainingParameters:
    iterations: int = 200
    cutoff: int = 1
    algorithm: str = "maxent"


@dataclass(frozen=True)
class CategoryScores:
    """Statistical scores for one query."""

    best_category: str
    best_confidence: float
    distribution: Dict[str, float] = field(default_factory=dict)


class IntentModel:
    """Trained classifier with a fixed, ordered category list."""

    def __init__(self, vectorizer, estimator, label_encoder, algorithm: str):
        self.vectorizer = vectorizer
        self.estimator = estimator
        self.label_encoder = label_encoder
        self.algorithm = algorithm

    @property
    def categories(self) -> List[str]:
        return [str(name) for name in self.label_encoder.classes_]

    def categorize(self, tokens: Sequence[str]) -> List[float]:
        """Probability per category, aligned with `categories`."""
        features = self.vectorizer.transform([list(tokens)])
        return self.estimator.predict_proba(features)[0].tolist()

    def best_category(self, vector: Sequence[float]) -> int:
        return int(np.argmax(vector))

    def category_name(self, index: int) -> str:
        return self.categories[index]


def train_intent_model(
    samples: Iterable[Tuple[str, Sequence[str]]],
    params: Optional[TrainingParameters] = None,
) -> IntentModel:
    """Fit an IntentModel from (label, tokens) pairs."""
    params = params or TrainingParameters()
    if params.algorithm not in ALGORITHMS:
        raise ValueError(
            f"Unknown algorithm '{params.algorithm}', expected one of {ALGORITHMS}"
        )

    labels = []
    documents = []
    for label, tokens in samples:
        labels.append(label)
        documents.append(list(tokens))

    if len(set(labels)) < 2:
        raise ValueError("Training needs samples for at least two categories")

    vectorizer = TfidfVectorizer(analyzer=token_features, min_df=params.cutoff)
    X = vectorizer.fit_transform(documents)

    label_encoder = LabelEncoder()
    y = label_encoder.fit_transform(labels)

    if params.algorithm == "naive_bayes":
        estimator = MultinomialNB()
    else:
        estimator = LogisticRegression(max_iter=params.iterations)
    estimator.fit(X, y)

    logger.info(
        f"Trained {params.algorithm} intent model on {len(documents)} samples, "
        f"{len(label_encoder.classes_)} categories"
    )
    return IntentModel(vectorizer, estimator, label_encoder, params.algorithm)


class CategoryScorer:
    """Adapter between the pipeline and a loaded IntentModel."""

    def __init__(self, model: Optional[IntentModel] = None):
        self.model = model

    @property
    def is_loaded(self) -> bool:
        return self.model is not None

    def score(self, tokens: Sequence[str]) -> CategoryScores:
        if self.model is None:
            raise NotInitializedError()

        vector = self.model.categorize(tokens)
        best = self.model.best_category(vector)
        distribution = {
            name: float(prob) for name, prob in zip(self.model.categories, vector)
        }
        return CategoryScores(
            best_category=self.model.category_name(best),
            best_confidence=float(vector[best]),
            distribution=distribution,
        )
