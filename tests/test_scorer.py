"""
Tests for the statistical scorer and model persistence.

Run with: python -m pytest tests/test_scorer.py -v
"""

import pytest

from nlu.catalog import Intent
from nlu.errors import NotInitializedError
from nlu.model_store import load_model, save_model
from nlu.scorer import (
    CategoryScorer,
    TrainingParameters,
    token_features,
    train_intent_model,
)
from nlu.training_data import iter_training_samples


@pytest.fixture(scope="module")
def model(normalizer):
    return train_intent_model(iter_training_samples(normalizer), TrainingParameters())


class TestTraining:
    """Tests for train_intent_model."""

    def test_all_intents_are_categories(self, model):
        expected = {i.value for i in Intent if i is not Intent.UNKNOWN}
        assert set(model.categories) == expected

    def test_naive_bayes(self, normalizer):
        params = TrainingParameters(algorithm="naive_bayes")
        nb = train_intent_model(iter_training_samples(normalizer), params)
        assert nb.algorithm == "naive_bayes"
        assert len(nb.categorize(["show", "contract"])) == len(nb.categories)

    def test_unknown_algorithm(self):
        samples = [("a", ["x"]), ("b", ["y"])]
        with pytest.raises(ValueError):
            train_intent_model(samples, TrainingParameters(algorithm="svm"))

    def test_needs_two_labels(self):
        with pytest.raises(ValueError):
            train_intent_model([("a", ["x"]), ("a", ["y"])])

    def test_token_features(self):
        features = token_features(["Show", "contract", "123456"])
        assert features == [
            "show",
            "contract",
            "<num>",
            "show contract",
            "contract <num>",
        ]


class TestInference:
    """Tests for IntentModel and CategoryScorer."""

    def test_categorize_is_distribution(self, model):
        vector = model.categorize("show contract 123456".split())
        assert len(vector) == len(model.categories)
        assert sum(vector) == pytest.approx(1.0)

    def test_best_category(self, model):
        vector = model.categorize("show contract 123456".split())
        best = model.best_category(vector)
        assert vector[best] == max(vector)
        assert model.category_name(best) == model.categories[best]

    def test_scorer_output(self, model):
        scores = CategoryScorer(model).score("list all active contracts".split())
        assert scores.best_category in model.categories
        assert scores.best_confidence == max(scores.distribution.values())
        assert set(scores.distribution) == set(model.categories)

    def test_empty_tokens(self, model):
        scores = CategoryScorer(model).score([])
        assert 0.0 <= scores.best_confidence <= 1.0

    def test_not_initialized(self):
        scorer = CategoryScorer()
        assert not scorer.is_loaded
        with pytest.raises(NotInitializedError):
            scorer.score(["show", "contract"])


class TestModelStore:
    """Tests for joblib persistence."""

    def test_save_and_load(self, model, tmp_path):
        path = save_model(model, tmp_path / "models" / "intents.joblib")
        assert path.exists()

        loaded = load_model(path)
        tokens = "when does contract 123456 expire".split()
        assert loaded.categories == model.categories
        assert loaded.categorize(tokens) == pytest.approx(model.categorize(tokens))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_model(tmp_path / "missing.joblib")
