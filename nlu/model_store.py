"""Persist trained intent models with joblib."""

from pathlib import Path

import joblib

from nlu.scorer import IntentModel
from utils.logger import get_logger

logger = get_logger(__name__)


def save_model(model: IntentModel, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(model, path)
    logger.info(f"Saved intent model to {path}")
    return path


def load_model(path) -> IntentModel:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No intent model at {path}")

    model = joblib.load(path)
    if not isinstance(model, IntentModel):
        raise TypeError(f"{path} does not contain an IntentModel")
    logger.info(f"Loaded intent model from {path} ({len(model.categories)} categories)")
    return model
