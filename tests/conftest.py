import os
import sys
from datetime import date

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nlu.classifier import ContractIntentClassifier
from nlu.config import build_default_config
from nlu.entities import EntityExtractor
from nlu.lexicon import Lexicon
from nlu.normalizer import Normalizer

TODAY = date(2025, 6, 15)


@pytest.fixture(scope="session")
def config():
    return build_default_config()


@pytest.fixture(scope="session")
def lexicon(config):
    return Lexicon(config)


@pytest.fixture(scope="session")
def normalizer(lexicon):
    return Normalizer(lexicon)


@pytest.fixture(scope="session")
def extractor(config):
    return EntityExtractor(config, clock=lambda: TODAY)


@pytest.fixture(scope="session")
def classifier(config):
    """Classifier trained once on the seed corpus."""
    clf = ContractIntentClassifier(config=config, clock=lambda: TODAY)
    clf.train()
    return clf
