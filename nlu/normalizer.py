"""Typo and abbreviation normalization of raw queries."""

import re

from nlu.lexicon import Lexicon
from utils.logger import get_logger

logger = get_logger(__name__)

# Numbers, contract/account ids ("123456", "#1234567", "AC-1234567"), dates
# and amounts all carry a digit and are never rewritten.
ID_PATTERN = re.compile(r"\d")

_AFFIX = re.compile(r"^(\W*)(.*?)(\W*)$")


class Normalizer:
    """Rewrites a query word-by-word against the lexicon."""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon
        self.abbreviations = lexicon.config.abbreviations
        self.min_similarity = lexicon.config.min_similarity

    def normalize(self, query: str) -> str:
        if not query:
            return ""
        return " ".join(self.normalize_token(token) for token in query.split())

    def normalize_token(self, token: str) -> str:
        if ID_PATTERN.search(token):
            return token

        # Surrounding punctuation is kept as-is, only the core word is corrected.
        prefix, core, suffix = _AFFIX.match(token).groups()
        if not core or core in self.lexicon:
            return token

        replacement = self.abbreviations.get(core.lower())
        if replacement is None:
            replacement = self.lexicon.best_match(core, self.min_similarity)

        if replacement != core:
            logger.debug(f"Corrected '{core}' -> '{replacement}'")
        return f"{prefix}{replacement}{suffix}"
