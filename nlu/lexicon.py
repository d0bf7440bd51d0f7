"""
Lexicon and string similarity.

similarity(a, b) blends three measures:
- Jaro-Winkler (rewards shared prefixes)
- Jaccard over character sets
- longest common subsequence, normalized by the longer string

All three are symmetric, so similarity(a, b) == similarity(b, a) holds for
the default weights. Callers should still only rely on it being close.
"""

from typing import Tuple

from rapidfuzz.distance import JaroWinkler, LCSseq, Levenshtein

from nlu.config import PipelineConfig


def jaccard(a: str, b: str) -> float:
    set_a, set_b = set(a), set(b)
    if not set_a and not set_b:
        return 1.0
    return len(set_a & set_b) / len(set_a | set_b)


def levenshtein(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def is_typo_match(token: str, keyword: str) -> bool:
    """True when token is within edit distance max(1, len(keyword)//3) of keyword."""
    token = token.lower()
    keyword = keyword.lower()
    if abs(len(token) - len(keyword)) > 3:
        return False
    return levenshtein(token, keyword) <= max(1, len(keyword) // 3)


class Lexicon:
    """Dictionary of known word-forms with similarity lookup."""

    def __init__(self, config: PipelineConfig):
        self.config = config
        self._entries = config.dictionary
        self._weights = config.similarity_weights

    def __contains__(self, word: str) -> bool:
        return self.config.in_dictionary(word)

    def __len__(self) -> int:
        return len(self._entries)

    def similarity(self, a: str, b: str) -> float:
        a = a.lower()
        b = b.lower()
        if a == b:
            return 1.0
        w_jw, w_jac, w_lcs = self._weights
        score = (
            w_jw * JaroWinkler.normalized_similarity(a, b)
            + w_jac * jaccard(a, b)
            + w_lcs * LCSseq.normalized_similarity(a, b)
        )
        return max(0.0, min(1.0, score))

    def scored_match(self, word: str) -> Tuple[str, float]:
        """Return the highest scoring dictionary entry and its score.

        Entries are scanned in insertion order and a later entry only wins
        with a strictly higher score, so ties go to the earlier entry.
        """
        best, best_score = word, 0.0
        for entry in self._entries:
            score = self.similarity(word, entry)
            if score > best_score:
                best, best_score = entry, score
        return best, best_score

    def best_match(self, word: str, threshold: float) -> str:
        """Closest dictionary entry scoring >= threshold, else word unchanged."""
        if not word:
            return word
        candidate, score = self.scored_match(word)
        if score >= threshold:
            return candidate
        return word
