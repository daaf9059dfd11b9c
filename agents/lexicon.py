"""Weighted word lists for keyword sentiment scoring."""

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple

POSITIVE_WORDS = {
    "bull": 0.8, "bullish": 0.8, "surge": 0.7, "soar": 0.7, "rally": 0.6,
    "gain": 0.5, "gains": 0.5, "profit": 0.6, "profits": 0.6, "growth": 0.5,
    "rise": 0.4, "rising": 0.4, "up": 0.3, "increase": 0.4, "strong": 0.5,
    "buy": 0.6, "upgrade": 0.7, "outperform": 0.6, "beat": 0.5, "beats": 0.5,
    "positive": 0.4, "optimistic": 0.5, "confident": 0.4, "success": 0.5,
    "excellent": 0.7, "outstanding": 0.8, "breakthrough": 0.7, "innovation": 0.5,
}

NEGATIVE_WORDS = {
    "bear": 0.8, "bearish": 0.8, "crash": 0.9, "plunge": 0.8, "tumble": 0.7,
    "fall": 0.5, "falling": 0.5, "drop": 0.5, "decline": 0.5, "loss": 0.6,
    "losses": 0.6, "down": 0.3, "decrease": 0.4, "weak": 0.5, "sell": 0.6,
    "downgrade": 0.7, "underperform": 0.6, "miss": 0.5, "misses": 0.5,
    "negative": 0.4, "concern": 0.4, "concerns": 0.4, "risk": 0.5, "risks": 0.5,
    "warning": 0.6, "challenge": 0.4, "challenges": 0.4, "trouble": 0.6,
}

# Inflected headline forms missing from the word lists above. Matching is
# whole-word, so without these "surges" or "downgraded" would score nothing.
# Each one takes its base word's weight and sign.
INFLECTIONS = {
    "surges": "surge", "soars": "soar", "rallies": "rally", "rises": "rise",
    "increases": "increase", "upgraded": "upgrade",
    "crashes": "crash", "plunges": "plunge", "tumbles": "tumble",
    "falls": "fall", "drops": "drop", "declines": "decline",
    "decreases": "decrease", "downgraded": "downgrade",
}

for _inflection, _base in INFLECTIONS.items():
    _words = POSITIVE_WORDS if _base in POSITIVE_WORDS else NEGATIVE_WORDS
    _words[_inflection] = _words[_base]


class Lexicon:
    """Immutable word -> weight table split into positive and negative sets.

    Words are matched case-insensitively on word boundaries, so ``bull``
    never matches inside ``bullion``.
    """

    def __init__(self, positive: Mapping[str, float], negative: Mapping[str, float]):
        self.positive = MappingProxyType(self._normalize(positive))
        self.negative = MappingProxyType(self._normalize(negative))
        self._patterns: Tuple[Tuple[str, re.Pattern, float], ...] = tuple(
            [(word, self._compile(word), weight) for word, weight in self.positive.items()]
            + [(word, self._compile(word), -weight) for word, weight in self.negative.items()]
        )

    @staticmethod
    def _normalize(words: Mapping[str, float]) -> dict:
        normalized = {}
        for word, weight in words.items():
            if weight <= 0:
                raise ValueError(f"Lexicon weight for '{word}' must be positive, got {weight}")
            normalized[word.strip().lower()] = float(weight)
        return normalized

    @staticmethod
    def _compile(word: str) -> re.Pattern:
        return re.compile(rf"\b{re.escape(word)}\b")

    def matches(self, text: str) -> List[Tuple[str, int, float]]:
        """Return (word, count, signed weight) for every word found in text."""
        found = []
        for word, pattern, weight in self._patterns:
            count = len(pattern.findall(text))
            if count:
                found.append((word, count, weight))
        return found

    def __len__(self) -> int:
        return len(self.positive) + len(self.negative)


DEFAULT_LEXICON = Lexicon(POSITIVE_WORDS, NEGATIVE_WORDS)
