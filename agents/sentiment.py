"""Keyword sentiment scoring for batches of news articles."""

from collections.abc import Mapping
from typing import Any, Iterable, Optional
from agents.lexicon import DEFAULT_LEXICON, Lexicon
from agents.rules import ScoringRules, get_scoring_rules
from models.analysis import SentimentResult, SentimentSummary


def scoring_text(record: Any) -> Optional[str]:
    """
    Build the case-folded text scored for an article-like record.

    Accepts Article models, plain objects and dicts exposing ``title`` and
    ``description``. Missing or non-text fields count as empty text.

    Returns:
        "<title> <description>" lower-cased, or None if the record exposes
        neither field and should be skipped
    """
    if isinstance(record, Mapping):
        if "title" not in record and "description" not in record:
            return None
        title = record.get("title")
        description = record.get("description")
    else:
        if not hasattr(record, "title") and not hasattr(record, "description"):
            return None
        title = getattr(record, "title", None)
        description = getattr(record, "description", None)

    title = title if isinstance(title, str) else ""
    description = description if isinstance(description, str) else ""
    return f"{title} {description}".lower()


def score_text(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> float:
    """Raw (unclamped) lexicon score of a piece of text."""
    return sum(weight * count for _, count, weight in lexicon.matches(text.lower()))


def clamp_score(score: float) -> float:
    return max(-1.0, min(1.0, score))


def classify_score(score: float, threshold: float) -> SentimentSummary:
    """Map a score to Positive / Negative / Neutral around +/- threshold."""
    if score > threshold:
        return SentimentSummary.POSITIVE
    if score < -threshold:
        return SentimentSummary.NEGATIVE
    return SentimentSummary.NEUTRAL


def score_sentiment(
    articles: Iterable[Any],
    lexicon: Lexicon = DEFAULT_LEXICON,
    rules: Optional[ScoringRules] = None
) -> SentimentResult:
    """
    Score a batch of articles with the weighted lexicon.

    Each article contributes +weight per occurrence of a positive word and
    -weight per occurrence of a negative word. The aggregate is the mean over
    scanned articles, clamped to [-1, 1].

    Args:
        articles: Article-like records (title, optional description)
        lexicon: Word weights to score with
        rules: Thresholds (uses defaults if not provided)

    Returns:
        SentimentResult; score 0 and "No sentiment data available" for an
        empty batch
    """
    rules = rules or get_scoring_rules()
    articles = list(articles or [])

    if not articles:
        return SentimentResult(score=0.0, summary=SentimentSummary.NO_DATA)

    total_score = 0.0
    analyzed_count = 0

    for record in articles:
        text = scoring_text(record)
        if text is None:
            continue
        total_score += score_text(text, lexicon)
        analyzed_count += 1

    average = total_score / analyzed_count if analyzed_count else 0.0

    return SentimentResult(
        score=clamp_score(average),
        summary=classify_score(average, rules.classification_threshold)
    )
