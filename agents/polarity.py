"""Sentiment scoring with the VADER polarity analyzer."""

from functools import lru_cache
from typing import Any, Iterable, Optional
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
from agents.rules import ScoringRules, get_scoring_rules
from agents.sentiment import scoring_text, clamp_score, classify_score
from models.analysis import SentimentResult, SentimentSummary


@lru_cache(maxsize=1)
def _default_analyzer() -> SentimentIntensityAnalyzer:
    # Loading the VADER lexicon reads a file; do it once per process
    return SentimentIntensityAnalyzer()


def score_sentiment_polarity(
    articles: Iterable[Any],
    analyzer: Optional[Any] = None,
    rules: Optional[ScoringRules] = None
) -> SentimentResult:
    """
    Score a batch of articles by averaging VADER compound polarity.

    Follows the same contract as ``score_sentiment``: empty batches report no
    data, records without text fields are skipped, the mean is clamped.

    Args:
        articles: Article-like records (title, optional description)
        analyzer: Object with ``polarity_scores(text) -> {"compound": float}``
        rules: Thresholds (uses defaults if not provided)
    """
    rules = rules or get_scoring_rules()
    analyzer = analyzer or _default_analyzer()
    articles = list(articles or [])

    if not articles:
        return SentimentResult(score=0.0, summary=SentimentSummary.NO_DATA)

    total_score = 0.0
    analyzed_count = 0

    for record in articles:
        text = scoring_text(record)
        if text is None:
            continue
        total_score += analyzer.polarity_scores(text).get("compound", 0.0)
        analyzed_count += 1

    average = total_score / analyzed_count if analyzed_count else 0.0

    return SentimentResult(
        score=clamp_score(average),
        summary=classify_score(average, rules.classification_threshold)
    )
