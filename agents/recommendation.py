"""Map sentiment and price movement to a trading recommendation."""

from typing import Optional
from agents.rules import ScoringRules, get_scoring_rules
from models.recommendation import Recommendation, RecommendationAction, ConfidenceLevel


def recommend(
    sentiment_score: float,
    price_change_percent: float,
    rules: Optional[ScoringRules] = None
) -> Recommendation:
    """
    Recommend an action from aggregate sentiment and the day's price change.

    Rules are checked top to bottom and the first match wins; strong signals
    need sentiment and price movement to agree beyond the strong thresholds.

    Args:
        sentiment_score: Aggregate sentiment in [-1, 1]
        price_change_percent: Signed percent price change
        rules: Thresholds (uses defaults if not provided)

    Returns:
        Recommendation
    """
    rules = rules or get_scoring_rules()

    if (sentiment_score > rules.strong_buy_sentiment and
            price_change_percent > rules.strong_buy_price_change):
        return Recommendation(action=RecommendationAction.STRONG_BUY, confidence=ConfidenceLevel.HIGH)

    if sentiment_score > rules.buy_sentiment and price_change_percent > rules.buy_price_change:
        return Recommendation(action=RecommendationAction.BUY, confidence=ConfidenceLevel.MEDIUM)

    if (sentiment_score < rules.strong_sell_sentiment and
            price_change_percent < rules.strong_sell_price_change):
        return Recommendation(action=RecommendationAction.STRONG_SELL, confidence=ConfidenceLevel.HIGH)

    if sentiment_score < rules.sell_sentiment and price_change_percent < rules.sell_price_change:
        return Recommendation(action=RecommendationAction.SELL, confidence=ConfidenceLevel.MEDIUM)

    return Recommendation(action=RecommendationAction.HOLD, confidence=ConfidenceLevel.MEDIUM)
