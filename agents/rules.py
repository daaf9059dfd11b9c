"""Sentiment classification and recommendation thresholds."""

from pydantic import BaseModel, Field


class ScoringRules(BaseModel):
    """Thresholds for sentiment classification and recommendations."""

    # Sentiment classification
    classification_threshold: float = Field(
        default=0.2,
        ge=0.0,
        lt=1.0,
        description="Positive if score > this value, Negative if score < -this value"
    )

    # STRONG BUY
    strong_buy_sentiment: float = Field(
        default=0.3,
        description="Strong buy if sentiment score > this value"
    )
    strong_buy_price_change: float = Field(
        default=2.0,
        description="...and price change percent > this value"
    )

    # BUY
    buy_sentiment: float = Field(
        default=0.1,
        description="Buy if sentiment score > this value"
    )
    buy_price_change: float = Field(
        default=0.0,
        description="...and price change percent > this value"
    )

    # STRONG SELL
    strong_sell_sentiment: float = Field(
        default=-0.3,
        description="Strong sell if sentiment score < this value"
    )
    strong_sell_price_change: float = Field(
        default=-2.0,
        description="...and price change percent < this value"
    )

    # SELL
    sell_sentiment: float = Field(
        default=-0.1,
        description="Sell if sentiment score < this value"
    )
    sell_price_change: float = Field(
        default=0.0,
        description="...and price change percent < this value"
    )

    class Config:
        frozen = True


# Global rules instance
default_rules = ScoringRules()


def get_scoring_rules() -> ScoringRules:
    """Get the default scoring rules."""
    return default_rules
