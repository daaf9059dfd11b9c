from pydantic import BaseModel, Field
from datetime import datetime, timezone
from enum import Enum
from models.market import StockQuote
from models.news import Article
from models.recommendation import Recommendation

class SentimentSummary(str, Enum):
    """Sentiment classification."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    NO_DATA = "No sentiment data available"

class SentimentResult(BaseModel):
    """Aggregate sentiment over a batch of articles."""

    score: float = Field(..., ge=-1.0, le=1.0, description="Clamped aggregate score")
    summary: SentimentSummary = Field(..., description="Overall sentiment")

    class Config:
        frozen = True

class StockAnalysis(BaseModel):
    """Everything the dashboard renders for one symbol."""

    symbol: str = Field(..., description="Stock symbol")
    stock_data: StockQuote
    news: list[Article] = Field(default_factory=list)
    sentiment: SentimentResult
    recommendation: Recommendation
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
