from pydantic import BaseModel, Field
from enum import Enum

class RecommendationAction(str, Enum):
    """Trading action shown to the user."""
    STRONG_BUY = "STRONG BUY"
    BUY = "BUY"
    HOLD = "HOLD"
    SELL = "SELL"
    STRONG_SELL = "STRONG SELL"

class ConfidenceLevel(str, Enum):
    """How strongly sentiment and price movement agree."""
    HIGH = "High"
    MEDIUM = "Medium"

class Recommendation(BaseModel):
    """Recommendation data model."""

    action: RecommendationAction = Field(..., description="Suggested action")
    confidence: ConfidenceLevel = Field(..., description="Confidence tier")

    class Config:
        frozen = True
