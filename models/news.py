from pydantic import BaseModel, Field, HttpUrl
from datetime import datetime
from typing import Optional

class Article(BaseModel):
    """News article data model."""

    title: str = Field(..., description="Article headline")
    description: Optional[str] = Field(None, description="Article summary")
    url: HttpUrl = Field(..., description="Article URL")
    published_at: datetime = Field(..., description="Publication timestamp")
    source: Optional[str] = Field(None, description="News outlet name")
    sentiment: Optional[float] = Field(
        None, ge=-1.0, le=1.0, description="Per-article sentiment score"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Apple Reports Record Earnings",
                "description": "Apple Inc. reported record quarterly earnings...",
                "url": "https://example.com/article",
                "published_at": "2025-11-02T10:00:00Z",
                "source": "Reuters",
                "sentiment": 0.45
            }
        }
