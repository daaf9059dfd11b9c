from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Data sources
    news_provider: Literal["mock", "newsapi", "gnews", "alpaca"] = "mock"
    price_provider: Literal["mock", "yahoo", "alphavantage"] = "mock"
    fallback_to_mock: bool = True

    # API Keys
    newsapi_api_key: Optional[str] = None
    gnews_api_key: Optional[str] = None
    alpha_vantage_api_key: Optional[str] = None
    alpaca_api_key: Optional[str] = None
    alpaca_api_secret: Optional[str] = None

    # Fetch Configuration
    request_timeout: float = Field(default=10.0, gt=0)
    max_articles: int = Field(default=10, ge=1, le=100)
    news_hours_back: int = Field(default=72, ge=1)

    # Sentiment Configuration
    sentiment_strategy: Literal["lexicon", "polarity"] = "lexicon"
    sentiment_threshold: float = Field(default=0.2, ge=0.0, lt=1.0)

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def missing_api_keys(self) -> List[str]:
        """List the API keys the selected providers need but are not set."""
        required = {
            "newsapi": ["NEWSAPI_API_KEY"],
            "gnews": ["GNEWS_API_KEY"],
            "alpaca": ["ALPACA_API_KEY", "ALPACA_API_SECRET"],
            "yahoo": [],
            "alphavantage": ["ALPHA_VANTAGE_API_KEY"],
            "mock": [],
        }
        missing = []
        for provider in (self.news_provider, self.price_provider):
            for key in required[provider]:
                value = getattr(self, key.lower())
                # Placeholder values from sample .env files count as missing
                if not value or value.startswith("your-"):
                    missing.append(key)
        return missing

# Global settings instance
settings = Settings()
