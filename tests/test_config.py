import pytest
from pydantic import ValidationError
from config.settings import Settings, settings

def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)

def test_global_settings_load():
    """Global settings instance should load without any API keys."""
    assert settings.news_provider in ["mock", "newsapi", "gnews", "alpaca"]
    assert settings.price_provider in ["mock", "yahoo", "alphavantage"]

def test_settings_defaults(monkeypatch):
    """Settings should have correct defaults."""
    for var in ["NEWS_PROVIDER", "PRICE_PROVIDER", "SENTIMENT_STRATEGY",
                "SENTIMENT_THRESHOLD", "MAX_ARTICLES", "FALLBACK_TO_MOCK"]:
        monkeypatch.delenv(var, raising=False)
    config = make_settings()
    assert config.news_provider == "mock"
    assert config.price_provider == "mock"
    assert config.sentiment_strategy == "lexicon"
    assert config.sentiment_threshold == 0.2
    assert config.max_articles == 10
    assert config.fallback_to_mock == True

def test_settings_reject_unknown_provider():
    """Unknown provider names should fail validation."""
    with pytest.raises(ValidationError):
        make_settings(news_provider="carrier-pigeon")

def test_settings_reject_invalid_threshold():
    """Threshold must stay inside [0, 1)."""
    with pytest.raises(ValidationError):
        make_settings(sentiment_threshold=1.5)

def test_missing_api_keys_for_mock_providers():
    """Mock providers need no keys."""
    config = make_settings(news_provider="mock", price_provider="mock")
    assert config.missing_api_keys() == []

def test_missing_api_keys_reports_selected_providers():
    """Only keys for the selected providers are reported."""
    config = make_settings(
        news_provider="newsapi",
        price_provider="alphavantage",
        newsapi_api_key=None,
        alpha_vantage_api_key=None,
        gnews_api_key=None
    )
    assert config.missing_api_keys() == ["NEWSAPI_API_KEY", "ALPHA_VANTAGE_API_KEY"]

def test_placeholder_api_key_counts_as_missing():
    """Sample placeholder values are not real keys."""
    config = make_settings(news_provider="gnews", gnews_api_key="your-gnews-api-key-here")
    assert "GNEWS_API_KEY" in config.missing_api_keys()

def test_yahoo_needs_no_key():
    config = make_settings(news_provider="mock", price_provider="yahoo")
    assert config.missing_api_keys() == []
