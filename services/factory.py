"""Build news and price providers from explicit settings."""

from typing import Optional
from config.settings import Settings
from services.alpaca_news_service import AlpacaNewsProvider
from services.alphavantage_market_service import AlphaVantagePriceProvider
from services.base import NewsProvider, PriceProvider
from services.fallback import FallbackNewsProvider, FallbackPriceProvider
from services.gnews_service import GNewsProvider
from services.mock_news_service import MockNewsProvider
from services.mock_market_service import MockPriceProvider
from services.newsapi_service import NewsApiProvider
from services.yahoo_market_service import YahooPriceProvider
from utils.logger import get_logger

logger = get_logger("provider_factory")


def _configured(value: Optional[str]) -> bool:
    return bool(value) and not value.startswith("your-")


def build_news_provider(config: Settings) -> NewsProvider:
    """
    Create the news provider selected by ``config.news_provider``.

    A real provider without its API key is replaced by the mock provider.
    With ``fallback_to_mock`` the real provider is wrapped so fetch failures
    return sample articles.
    """
    provider: Optional[NewsProvider] = None
    name = config.news_provider

    if name == "newsapi" and _configured(config.newsapi_api_key):
        provider = NewsApiProvider(config.newsapi_api_key, timeout=config.request_timeout)
    elif name == "gnews" and _configured(config.gnews_api_key):
        provider = GNewsProvider(config.gnews_api_key, timeout=config.request_timeout)
    elif (name == "alpaca" and _configured(config.alpaca_api_key)
            and _configured(config.alpaca_api_secret)):
        provider = AlpacaNewsProvider(
            config.alpaca_api_key,
            config.alpaca_api_secret,
            hours_back=config.news_hours_back
        )
    elif name != "mock":
        logger.warning("news_api_key_missing_using_mock", provider=name)

    if provider is None:
        return MockNewsProvider()

    if config.fallback_to_mock:
        provider = FallbackNewsProvider(provider, MockNewsProvider())

    logger.info("news_provider_selected", provider=provider.name)
    return provider


def build_price_provider(config: Settings) -> PriceProvider:
    """Create the price provider selected by ``config.price_provider``."""
    provider: Optional[PriceProvider] = None
    name = config.price_provider

    if name == "yahoo":
        provider = YahooPriceProvider(timeout=config.request_timeout)
    elif name == "alphavantage" and _configured(config.alpha_vantage_api_key):
        provider = AlphaVantagePriceProvider(
            config.alpha_vantage_api_key,
            timeout=config.request_timeout
        )
    elif name != "mock":
        logger.warning("price_api_key_missing_using_mock", provider=name)

    if provider is None:
        return MockPriceProvider()

    if config.fallback_to_mock:
        provider = FallbackPriceProvider(provider, MockPriceProvider())

    logger.info("price_provider_selected", provider=provider.name)
    return provider
