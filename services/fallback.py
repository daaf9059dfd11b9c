"""Wrappers that substitute sample data when a real provider fails."""

from typing import List
from models.news import Article
from models.market import StockQuote
from services.base import NewsProvider, PriceProvider
from utils.logger import get_logger

logger = get_logger("fallback")


class FallbackNewsProvider(NewsProvider):
    """Try the primary news source; on any failure use the fallback."""

    def __init__(self, primary: NewsProvider, fallback: NewsProvider):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    async def fetch_news(self, symbol: str, limit: int = 10) -> List[Article]:
        try:
            return await self.primary.fetch_news(symbol, limit)
        except Exception as e:
            logger.warning(
                "news_provider_failed_using_fallback",
                provider=self.primary.name,
                fallback=self.fallback.name,
                symbol=symbol,
                error=str(e)
            )
            return await self.fallback.fetch_news(symbol, limit)


class FallbackPriceProvider(PriceProvider):
    """Try the primary price source; on any failure use the fallback."""

    def __init__(self, primary: PriceProvider, fallback: PriceProvider):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    async def fetch_quote(self, symbol: str) -> StockQuote:
        try:
            return await self.primary.fetch_quote(symbol)
        except Exception as e:
            logger.warning(
                "price_provider_failed_using_fallback",
                provider=self.primary.name,
                fallback=self.fallback.name,
                symbol=symbol,
                error=str(e)
            )
            return await self.fallback.fetch_quote(symbol)
