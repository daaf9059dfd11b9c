"""Capability interfaces for news and price data sources."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import httpx
from models.news import Article
from models.market import StockQuote
from utils.logger import get_logger


class ProviderError(Exception):
    """Raised when a data source returns an error or an unusable payload."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class NewsProvider(ABC):
    """Source of news articles for a symbol."""

    name = "news"

    @abstractmethod
    async def fetch_news(self, symbol: str, limit: int = 10) -> List[Article]:
        """
        Fetch recent articles about a symbol.

        Args:
            symbol: Stock symbol (e.g., "AAPL")
            limit: Maximum articles to return

        Returns:
            List of Article objects
        """


class PriceProvider(ABC):
    """Source of current price and intraday series for a symbol."""

    name = "price"

    @abstractmethod
    async def fetch_quote(self, symbol: str) -> StockQuote:
        """
        Fetch the current quote and chart data for a symbol.

        Args:
            symbol: Stock symbol (e.g., "AAPL")

        Returns:
            StockQuote
        """


class HttpProvider:
    """Shared JSON-over-HTTP plumbing for the real providers."""

    name = "http"

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            timeout: Request timeout in seconds
            client: Pre-built client (tests pass one with a mock transport)
        """
        self.timeout = timeout
        self._client = client
        self.logger = get_logger(f"provider.{self.name}")

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        if self._client is not None:
            response = await self._client.get(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params, headers=headers)

        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError(self.name, f"response is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ProviderError(
                self.name,
                f"expected a JSON object, got {type(payload).__name__}"
            )
        return payload
