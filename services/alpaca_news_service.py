import asyncio
from typing import List, Optional, Any
from datetime import datetime, timedelta, timezone
from alpaca.data.historical import NewsClient
from alpaca.data.requests import NewsRequest
from models.news import Article
from services.base import NewsProvider
from utils.logger import get_logger

logger = get_logger("alpaca_news_service")

class AlpacaNewsProvider(NewsProvider):
    """Service for fetching news from Alpaca News API."""

    name = "alpaca"

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        hours_back: int = 72,
        client: Optional[Any] = None
    ):
        """
        Initialize Alpaca News Provider.

        Args:
            api_key: Alpaca API key
            api_secret: Alpaca API secret
            hours_back: How many hours back to search
            client: Pre-built NewsClient (or stand-in exposing get_news)
        """
        self.client = client or NewsClient(api_key, api_secret)
        self.hours_back = hours_back
        logger.info("alpaca_news_provider_initialized")

    async def fetch_news(self, symbol: str, limit: int = 10) -> List[Article]:
        """
        Fetch news articles for a symbol.

        Args:
            symbol: Stock symbol (e.g., "AAPL")
            limit: Maximum articles to return

        Returns:
            List of Article objects
        """
        articles = []

        try:
            start_time = datetime.now(timezone.utc) - timedelta(hours=self.hours_back)
            request = NewsRequest(
                symbols=symbol,
                start=start_time,
                limit=limit
            )

            logger.info(
                "fetching_news",
                symbol=symbol,
                hours_back=self.hours_back,
                limit=limit
            )

            # NewsClient is synchronous; keep it off the event loop
            news_set = await asyncio.to_thread(self.client.get_news, request)

            # NewsSet.data holds the article list under the 'news' key
            news_items = news_set.data.get('news', [])

            for item in news_items[:limit]:
                try:
                    articles.append(self._parse_news_item(item))
                except Exception as e:
                    logger.warning(
                        "news_item_parsing_failed",
                        error=str(e),
                        item_id=getattr(item, 'id', 'unknown')
                    )
                    continue

            logger.info("news_fetched", symbol=symbol, count=len(articles))

        except Exception as e:
            logger.error(
                "news_fetch_failed",
                symbol=symbol,
                error=str(e)
            )
            raise

        return articles

    def _parse_news_item(self, item) -> Article:
        """
        Parse Alpaca news item into Article model.

        Args:
            item: Alpaca News object

        Returns:
            Article object
        """
        # Alpaca News object has: id, headline, summary, author, created_at, updated_at, url, symbols, source
        return Article(
            title=getattr(item, 'headline'),
            description=getattr(item, 'summary', None) or None,
            url=getattr(item, 'url'),
            published_at=getattr(item, 'created_at'),
            source=getattr(item, 'source', None) or 'Alpaca News'
        )
