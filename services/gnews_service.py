from typing import List, Optional
import httpx
from models.news import Article
from services.base import HttpProvider, NewsProvider, ProviderError

GNEWS_URL = "https://gnews.io/api/v4/search"


class GNewsProvider(HttpProvider, NewsProvider):
    """Service for fetching news from the GNews search API."""

    name = "gnews"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(timeout=timeout, client=client)
        self.api_key = api_key
        self.logger.info("gnews_provider_initialized")

    async def fetch_news(self, symbol: str, limit: int = 10) -> List[Article]:
        """
        Search GNews for articles about a symbol.

        Raises:
            ProviderError: If GNews returns an errors payload
            httpx.HTTPError: On transport failure or non-2xx response
        """
        self.logger.info("fetching_news", symbol=symbol, limit=limit)

        payload = await self._get_json(GNEWS_URL, params={
            "q": symbol,
            "lang": "en",
            "sortby": "publishedAt",
            "max": limit,
            "apikey": self.api_key,
        })

        if payload.get("errors"):
            errors = payload["errors"]
            message = "; ".join(errors) if isinstance(errors, list) else str(errors)
            raise ProviderError(self.name, message)

        articles = []
        for item in payload.get("articles", [])[:limit]:
            try:
                source = item.get("source") or {}
                articles.append(Article(
                    title=item["title"],
                    description=item.get("description"),
                    url=item["url"],
                    published_at=item["publishedAt"],
                    source=source.get("name")
                ))
            except Exception as e:
                self.logger.warning("news_item_parsing_failed", error=str(e))
                continue

        self.logger.info("news_fetched", symbol=symbol, count=len(articles))
        return articles
