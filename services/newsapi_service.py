from typing import List, Optional
import httpx
from models.news import Article
from services.base import HttpProvider, NewsProvider, ProviderError

NEWSAPI_URL = "https://newsapi.org/v2/everything"


class NewsApiProvider(HttpProvider, NewsProvider):
    """Service for fetching news from NewsAPI.org."""

    name = "newsapi"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize NewsAPI provider.

        Args:
            api_key: NewsAPI key
            timeout: Request timeout in seconds
            client: Optional pre-built HTTP client
        """
        super().__init__(timeout=timeout, client=client)
        self.api_key = api_key
        self.logger.info("newsapi_provider_initialized")

    async def fetch_news(self, symbol: str, limit: int = 10) -> List[Article]:
        """
        Fetch the most recent English articles mentioning a symbol.

        Raises:
            ProviderError: If NewsAPI reports an error
            httpx.HTTPError: On transport failure or non-2xx response
        """
        self.logger.info("fetching_news", symbol=symbol, limit=limit)

        payload = await self._get_json(NEWSAPI_URL, params={
            "q": symbol,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": limit,
            "apiKey": self.api_key,
        })

        if payload.get("status") != "ok":
            raise ProviderError(self.name, payload.get("message", "unknown error"))

        articles = []
        for item in payload.get("articles", [])[:limit]:
            try:
                articles.append(self._parse_article(item))
            except Exception as e:
                self.logger.warning(
                    "news_item_parsing_failed",
                    error=str(e),
                    url=item.get("url", "unknown") if isinstance(item, dict) else "unknown"
                )
                continue

        self.logger.info("news_fetched", symbol=symbol, count=len(articles))
        return articles

    def _parse_article(self, item: dict) -> Article:
        # NewsAPI item: source{id,name}, author, title, description, url, publishedAt, content
        source = item.get("source") or {}
        return Article(
            title=item["title"],
            description=item.get("description"),
            url=item["url"],
            published_at=item["publishedAt"],
            source=source.get("name")
        )
