import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from models.news import Article
from services.base import NewsProvider
from utils.logger import get_logger

logger = get_logger("mock_news_service")

NEWS_SOURCES = ["Reuters", "Bloomberg", "CNBC", "MarketWatch", "Yahoo Finance", "Financial Times"]

NEWS_TYPES = [
    "earnings", "analysis", "upgrade", "downgrade", "merger", "acquisition",
    "regulatory", "market", "innovation", "partnership", "guidance", "lawsuit"
]

HEADLINES = {
    "earnings": ["{symbol} Reports Q{quarter} Earnings", "{symbol} Beats/Misses Expectations"],
    "analysis": ["Market Analysis: {symbol} Stock Outlook", "{symbol} Technical Analysis Update"],
    "upgrade": ["Analysts Upgrade {symbol} Price Target", "{symbol} Gets Buy Rating from Major Bank"],
    "downgrade": ["{symbol} Downgraded by Analysts", "Concerns Rise Over {symbol} Performance"],
    "regulatory": ["{symbol} Faces New Regulatory Requirements", "Government Policy Impact on {symbol}"],
    "innovation": ["{symbol} Announces New Technology", "{symbol} Innovation Could Boost Revenue"],
}
GENERIC_HEADLINES = ["{symbol} in the News", "Latest {symbol} Update"]

POSITIVE_TYPES = {"earnings", "upgrade", "innovation", "partnership"}
NEGATIVE_TYPES = {"downgrade", "lawsuit", "regulatory"}


class MockNewsProvider(NewsProvider):
    """Generates plausible synthetic headlines so the dashboard works offline."""

    name = "mock_news"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize Mock News Provider.

        Args:
            seed: Random seed for reproducible batches
        """
        self._random = random.Random(seed)

    async def fetch_news(self, symbol: str, limit: int = 12) -> List[Article]:
        """Generate 5-12 articles (capped at limit), newest first."""
        rng = self._random
        now = datetime.now(timezone.utc)
        count = min(5 + rng.randrange(8), limit)

        articles = []
        for i in range(count):
            source = rng.choice(NEWS_SOURCES)
            news_type = rng.choice(NEWS_TYPES)
            age = timedelta(milliseconds=rng.randrange(7_200_000))  # up to 2 hours

            template = rng.choice(HEADLINES.get(news_type, GENERIC_HEADLINES))
            title = template.format(symbol=symbol, quarter=rng.randint(1, 4))

            articles.append(Article(
                title=title,
                description=(
                    f"Latest developments regarding {symbol} and its {news_type} activities. "
                    "Market analysts are closely watching these developments."
                ),
                url=f"https://example.com/news/{symbol.lower()}-{news_type}-{int(now.timestamp() * 1000)}-{i}",
                published_at=now - age,
                source=source,
                sentiment=round(self._preset_sentiment(news_type), 2)
            ))

        articles.sort(key=lambda a: a.published_at, reverse=True)
        logger.info("mock_news_generated", symbol=symbol, count=len(articles))
        return articles

    def _preset_sentiment(self, news_type: str) -> float:
        if news_type in POSITIVE_TYPES:
            return 0.3 + self._random.random() * 0.5
        if news_type in NEGATIVE_TYPES:
            return -0.3 - self._random.random() * 0.5
        return (self._random.random() - 0.5) * 0.8
