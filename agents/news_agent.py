from typing import List, Optional
from agents.base import BaseAgent
from agents.lexicon import DEFAULT_LEXICON, Lexicon
from agents.sentiment import scoring_text, score_text, clamp_score
from models.news import Article
from services.base import NewsProvider

class NewsAgent(BaseAgent):
    """Agent responsible for assembling the news feed for a symbol."""

    def __init__(self, news_provider: NewsProvider, lexicon: Lexicon = DEFAULT_LEXICON):
        """
        Initialize News Agent.

        Args:
            news_provider: Source of articles
            lexicon: Word weights used to annotate per-article sentiment
        """
        super().__init__("news_agent")
        self.news_provider = news_provider
        self.lexicon = lexicon

    async def execute(self, symbol: str, max_articles: int = 10) -> List[Article]:
        """
        Fetch, de-duplicate and annotate news articles.

        Args:
            symbol: Stock symbol to fetch news for
            max_articles: Maximum articles to request

        Returns:
            Unique articles, newest first, each with a sentiment value
        """
        self._log_event("news_fetch_started", symbol=symbol, max_articles=max_articles)

        articles = await self.news_provider.fetch_news(symbol, limit=max_articles)

        unique_articles = self._filter_duplicates(articles)
        annotated = [self._annotate_sentiment(article) for article in unique_articles]
        annotated.sort(key=lambda a: a.published_at, reverse=True)

        self._log_event(
            "news_fetch_completed",
            symbol=symbol,
            total_fetched=len(articles),
            unique=len(unique_articles)
        )

        return annotated

    def _filter_duplicates(self, articles: List[Article]) -> List[Article]:
        """Remove duplicate articles based on URL."""
        seen_urls = set()
        unique = []

        for article in articles:
            url_str = str(article.url)
            if url_str not in seen_urls:
                seen_urls.add(url_str)
                unique.append(article)

        return unique

    def _annotate_sentiment(self, article: Article) -> Article:
        """
        Attach a per-article lexicon score unless the provider supplied one.

        Articles are immutable, so annotation returns a copy.
        """
        if article.sentiment is not None:
            return article
        score = self.score_article(article)
        if score is None:
            return article
        return article.model_copy(update={"sentiment": round(clamp_score(score), 2)})

    def score_article(self, article: Article) -> Optional[float]:
        """Raw lexicon score for a single article."""
        text = scoring_text(article)
        if text is None:
            return None
        return score_text(text, self.lexicon)
