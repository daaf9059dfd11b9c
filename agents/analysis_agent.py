import asyncio
from typing import Callable, Iterable, Optional
from agents.base import BaseAgent
from agents.news_agent import NewsAgent
from agents.recommendation import recommend
from agents.rules import ScoringRules, get_scoring_rules
from agents.sentiment import score_sentiment
from models.analysis import SentimentResult, StockAnalysis
from services.base import PriceProvider

SentimentScorer = Callable[..., SentimentResult]

class AnalysisAgent(BaseAgent):
    """Agent that builds the full dashboard analysis for a symbol."""

    def __init__(
        self,
        news_agent: NewsAgent,
        price_provider: PriceProvider,
        scorer: SentimentScorer = score_sentiment,
        rules: Optional[ScoringRules] = None
    ):
        """
        Initialize Analysis Agent.

        Args:
            news_agent: NewsAgent assembling the news feed
            price_provider: Source of the quote and chart
            scorer: Sentiment strategy, called as scorer(articles, rules=rules)
            rules: Scoring rules (uses default if not provided)
        """
        super().__init__("analysis_agent")
        self.news_agent = news_agent
        self.price_provider = price_provider
        self.scorer = scorer
        self.rules = rules or get_scoring_rules()

    async def execute(self, symbol: str, max_articles: int = 10) -> StockAnalysis:
        """
        Analyze a symbol: quote and news are fetched concurrently, then the
        news is scored and combined with the price change.

        Args:
            symbol: Stock symbol to analyze
            max_articles: Maximum articles in the news feed

        Returns:
            StockAnalysis
        """
        self._log_event("analysis_started", symbol=symbol)

        stock_data, news = await asyncio.gather(
            self.price_provider.fetch_quote(symbol),
            self.news_agent.execute(symbol, max_articles=max_articles)
        )

        sentiment = self.score(news)
        recommendation = recommend(sentiment.score, stock_data.change_percent, rules=self.rules)

        self._log_event(
            "analysis_completed",
            symbol=symbol,
            price=stock_data.current_price,
            change_percent=stock_data.change_percent,
            article_count=len(news),
            sentiment_score=round(sentiment.score, 3),
            sentiment=sentiment.summary.value,
            action=recommendation.action.value,
            confidence=recommendation.confidence.value
        )

        return StockAnalysis(
            symbol=symbol,
            stock_data=stock_data,
            news=news,
            sentiment=sentiment,
            recommendation=recommendation
        )

    def score(self, articles: Iterable) -> SentimentResult:
        """Score articles with the configured sentiment strategy."""
        return self.scorer(articles, rules=self.rules)
