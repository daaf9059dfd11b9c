import pytest
from datetime import datetime, timezone
from models.analysis import SentimentResult, SentimentSummary, StockAnalysis
from models.market import PricePoint, StockQuote
from models.news import Article
from models.recommendation import Recommendation, RecommendationAction, ConfidenceLevel
from storage.watchlist import Watchlist
from utils.formatting import (
    format_article,
    format_change,
    render_analysis,
    sentiment_action,
    sentiment_indicator,
)

@pytest.mark.parametrize("sentiment,expected", [
    (None, ""),
    (0.5, "📈"),
    (0.2, "📊"),
    (0.0, "📊"),
    (-0.2, "📊"),
    (-0.21, "📉"),
])
def test_sentiment_indicator(sentiment, expected):
    assert sentiment_indicator(sentiment) == expected

@pytest.mark.parametrize("score,expected", [
    (0.8, ("BUY", "💚")),
    (0.1, ("HOLD", "⚡")),
    (-0.8, ("SELL", "🔴")),
])
def test_sentiment_action(score, expected):
    assert sentiment_action(score) == expected

def test_format_change():
    assert format_change(1.5, 0.75) == "+1.50 (+0.75%)"
    assert format_change(-2.0, -1.333) == "-2.00 (-1.33%)"

def make_article(**overrides):
    fields = dict(
        title="Apple beats estimates",
        description="Strong quarter",
        url="https://example.com/a",
        published_at=datetime(2025, 11, 2, 14, 30, tzinfo=timezone.utc),
        source="Reuters",
        sentiment=0.5,
    )
    fields.update(overrides)
    return Article(**fields)

def test_format_article():
    line = format_article(make_article())
    assert "📈" in line
    assert "Reuters" in line
    assert "Apple beats estimates" in line
    assert "Strong quarter" in line

def test_format_article_without_optional_fields():
    line = format_article(make_article(description=None, source=None, sentiment=None))
    assert "Apple beats estimates" in line
    assert "\n" not in line

def make_analysis(news=None, chart=None):
    return StockAnalysis(
        symbol="AAPL",
        stock_data=StockQuote(
            symbol="AAPL",
            current_price=151.25,
            change=1.25,
            change_percent=0.83,
            chart_data=chart if chart is not None else [
                PricePoint(time="09:30 AM", price=150.0),
                PricePoint(time="09:31 AM", price=151.25),
            ]
        ),
        news=news if news is not None else [make_article()],
        sentiment=SentimentResult(score=0.5, summary=SentimentSummary.POSITIVE),
        recommendation=Recommendation(
            action=RecommendationAction.BUY,
            confidence=ConfidenceLevel.MEDIUM
        ),
    )

def test_render_analysis():
    text = render_analysis(make_analysis(), name="Apple Inc.")

    assert "AAPL  (Apple Inc.)" in text
    assert "$151.25  +1.25 (+0.83%)" in text
    assert "2 points, low $150.00, high $151.25" in text
    assert "+0.50 (Positive)" in text
    assert "BUY 💚" in text
    assert "BUY (Medium confidence)" in text
    assert "News (1)" in text
    assert "★" not in text

def test_render_analysis_stars_watchlist_symbol():
    text = render_analysis(make_analysis(), watchlist=Watchlist(["AAPL"]))
    assert "AAPL ★" in text

def test_render_analysis_empty_sections():
    text = render_analysis(make_analysis(news=[], chart=[]))
    assert "Chart:            no data" in text
    assert "News (0)" in text
    assert "No news available" in text
