"""Text rendering for the terminal dashboard."""

from datetime import datetime
from typing import Optional, Tuple
from models.analysis import StockAnalysis
from models.news import Article

INDICATOR_THRESHOLD = 0.2
RULE = "=" * 60


def sentiment_indicator(sentiment: Optional[float]) -> str:
    """Trend icon shown next to an article; empty when it has no score."""
    if sentiment is None:
        return ""
    if sentiment > INDICATOR_THRESHOLD:
        return "📈"
    if sentiment < -INDICATOR_THRESHOLD:
        return "📉"
    return "📊"


def sentiment_action(score: float) -> Tuple[str, str]:
    """Quick action badge for the aggregate score: (label, icon)."""
    if score > INDICATOR_THRESHOLD:
        return "BUY", "💚"
    if score < -INDICATOR_THRESHOLD:
        return "SELL", "🔴"
    return "HOLD", "⚡"


def format_change(change: float, change_percent: float) -> str:
    return f"{change:+.2f} ({change_percent:+.2f}%)"


def format_time(value: datetime) -> str:
    try:
        return value.astimezone().strftime("%I:%M %p")
    except (ValueError, OverflowError, OSError):
        return "Recently"


def format_article(article: Article) -> str:
    parts = [format_time(article.published_at)]
    if article.source:
        parts.append(article.source)
    header = " • ".join(parts)
    indicator = sentiment_indicator(article.sentiment)
    line = f"  {indicator or '  '} {header}  {article.title}"
    if article.description:
        line += f"\n      {article.description}"
    return line


def render_analysis(analysis: StockAnalysis, watchlist=None, name: Optional[str] = None) -> str:
    """
    Render an analysis as a block of text.

    Args:
        analysis: Result of AnalysisAgent
        watchlist: Optional Watchlist; symbols on it are starred
        name: Optional company name shown next to the symbol
    """
    quote = analysis.stock_data
    star = " ★" if watchlist is not None and analysis.symbol in watchlist else ""
    title = f"{analysis.symbol}{star}" + (f"  ({name})" if name else "")

    lines = [
        RULE,
        title,
        RULE,
        f"Price:            ${quote.current_price:.2f}  {format_change(quote.change, quote.change_percent)}",
    ]

    if quote.chart_data:
        prices = [point.price for point in quote.chart_data]
        lines.append(
            f"Chart:            {len(prices)} points, "
            f"low ${min(prices):.2f}, high ${max(prices):.2f}"
        )
    else:
        lines.append("Chart:            no data")

    label, icon = sentiment_action(analysis.sentiment.score)
    lines.extend([
        f"Sentiment:        {analysis.sentiment.score:+.2f} ({analysis.sentiment.summary.value})",
        f"Signal:           {label} {icon}",
        f"Recommendation:   {analysis.recommendation.action.value} "
        f"({analysis.recommendation.confidence.value} confidence)",
        f"Updated:          {analysis.last_updated.isoformat(timespec='seconds')}",
        "-" * 60,
        f"News ({len(analysis.news)})",
    ])

    if analysis.news:
        lines.extend(format_article(article) for article in analysis.news)
    else:
        lines.append("  No news available")

    lines.append(RULE)
    return "\n".join(lines)
