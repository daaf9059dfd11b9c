import argparse
import asyncio
import sys
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from utils.logger import setup_logging, get_logger
from config.settings import Settings, settings
from config.symbol_config import symbol_config
from agents.analysis_agent import AnalysisAgent
from agents.news_agent import NewsAgent
from agents.polarity import score_sentiment_polarity
from agents.rules import ScoringRules
from agents.sentiment import score_sentiment
from services.factory import build_news_provider, build_price_provider
from storage.watchlist import Watchlist, normalize_symbol
from utils.formatting import render_analysis

logger = get_logger("main")

MAX_ARTICLES_LIMIT = 100

def article_count(value: str) -> int:
    """argparse type for --articles; same bounds as Settings.max_articles."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid article count: {value!r}")
    if not 1 <= count <= MAX_ARTICLES_LIMIT:
        raise argparse.ArgumentTypeError(
            f"article count must be between 1 and {MAX_ARTICLES_LIMIT}, got {count}"
        )
    return count

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stock dashboard: price, news sentiment and a buy/sell/hold signal."
    )
    parser.add_argument("symbols", nargs="*", help="Ticker symbols to analyze (default: configured default)")
    parser.add_argument("--watchlist", action="store_true", help="Also analyze every watchlist symbol")
    parser.add_argument("--articles", type=article_count, default=None, help="Maximum articles per symbol")
    return parser.parse_args(argv)

def build_agent(config: Settings) -> AnalysisAgent:
    """Wire providers, scorer and rules from explicit configuration."""
    rules = ScoringRules(classification_threshold=config.sentiment_threshold)
    scorer = score_sentiment_polarity if config.sentiment_strategy == "polarity" else score_sentiment

    news_agent = NewsAgent(build_news_provider(config))
    return AnalysisAgent(
        news_agent,
        build_price_provider(config),
        scorer=scorer,
        rules=rules
    )

def resolve_symbols(args: argparse.Namespace, watchlist: Watchlist) -> List[str]:
    symbols = []
    for query in args.symbols:
        try:
            symbols.append(normalize_symbol(query))
        except ValueError:
            logger.warning("invalid_symbol_skipped", query=query)
    if args.watchlist:
        symbols.extend(watchlist)
    if not symbols and not args.symbols:
        symbols.append(symbol_config.get_default_symbol())
    # De-duplicate while keeping order
    return list(dict.fromkeys(symbols))

async def run_dashboard(
    symbols: List[str],
    agent: AnalysisAgent,
    watchlist: Watchlist,
    max_articles: int
) -> int:
    """Analyze each symbol and print its report. Returns the number of failures."""
    failures = 0

    for symbol in symbols:
        try:
            analysis = await agent(symbol, max_articles=max_articles)
        except Exception as e:
            failures += 1
            logger.error("symbol_analysis_failed", symbol=symbol, error=str(e))
            print(f"\nFailed to fetch stock data for {symbol}: {e}\n")
            continue

        name = symbol_config.get_symbol_info(symbol).get("name")
        print()
        print(render_analysis(analysis, watchlist=watchlist, name=name))

    return failures

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging()

    missing = settings.missing_api_keys()
    if missing:
        logger.warning("api_keys_missing", missing_keys=missing)

    watchlist = Watchlist.from_config(symbol_config)
    symbols = resolve_symbols(args, watchlist)
    if not symbols:
        logger.error("no_symbols_to_analyze")
        return 1

    max_articles = args.articles if args.articles is not None else settings.max_articles
    agent = build_agent(settings)

    logger.info("dashboard_started", symbols=symbols)
    failures = asyncio.run(run_dashboard(symbols, agent, watchlist, max_articles))
    logger.info("dashboard_completed", analyzed=len(symbols) - failures, failed=failures)

    return 1 if failures == len(symbols) else 0

if __name__ == "__main__":
    sys.exit(main())
