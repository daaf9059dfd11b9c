"""Synthetic intraday price series for offline use and as a fetch fallback."""

import random
from datetime import datetime, timedelta
from typing import Optional
from models.market import PricePoint, StockQuote
from services.base import PriceProvider
from utils.logger import get_logger

logger = get_logger("mock_market_service")

TRADING_MINUTES = 390
CHART_POINTS = 100


class MockPriceProvider(PriceProvider):
    """Random-walk price generator with a per-call volatility and trend."""

    name = "mock_price"

    def __init__(self, seed: Optional[int] = None, chart_points: int = CHART_POINTS):
        """
        Initialize Mock Price Provider.

        Args:
            seed: Random seed for reproducible series
            chart_points: Number of trailing points kept for the chart
        """
        self._random = random.Random(seed)
        self.chart_points = chart_points

    async def fetch_quote(self, symbol: str) -> StockQuote:
        rng = self._random
        base_price = 150 + rng.random() * 200
        volatility = 0.02 + rng.random() * 0.03  # 2-5%
        trend = (rng.random() - 0.5) * 0.1  # -5% to +5% over the day

        now = datetime.now()
        chart_data = []
        current_price = base_price

        for i in range(TRADING_MINUTES):
            time = now - timedelta(minutes=TRADING_MINUTES - i)
            random_change = (rng.random() - 0.5) * volatility * current_price
            trend_change = trend * current_price / TRADING_MINUTES
            current_price += random_change + trend_change

            chart_data.append(PricePoint(
                time=time.strftime("%I:%M %p"),
                price=round(current_price, 2)
            ))

        day_change = current_price - base_price
        change_percent = day_change / base_price * 100

        logger.info("mock_quote_generated", symbol=symbol, price=round(current_price, 2))

        return StockQuote(
            symbol=symbol,
            current_price=round(current_price, 2),
            change=round(day_change, 2),
            change_percent=round(change_percent, 2),
            chart_data=chart_data[-self.chart_points:]
        )
