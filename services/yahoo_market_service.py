"""Intraday quotes from the Yahoo Finance chart endpoint."""

from datetime import datetime
from typing import Optional
import httpx
from models.market import PricePoint, StockQuote
from services.base import HttpProvider, PriceProvider, ProviderError

YAHOO_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"

# Yahoo rejects requests without a browser-like user agent
YAHOO_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "application/json",
}


class YahooPriceProvider(HttpProvider, PriceProvider):
    """Current price and one-minute chart for the current session."""

    name = "yahoo"

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        super().__init__(timeout=timeout, client=client)
        self.logger.info("yahoo_provider_initialized")

    async def fetch_quote(self, symbol: str) -> StockQuote:
        """
        Fetch the 1-day, 1-minute chart for a symbol.

        Raises:
            ProviderError: If the payload has no usable result
            httpx.HTTPError: On transport failure or non-2xx response
        """
        self.logger.info("fetching_quote", symbol=symbol)

        payload = await self._get_json(
            YAHOO_CHART_URL.format(symbol=symbol),
            params={
                "region": "US",
                "lang": "en-US",
                "includePrePost": "false",
                "interval": "1m",
                "range": "1d",
            },
            headers=YAHOO_HEADERS
        )

        quote = self._parse_chart(symbol, payload)
        self.logger.info(
            "quote_fetched",
            symbol=symbol,
            price=quote.current_price,
            points=len(quote.chart_data)
        )
        return quote

    def _parse_chart(self, symbol: str, payload: dict) -> StockQuote:
        chart = payload.get("chart") or {}
        if chart.get("error"):
            error = chart["error"]
            raise ProviderError(self.name, error.get("description", str(error)))

        results = chart.get("result") or []
        if not results:
            raise ProviderError(self.name, f"no chart result for {symbol}")

        data = results[0]
        meta = data.get("meta", {})
        price = meta.get("regularMarketPrice")
        previous_close = meta.get("previousClose") or meta.get("chartPreviousClose")
        if price is None or not previous_close:
            raise ProviderError(self.name, f"missing price fields for {symbol}")

        timestamps = data.get("timestamp") or []
        quotes = (data.get("indicators", {}).get("quote") or [{}])[0]
        closes = quotes.get("close") or []

        # Minutes without trades come back as null closes
        chart_data = [
            PricePoint(
                time=datetime.fromtimestamp(ts).strftime("%I:%M %p"),
                price=close
            )
            for ts, close in zip(timestamps, closes)
            if close is not None
        ]

        change = price - previous_close
        return StockQuote(
            symbol=symbol,
            current_price=price,
            change=change,
            change_percent=change / previous_close * 100,
            chart_data=chart_data
        )
