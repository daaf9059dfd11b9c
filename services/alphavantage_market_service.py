"""Quotes from Alpha Vantage (GLOBAL_QUOTE plus 5-minute intraday series)."""

import asyncio
from datetime import datetime
from typing import List, Optional
import httpx
from models.market import PricePoint, StockQuote
from services.base import HttpProvider, PriceProvider, ProviderError

ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"
INTRADAY_INTERVAL = "5min"


class AlphaVantagePriceProvider(HttpProvider, PriceProvider):
    """Service for fetching quotes from Alpha Vantage."""

    name = "alphavantage"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(timeout=timeout, client=client)
        self.api_key = api_key
        self.logger.info("alphavantage_provider_initialized")

    async def fetch_quote(self, symbol: str) -> StockQuote:
        """
        Fetch the latest quote and the intraday series concurrently.

        Raises:
            ProviderError: On rate-limit notes, error messages or missing fields
            httpx.HTTPError: On transport failure or non-2xx response
        """
        self.logger.info("fetching_quote", symbol=symbol)

        quote_payload, series_payload = await asyncio.gather(
            self._query(function="GLOBAL_QUOTE", symbol=symbol),
            self._query(
                function="TIME_SERIES_INTRADAY",
                symbol=symbol,
                interval=INTRADAY_INTERVAL
            )
        )

        quote = quote_payload.get("Global Quote") or {}
        try:
            price = float(quote["05. price"])
            change = float(quote["09. change"])
            change_percent = float(quote["10. change percent"].rstrip("%"))
        except (KeyError, ValueError) as e:
            raise ProviderError(self.name, f"malformed quote for {symbol}: {e}") from e

        chart_data = self._parse_series(series_payload)

        self.logger.info("quote_fetched", symbol=symbol, price=price, points=len(chart_data))

        return StockQuote(
            symbol=symbol,
            current_price=price,
            change=change,
            change_percent=change_percent,
            chart_data=chart_data
        )

    async def _query(self, **params) -> dict:
        payload = await self._get_json(ALPHA_VANTAGE_URL, params={**params, "apikey": self.api_key})

        # Errors and rate limits come back as 200 responses with a message key
        for key in ("Error Message", "Note", "Information"):
            if key in payload:
                raise ProviderError(self.name, payload[key])
        return payload

    def _parse_series(self, payload: dict) -> List[PricePoint]:
        series = payload.get(f"Time Series ({INTRADAY_INTERVAL})") or {}
        points = []
        # Keys are "YYYY-MM-DD HH:MM:SS"; sorting them is chronological
        for timestamp in sorted(series):
            try:
                when = datetime.strptime(timestamp, "%Y-%m-%d %H:%M:%S")
                price = float(series[timestamp]["4. close"])
            except (KeyError, ValueError) as e:
                self.logger.warning("series_point_parsing_failed", timestamp=timestamp, error=str(e))
                continue
            points.append(PricePoint(time=when.strftime("%I:%M %p"), price=price))
        return points
