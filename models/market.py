from pydantic import BaseModel, Field

class PricePoint(BaseModel):
    """A single point on the intraday price chart."""

    time: str = Field(..., description="Display label for the point, e.g. '09:31 AM'")
    price: float = Field(..., description="Price at that time")

    class Config:
        frozen = True

class StockQuote(BaseModel):
    """Current price and intraday series for a symbol."""

    symbol: str = Field(..., description="Stock symbol")
    current_price: float = Field(..., description="Latest traded price")
    change: float = Field(..., description="Absolute change versus reference price")
    change_percent: float = Field(..., description="Signed percent change")
    chart_data: list[PricePoint] = Field(default_factory=list)

    class Config:
        frozen = True
