"""Pydantic models for upstream JSON payload validation

These models describe only the fields the ticker pipeline reads; everything
else in the upstream documents is ignored.
"""

from pydantic import BaseModel, Field


class SimplePriceEntry(BaseModel):
    """One coin entry of the CoinGecko ``/simple/price`` response"""

    usd: float = Field(..., description="Current price in USD")
    usd_24h_change: float = Field(
        ..., description="Percent change over the last 24 hours"
    )


class ChartMeta(BaseModel):
    """``chart.result[n].meta`` block of the Yahoo chart response"""

    regular_market_price: float = Field(..., alias="regularMarketPrice")
    chart_previous_close: float | None = Field(
        None, alias="chartPreviousClose"
    )
    previous_close: float | None = Field(None, alias="previousClose")

    @property
    def prior_close(self) -> float | None:
        """First non-zero prior close, preferring chartPreviousClose"""
        return self.chart_previous_close or self.previous_close or None


class ChartResult(BaseModel):
    meta: ChartMeta


class ChartEnvelope(BaseModel):
    result: list[ChartResult] | None = None
    error: dict | None = None


class ChartPayload(BaseModel):
    """Top-level Yahoo ``/v8/finance/chart`` response"""

    chart: ChartEnvelope
