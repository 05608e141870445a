"""Time-series value objects"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """One observation in a time series"""

    timestamp: str
    value: float


# Chronological (ascending) as returned by the upstream provider
PointSeries = list[Point]


@dataclass(frozen=True)
class LatestPair:
    """Latest and immediately-prior observations of a series"""

    latest: Point | None
    previous: Point | None


@dataclass(frozen=True)
class QuoteSnapshot:
    """Quote with an upstream-supplied 24 hour percent change"""

    value: float
    pct_change: float


@dataclass(frozen=True)
class ChartQuote:
    """Current price and prior close from a chart payload"""

    value: float
    previous_value: float | None
