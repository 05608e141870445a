"""Domain models"""

from .point import ChartQuote, LatestPair, Point, PointSeries, QuoteSnapshot
from .render_result import Direction, RenderResult, TickerOutcome
from .ticker_spec import Provider, TickerSpec

__all__ = [
    "TickerSpec",
    "Provider",
    "Point",
    "PointSeries",
    "LatestPair",
    "QuoteSnapshot",
    "ChartQuote",
    "RenderResult",
    "TickerOutcome",
    "Direction",
]
