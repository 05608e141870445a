"""Ticker refresh pipeline: aggregation, rendering and orchestration"""

from .aggregator import latest_pair, percent_change
from .orchestrator import TickerOrchestrator
from .render import RenderSink, build_result, direction_for, format_ticker

__all__ = [
    "latest_pair",
    "percent_change",
    "format_ticker",
    "direction_for",
    "build_result",
    "RenderSink",
    "TickerOrchestrator",
]
