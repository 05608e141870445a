"""Upstream data providers and their payload parsers"""

from .coingecko import CoinGeckoProvider, parse_simple_price
from .fred import FredProvider, parse_series_csv
from .yahoo import YahooChartProvider, parse_chart, parse_chart_text

__all__ = [
    "FredProvider",
    "parse_series_csv",
    "CoinGeckoProvider",
    "parse_simple_price",
    "YahooChartProvider",
    "parse_chart",
    "parse_chart_text",
]
