"""Yahoo Finance chart provider"""

import json
from typing import Any
from urllib.parse import quote

from loguru import logger
from pydantic import ValidationError

from tickertape.domain.models import ChartQuote
from tickertape.infrastructure.http import ResilientFetcher
from tickertape.shared.constants import YAHOO_CHART_URL
from tickertape.shared.exceptions import MalformedPayload
from tickertape.validation.payloads import ChartPayload


def parse_chart(payload: Any) -> ChartQuote:
    """Read current price and prior close from a chart payload

    Prior close is ``chartPreviousClose`` when present and non-zero,
    otherwise ``previousClose``.

    Raises:
        MalformedPayload: If the chart structure or price is missing
    """
    try:
        parsed = ChartPayload.model_validate(payload)
    except ValidationError as e:
        raise MalformedPayload(f"Invalid chart payload: {e}") from e

    if not parsed.chart.result:
        raise MalformedPayload(
            f"Chart payload has no result (error: {parsed.chart.error})"
        )

    meta = parsed.chart.result[0].meta
    return ChartQuote(
        value=meta.regular_market_price, previous_value=meta.prior_close
    )


def parse_chart_text(text: str) -> ChartQuote:
    """Decode a chart response body and parse it"""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedPayload(f"Chart response is not JSON: {e}") from e
    return parse_chart(payload)


class YahooChartProvider:
    """Fetches Yahoo chart metadata through the relay chain"""

    def __init__(
        self, fetcher: ResilientFetcher, base_url: str = YAHOO_CHART_URL
    ) -> None:
        self._fetcher = fetcher
        self.base_url = base_url

    def chart_url(self, symbol: str) -> str:
        return f"{self.base_url}/{quote(symbol, safe='')}?range=2d&interval=1d"

    async def fetch_chart(self, symbol: str) -> ChartQuote:
        """Fetch the two-day chart for a symbol

        Raises:
            FetchExhausted: If no transport could retrieve the chart
            MalformedPayload: If the body is not a usable chart document
        """
        text = await self._fetcher.fetch_text(self.chart_url(symbol))
        chart = parse_chart_text(text)
        logger.debug(
            f"Yahoo {symbol}: {chart.value} "
            f"(prior close {chart.previous_value})"
        )
        return chart
