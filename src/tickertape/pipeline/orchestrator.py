"""Ticker orchestrator - runs one refresh pass over all configured tickers"""

import asyncio
from collections import Counter
from collections.abc import Awaitable, Callable, Sequence

from loguru import logger

from tickertape.domain.models import RenderResult, TickerOutcome, TickerSpec
from tickertape.domain.protocols import DomBindingPort
from tickertape.providers import (
    CoinGeckoProvider,
    FredProvider,
    YahooChartProvider,
)
from tickertape.shared.exceptions import ConfigurationError, NoData

from .aggregator import latest_pair, percent_change
from .render import RenderSink, build_result


class TickerOrchestrator:
    """Fans out per-ticker pipelines and renders each as it completes

    Every ticker is an isolated unit: a failure while fetching, decoding,
    parsing or aggregating is logged and leaves that ticker's elements as
    they were, while the remaining tickers carry on.
    """

    def __init__(
        self,
        dom: DomBindingPort,
        fred: FredProvider,
        coingecko: CoinGeckoProvider,
        yahoo: YahooChartProvider,
    ) -> None:
        self._dom = dom
        self._sink = RenderSink(dom)
        self._fred = fred
        self._coingecko = coingecko
        self._yahoo = yahoo
        self._computers: dict[
            str, Callable[[TickerSpec], Awaitable[RenderResult]]
        ] = {
            "series": self._compute_series,
            "quote": self._compute_quote,
            "chart": self._compute_chart,
        }

    async def run(self, specs: Sequence[TickerSpec]) -> list[TickerOutcome]:
        """Run one refresh pass

        Args:
            specs: Tickers to refresh; keys must be unique

        Returns:
            One outcome per ticker in submission order, or an empty list if
            the page has no ticker container

        Raises:
            ConfigurationError: If two specs share a key
        """
        if not self._dom.has_container():
            logger.info("No ticker container on page, skipping refresh")
            return []

        counts = Counter(s.key for s in specs)
        duplicates = [key for key, n in counts.items() if n > 1]
        if duplicates:
            raise ConfigurationError(
                f"Duplicate ticker keys: {', '.join(sorted(duplicates))}"
            )

        logger.info(f"Refreshing {len(specs)} tickers...")
        outcomes = await asyncio.gather(*(self._run_one(s) for s in specs))

        rendered = sum(1 for o in outcomes if o.ok)
        logger.info(f"Refresh complete: {rendered}/{len(outcomes)} rendered")
        return list(outcomes)

    async def _run_one(self, spec: TickerSpec) -> TickerOutcome:
        compute = self._computers.get(spec.provider)
        if compute is None:
            error = ConfigurationError(f"Unknown provider: {spec.provider}")
            logger.warning(f"Ticker {spec.key} skipped: {error}")
            return TickerOutcome(key=spec.key, error=error)

        try:
            result = await compute(spec)
            self._sink.apply(result)
        except Exception as e:
            logger.warning(f"Ticker {spec.key} failed: {e}")
            return TickerOutcome(key=spec.key, error=e)

        return TickerOutcome(key=spec.key, result=result)

    async def _compute_series(self, spec: TickerSpec) -> RenderResult:
        points = await self._fred.fetch_series(spec.source_id)
        pair = latest_pair(points)
        if pair.latest is None:
            raise NoData(f"No data for FRED series {spec.source_id}")

        previous = pair.previous.value if pair.previous else None
        value = pair.latest.value
        return build_result(spec, value, percent_change(value, previous))

    async def _compute_quote(self, spec: TickerSpec) -> RenderResult:
        snapshot = await self._coingecko.fetch_quote(spec.source_id)
        return build_result(spec, snapshot.value, snapshot.pct_change)

    async def _compute_chart(self, spec: TickerSpec) -> RenderResult:
        chart = await self._yahoo.fetch_chart(spec.source_id)
        return build_result(
            spec, chart.value, percent_change(chart.value, chart.previous_value)
        )
