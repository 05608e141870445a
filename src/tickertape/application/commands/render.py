"""Render command handler"""

from collections.abc import Sequence

from loguru import logger
from rich.console import Console
from rich.table import Table

from tickertape.core.config import Config
from tickertape.core.tickers import DEFAULT_TICKERS
from tickertape.domain.models import TickerOutcome, TickerSpec
from tickertape.infrastructure.dom.soup import SoupDocument
from tickertape.infrastructure.http import ResilientFetcher, default_strategies
from tickertape.pipeline import TickerOrchestrator
from tickertape.providers import (
    CoinGeckoProvider,
    FredProvider,
    YahooChartProvider,
)
from tickertape.shared.exceptions import ConfigurationError

from .base import RenderCommand


def build_summary_table(outcomes: Sequence[TickerOutcome]) -> Table:
    """Tabulate one refresh pass for the console"""
    table = Table(title="Ticker refresh")
    table.add_column("Key", style="cyan")
    table.add_column("Status")
    table.add_column("Text")

    for outcome in outcomes:
        if outcome.ok:
            colour = {"up": "green", "down": "red"}.get(
                outcome.result.direction, "white"
            )
            table.add_row(
                outcome.key,
                "[green]ok[/green]",
                f"[{colour}]{outcome.result.text}[/{colour}]",
            )
        else:
            table.add_row(outcome.key, "[red]failed[/red]", str(outcome.error))
    return table


async def handle_render(
    config: Config,
    command: RenderCommand,
    specs: Sequence[TickerSpec] = DEFAULT_TICKERS,
    console: Console | None = None,
) -> int:
    """Run one refresh pass over a page and write it back

    Returns:
        Exit code: 0 when the page was processed (even with failed
        tickers), 1 when the page could not be read or written
    """
    try:
        dom = SoupDocument.from_path(
            command.page,
            binding_attribute=config.binding_attribute,
            container_selector=config.container_selector,
        )
    except OSError as e:
        logger.error(f"Cannot read page {command.page}: {e}")
        return 1

    strategies = default_strategies(config.codetabs_url, config.allorigins_url)
    async with ResilientFetcher(
        strategies, timeout=config.http_timeout
    ) as fetcher:
        orchestrator = TickerOrchestrator(
            dom,
            fred=FredProvider(fetcher),
            coingecko=CoinGeckoProvider(fetcher),
            yahoo=YahooChartProvider(fetcher),
        )
        try:
            outcomes = await orchestrator.run(specs)
        except ConfigurationError as e:
            logger.error(f"Invalid ticker configuration: {e}")
            return 1

    if not outcomes:
        logger.info(f"Nothing rendered for {command.page}")
        return 0

    output = command.output or command.page
    try:
        dom.write(output)
    except OSError as e:
        logger.error(f"Cannot write page {output}: {e}")
        return 1

    (console or Console()).print(build_summary_table(outcomes))
    return 0
