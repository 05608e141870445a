"""CoinGecko simple quote provider"""

from typing import Any
from urllib.parse import quote

from loguru import logger
from pydantic import ValidationError

from tickertape.domain.models import QuoteSnapshot
from tickertape.infrastructure.http import ResilientFetcher
from tickertape.shared.constants import COINGECKO_URL
from tickertape.shared.exceptions import MalformedPayload
from tickertape.validation.payloads import SimplePriceEntry


def parse_simple_price(payload: Any, coin_id: str) -> QuoteSnapshot:
    """Extract price and 24h change for one coin

    The upstream supplies its own percent change, so no series derivation
    is involved.

    Raises:
        MalformedPayload: If the coin entry or its fields are missing
    """
    if not isinstance(payload, dict) or coin_id not in payload:
        raise MalformedPayload(f"CoinGecko payload has no entry for {coin_id}")

    try:
        entry = SimplePriceEntry.model_validate(payload[coin_id])
    except ValidationError as e:
        raise MalformedPayload(
            f"Invalid CoinGecko entry for {coin_id}: {e}"
        ) from e

    return QuoteSnapshot(value=entry.usd, pct_change=entry.usd_24h_change)


class CoinGeckoProvider:
    """Fetches CoinGecko quotes directly (the API allows cross-origin use)"""

    def __init__(
        self, fetcher: ResilientFetcher, base_url: str = COINGECKO_URL
    ) -> None:
        self._fetcher = fetcher
        self.base_url = base_url

    def quote_url(self, coin_id: str) -> str:
        return (
            f"{self.base_url}/simple/price?ids={quote(coin_id, safe='')}"
            "&vs_currencies=usd&include_24hr_change=true"
        )

    async def fetch_quote(self, coin_id: str) -> QuoteSnapshot:
        """Fetch the current quote for a coin

        Raises:
            RelayHTTPError: On a non-2xx status
            MalformedPayload: If the response cannot be interpreted
        """
        payload = await self._fetcher.fetch_json_direct(self.quote_url(coin_id))
        snapshot = parse_simple_price(payload, coin_id)
        logger.debug(
            f"CoinGecko {coin_id}: {snapshot.value} "
            f"({snapshot.pct_change:+.2f}%)"
        )
        return snapshot
