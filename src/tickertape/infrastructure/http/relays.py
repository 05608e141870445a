"""Relay transports used when direct upstream requests are blocked.

Each strategy re-issues the target request through a third-party proxy and
returns the upstream body as text. Any failure is raised so the fetcher can
move on to the next strategy.
"""

import httpx
from loguru import logger

from tickertape.shared.constants import ALLORIGINS_URL, CODETABS_URL
from tickertape.shared.exceptions import MalformedPayload, RelayHTTPError

from .payload import DATA_URI_PREFIX, decode_payload

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def ensure_success(response: httpx.Response, source: str) -> None:
    """Raise RelayHTTPError for any status outside the 2xx range."""
    if not response.is_success:
        raise RelayHTTPError(source, response.status_code)


class CodetabsRelay:
    """Codetabs proxy returning the upstream body verbatim"""

    def __init__(self, base_url: str = CODETABS_URL) -> None:
        self.base_url = base_url

    @property
    def name(self) -> str:
        return "codetabs"

    async def fetch(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(
            self.base_url, params={"quest": url}, headers=NO_CACHE_HEADERS
        )
        ensure_success(response, "Codetabs")
        return response.text


class AllOriginsWrappedRelay:
    """AllOrigins ``/get`` mode: JSON envelope with an encoded ``contents``"""

    def __init__(self, base_url: str = ALLORIGINS_URL) -> None:
        self.base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "allorigins-get"

    async def fetch(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(
            f"{self.base_url}/get",
            params={"url": url},
            headers=NO_CACHE_HEADERS,
        )
        ensure_success(response, "AllOrigins/get")

        try:
            envelope = response.json()
        except ValueError as e:
            raise MalformedPayload(f"AllOrigins/get invalid JSON: {e}") from e

        contents = (
            envelope.get("contents") if isinstance(envelope, dict) else None
        )
        decoded = decode_payload(contents or "")
        if not decoded:
            raise MalformedPayload("AllOrigins/get empty")
        if decoded.startswith(DATA_URI_PREFIX):
            raise MalformedPayload("AllOrigins/get undecodable payload")
        return decoded


class AllOriginsRawRelay:
    """AllOrigins ``/raw`` mode returning the upstream body verbatim"""

    def __init__(self, base_url: str = ALLORIGINS_URL) -> None:
        self.base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "allorigins-raw"

    async def fetch(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(
            f"{self.base_url}/raw",
            params={"url": url},
            headers=NO_CACHE_HEADERS,
        )
        ensure_success(response, "AllOrigins/raw")
        return response.text


def default_strategies(
    codetabs_url: str = CODETABS_URL, allorigins_url: str = ALLORIGINS_URL
) -> list:
    """Build the fixed fallback chain in escalation order."""
    strategies = [
        CodetabsRelay(codetabs_url),
        AllOriginsWrappedRelay(allorigins_url),
        AllOriginsRawRelay(allorigins_url),
    ]
    logger.debug(
        f"Relay chain: {' -> '.join(s.name for s in strategies)}"
    )
    return strategies
