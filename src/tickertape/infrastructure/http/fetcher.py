"""ResilientFetcher - text retrieval through an ordered relay chain"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from loguru import logger

from tickertape.domain.protocols import RelayStrategy
from tickertape.shared.constants import USER_AGENT
from tickertape.shared.exceptions import FetchExhausted, MalformedPayload

from .relays import NO_CACHE_HEADERS, default_strategies, ensure_success


class _LoguruHandler(logging.Handler):
    """Bridge stdlib logging into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


class ResilientFetcher:
    """Fetches upstream text, escalating through relay strategies

    Responsibilities:
    - HTTP client lifecycle
    - Sequential escalation through the relay chain
    - Surfacing only the final failure as FetchExhausted
    """

    DEFAULT_TIMEOUT = 15.0
    _logging_bridge_installed = False

    def __init__(
        self,
        strategies: Sequence[RelayStrategy] | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise fetcher

        Args:
            strategies: Relay strategies in escalation order (defaults to
                the Codetabs -> AllOrigins/get -> AllOrigins/raw chain)
            client: Optional externally managed AsyncClient
            timeout: Transport timeout in seconds for an owned client
        """
        self._strategies = list(
            strategies if strategies is not None else default_strategies()
        )
        if not self._strategies:
            raise ValueError("At least one relay strategy is required")
        self._timeout = timeout
        self._http_client = client
        self._owns_client = client is None
        self.install_logging_bridge()

    @classmethod
    def install_logging_bridge(cls) -> None:
        """Bridge stdlib logging used by httpx into loguru once."""
        if cls._logging_bridge_installed:
            return

        handler = _LoguruHandler()
        std_logger = logging.getLogger("httpx")
        std_logger.setLevel(logging.WARNING)
        std_logger.addHandler(handler)
        std_logger.propagate = False

        cls._logging_bridge_installed = True

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def _build_http_client(self) -> httpx.AsyncClient:
        """Create an AsyncClient with httpx request/response logging hooks."""
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            event_hooks={
                "request": [self._log_httpx_request],
                "response": [self._log_httpx_response],
            },
        )

    async def _log_httpx_request(self, request: httpx.Request) -> None:
        logger.debug(f"HTTPX request: {request.method} {request.url}")

    async def _log_httpx_response(self, response: httpx.Response) -> None:
        logger.debug(
            f"HTTPX response: status={response.status_code} url={response.url}"
        )

    @property
    def client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = self._build_http_client()
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "ResilientFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def fetch_text(self, url: str) -> str:
        """Fetch a URL through the relay chain

        Strategies are awaited one at a time in order. Intermediate failures
        are expected and only logged at debug level.

        Args:
            url: Upstream URL to retrieve

        Returns:
            Body text from the first strategy that succeeds

        Raises:
            FetchExhausted: If every strategy failed, chained to the final
                strategy's error
        """
        attempted: list[str] = []
        last_error: Exception | None = None

        for strategy in self._strategies:
            attempted.append(strategy.name)
            try:
                text = await strategy.fetch(self.client, url)
            except Exception as e:
                last_error = e
                logger.debug(f"{strategy.name} failed for {url}: {e}")
                continue

            logger.debug(f"{strategy.name} served {url} ({len(text)} chars)")
            return text

        raise FetchExhausted(url, attempted) from last_error

    async def fetch_json_direct(self, url: str) -> Any:
        """Fetch JSON straight from the upstream, without relays

        Raises:
            RelayHTTPError: On a non-2xx status
            httpx.HTTPError: On transport failure
            MalformedPayload: If the body is not valid JSON
        """
        response = await self.client.get(url, headers=NO_CACHE_HEADERS)
        ensure_success(response, url)
        try:
            return response.json()
        except ValueError as e:
            raise MalformedPayload(f"Invalid JSON from {url}: {e}") from e
