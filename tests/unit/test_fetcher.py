"""Unit tests for the relay chain and ResilientFetcher"""

import httpx
import pytest

from tickertape.infrastructure.http import ResilientFetcher, default_strategies
from tickertape.shared.exceptions import (
    FetchExhausted,
    MalformedPayload,
    RelayHTTPError,
)

TARGET = "https://fred.stlouisfed.org/graph/fredgraph.csv?id=GOLD"


def _route(request: httpx.Request) -> str:
    """Name the relay a request was sent to"""
    if request.url.host == "api.codetabs.com":
        return "codetabs"
    if request.url.path.endswith("/get"):
        return "allorigins-get"
    if request.url.path.endswith("/raw"):
        return "allorigins-raw"
    return "direct"


def _fetcher(mock_async_client, handler) -> ResilientFetcher:
    return ResilientFetcher(client=mock_async_client(handler))


@pytest.mark.unit
def test_default_chain_order():
    assert [s.name for s in default_strategies()] == [
        "codetabs",
        "allorigins-get",
        "allorigins-raw",
    ]


@pytest.mark.unit
def test_fetcher_requires_a_strategy():
    with pytest.raises(ValueError):
        ResilientFetcher(strategies=[])


@pytest.mark.asyncio
async def test_first_relay_success_stops_the_chain(
    mock_async_client, series_csv
):
    calls = []

    def handler(request):
        calls.append(_route(request))
        return httpx.Response(200, text=series_csv)

    fetcher = _fetcher(mock_async_client, handler)

    assert await fetcher.fetch_text(TARGET) == series_csv
    assert calls == ["codetabs"]


@pytest.mark.asyncio
async def test_full_escalation_to_raw_relay(mock_async_client, series_csv):
    """500 from Codetabs, empty wrapped payload, then raw relay succeeds"""
    calls = []

    def handler(request):
        route = _route(request)
        calls.append(route)
        if route == "codetabs":
            return httpx.Response(500, text="upstream error")
        if route == "allorigins-get":
            return httpx.Response(
                200, json={"contents": "data:text/csv;base64,"}
            )
        return httpx.Response(200, text=series_csv)

    fetcher = _fetcher(mock_async_client, handler)

    assert await fetcher.fetch_text(TARGET) == series_csv
    assert calls == ["codetabs", "allorigins-get", "allorigins-raw"]


@pytest.mark.asyncio
async def test_wrapped_relay_decodes_contents(mock_async_client):
    def handler(request):
        if _route(request) == "codetabs":
            raise httpx.ConnectError("blocked", request=request)
        return httpx.Response(
            200, json={"contents": "data:text/plain,x%2C1", "status": {}}
        )

    fetcher = _fetcher(mock_async_client, handler)

    assert await fetcher.fetch_text(TARGET) == "x,1"


@pytest.mark.asyncio
async def test_unpadded_wrapped_payload_is_decoded(mock_async_client):
    def handler(request):
        if _route(request) == "codetabs":
            return httpx.Response(500)
        return httpx.Response(
            200, json={"contents": "data:text/csv;base64,YWI"}
        )

    fetcher = _fetcher(mock_async_client, handler)

    assert await fetcher.fetch_text(TARGET) == "ab"


@pytest.mark.asyncio
async def test_undecodable_wrapped_payload_escalates_to_raw_relay(
    mock_async_client, series_csv
):
    calls = []

    def handler(request):
        route = _route(request)
        calls.append(route)
        if route == "codetabs":
            return httpx.Response(500)
        if route == "allorigins-get":
            # Length 1 mod 4 cannot be valid base64 even once padded
            return httpx.Response(
                200, json={"contents": "data:text/csv;base64,YWJjZ"}
            )
        return httpx.Response(200, text=series_csv)

    fetcher = _fetcher(mock_async_client, handler)

    assert await fetcher.fetch_text(TARGET) == series_csv
    assert calls == ["codetabs", "allorigins-get", "allorigins-raw"]


@pytest.mark.asyncio
async def test_all_relays_failing_raises_fetch_exhausted(mock_async_client):
    def handler(request):
        route = _route(request)
        if route == "codetabs":
            raise httpx.ConnectError("refused", request=request)
        if route == "allorigins-get":
            return httpx.Response(200, text="not json")
        return httpx.Response(503)

    fetcher = _fetcher(mock_async_client, handler)

    with pytest.raises(FetchExhausted) as exc_info:
        await fetcher.fetch_text(TARGET)

    error = exc_info.value
    assert error.url == TARGET
    assert error.attempted == ["codetabs", "allorigins-get", "allorigins-raw"]
    # Only the final relay's failure is surfaced
    assert isinstance(error.__cause__, RelayHTTPError)
    assert error.__cause__.status_code == 503


@pytest.mark.asyncio
async def test_relays_forward_target_and_disable_caching(
    mock_async_client, series_csv
):
    seen = []

    def handler(request):
        seen.append(request)
        if _route(request) == "codetabs":
            return httpx.Response(404)
        if _route(request) == "allorigins-get":
            return httpx.Response(200, json={"contents": ""})
        return httpx.Response(200, text=series_csv)

    fetcher = _fetcher(mock_async_client, handler)
    await fetcher.fetch_text(TARGET)

    codetabs, wrapped, raw = seen
    assert codetabs.url.params["quest"] == TARGET
    assert wrapped.url.params["url"] == TARGET
    assert raw.url.params["url"] == TARGET
    assert all(r.headers["cache-control"] == "no-cache" for r in seen)


@pytest.mark.asyncio
async def test_fetch_json_direct_returns_payload(mock_async_client):
    def handler(request):
        assert _route(request) == "direct"
        return httpx.Response(200, json={"bitcoin": {"usd": 1.0}})

    fetcher = _fetcher(mock_async_client, handler)

    payload = await fetcher.fetch_json_direct(
        "https://api.coingecko.com/api/v3/simple/price?ids=bitcoin"
    )

    assert payload == {"bitcoin": {"usd": 1.0}}


@pytest.mark.asyncio
async def test_fetch_json_direct_rejects_bad_status(mock_async_client):
    fetcher = _fetcher(mock_async_client, lambda r: httpx.Response(429))

    with pytest.raises(RelayHTTPError) as exc_info:
        await fetcher.fetch_json_direct("https://api.coingecko.com/x")

    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_fetch_json_direct_rejects_invalid_json(mock_async_client):
    fetcher = _fetcher(
        mock_async_client, lambda r: httpx.Response(200, text="<html>")
    )

    with pytest.raises(MalformedPayload):
        await fetcher.fetch_json_direct("https://api.coingecko.com/x")


@pytest.mark.asyncio
async def test_injected_client_is_not_closed(mock_async_client):
    client = mock_async_client(lambda r: httpx.Response(200, text="ok"))

    async with ResilientFetcher(client=client) as fetcher:
        await fetcher.fetch_text(TARGET)

    assert not client.is_closed
    await client.aclose()
