"""Pytest fixtures for tickertape tests"""

import httpx
import pytest

from tests.factories import SERIES_CSV
from tickertape.domain.models import TickerSpec
from tickertape.infrastructure.dom.soup import SoupDocument

PAGE_HTML = """<!DOCTYPE html>
<html>
<body>
  <div class="ticker-tape">
    <span data-ticker="SP500">S&amp;P 500 --</span>
    <span data-ticker="GOLD">GOLD --</span>
    <span data-ticker="VIX">VIX --</span>
    <span data-ticker="BTC">BTC --</span>
    <span data-ticker="DJIA">DJIA --</span>
  </div>
  <footer>
    <span data-ticker="GOLD" class="tick tick--down">GOLD --</span>
  </footer>
</body>
</html>
"""


@pytest.fixture
def series_csv() -> str:
    return SERIES_CSV


@pytest.fixture
def page_html() -> str:
    return PAGE_HTML


@pytest.fixture
def document(page_html) -> SoupDocument:
    """Ticker page with a container and a duplicated GOLD binding"""
    return SoupDocument(page_html)


@pytest.fixture
def gold_spec() -> TickerSpec:
    return TickerSpec("GOLD", "GOLDAMGBD228NLBM", "GOLD", 2)


@pytest.fixture
def mock_async_client():
    """Factory for an AsyncClient served by an httpx.MockTransport handler"""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
