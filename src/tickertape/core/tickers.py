"""Static ticker list rendered into the ticker strip"""

from tickertape.domain.models import TickerSpec

DEFAULT_TICKERS: tuple[TickerSpec, ...] = (
    TickerSpec("SP500", "SP500", "S&P 500", 0),
    TickerSpec("NASDAQ", "NASDAQCOM", "NASDAQ", 0),
    TickerSpec("10Y", "DGS10", "10Y YIELD", 3, suffix="%"),
    TickerSpec("GOLD", "GOLDAMGBD228NLBM", "GOLD", 2),
    TickerSpec("VIX", "VIXCLS", "VIX", 2),
    TickerSpec("EURUSD", "DEXUSEU", "EUR/USD", 4),
    TickerSpec("CRUDE", "DCOILWTICO", "WTI CRUDE", 2),
    TickerSpec("FEDFUNDS", "FEDFUNDS", "FED FUNDS", 2, suffix="%"),
    TickerSpec("BTC", "bitcoin", "BTC", 0, provider="quote"),
    TickerSpec("DJIA", "^DJI", "DJIA", 0, provider="chart"),
)
