"""Shared constants for tickertape"""

UP_GLYPH = "▲"
DOWN_GLYPH = "▼"

# CSS state classes toggled on bound ticker elements
CLASS_UP = "tick--up"
CLASS_DOWN = "tick--down"

DEFAULT_BINDING_ATTRIBUTE = "data-ticker"
DEFAULT_CONTAINER_SELECTOR = ".ticker-tape"

CODETABS_URL = "https://api.codetabs.com/v1/proxy/"
ALLORIGINS_URL = "https://api.allorigins.win"

FRED_CSV_URL = "https://fred.stlouisfed.org/graph/fredgraph.csv"
COINGECKO_URL = "https://api.coingecko.com/api/v3"
YAHOO_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart"
STEAM_API_URL = "https://api.steampowered.com"

USER_AGENT = "tickertape/0.1"
