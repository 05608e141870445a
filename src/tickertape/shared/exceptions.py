"""Consolidated exceptions for tickertape.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class TickerTapeError(Exception):
    """Base exception for tickertape errors"""

    pass


class FetchError(TickerTapeError):
    """Base exception for upstream fetch errors"""

    pass


class RelayHTTPError(FetchError):
    """Raised when a relay or upstream answers outside the 2xx range"""

    def __init__(self, source: str, status_code: int) -> None:
        super().__init__(f"{source} HTTP {status_code}")
        self.source = source
        self.status_code = status_code


class FetchExhausted(FetchError):
    """Raised when every transport in the fallback chain failed"""

    def __init__(self, url: str, attempted: list[str]) -> None:
        super().__init__(
            f"All transports failed for {url} (tried: {', '.join(attempted)})"
        )
        self.url = url
        self.attempted = attempted


class ParseError(TickerTapeError):
    """Base exception for provider payload parsing errors"""

    pass


class NoData(ParseError):
    """Raised when a provider payload yields no usable points"""

    pass


class MalformedPayload(ParseError):
    """Raised when a payload cannot be decoded or has the wrong shape"""

    pass


class ConfigurationError(TickerTapeError):
    """Raised when configuration is invalid or missing"""

    pass


class SnapshotError(TickerTapeError):
    """Raised when the snapshot batch job fails"""

    pass
