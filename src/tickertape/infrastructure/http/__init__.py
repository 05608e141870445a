"""HTTP transport layer: relay chain and payload decoding"""

from .fetcher import ResilientFetcher
from .payload import decode_payload
from .relays import (
    AllOriginsRawRelay,
    AllOriginsWrappedRelay,
    CodetabsRelay,
    default_strategies,
)

__all__ = [
    "ResilientFetcher",
    "decode_payload",
    "CodetabsRelay",
    "AllOriginsWrappedRelay",
    "AllOriginsRawRelay",
    "default_strategies",
]
