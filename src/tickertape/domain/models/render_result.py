"""Render pass result value objects"""

from dataclasses import dataclass
from typing import Literal

Direction = Literal["up", "down"]


@dataclass(frozen=True)
class RenderResult:
    """Display text and direction for one ticker key"""

    key: str
    text: str
    direction: Direction | None


@dataclass(frozen=True)
class TickerOutcome:
    """Tagged success/failure of one ticker pipeline"""

    key: str
    result: RenderResult | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None and self.error is None
