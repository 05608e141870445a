"""Ticker text formatting and DOM updates"""

import math

from loguru import logger

from tickertape.domain.models import Direction, RenderResult, TickerSpec
from tickertape.domain.protocols import DomBindingPort
from tickertape.shared.constants import (
    CLASS_DOWN,
    CLASS_UP,
    DOWN_GLYPH,
    UP_GLYPH,
)


def _is_finite(pct: float | None) -> bool:
    return pct is not None and math.isfinite(pct)


def format_ticker(
    label: str,
    value: float,
    decimals: int,
    suffix: str | None,
    pct: float | None,
) -> str:
    """Format the display text for one ticker

    Examples:
        >>> format_ticker("GOLD", 1834.5, 2, None, 1.23)
        'GOLD 1,834.50 ▲1.23%'
        >>> format_ticker("10Y YIELD", 4.215, 3, "%", -0.4)
        '10Y YIELD 4.215% ▼0.40%'
    """
    text = f"{label} {value:,.{decimals}f}"
    if suffix:
        text += suffix
    if _is_finite(pct):
        glyph = UP_GLYPH if pct >= 0 else DOWN_GLYPH
        text += f" {glyph}{abs(pct):.2f}%"
    return text


def direction_for(pct: float | None) -> Direction | None:
    """Map a percent change to a direction; zero counts as up."""
    if not _is_finite(pct):
        return None
    return "up" if pct >= 0 else "down"


def build_result(
    spec: TickerSpec, value: float, pct: float | None
) -> RenderResult:
    """Build the render result for a ticker value and its change"""
    return RenderResult(
        key=spec.key,
        text=format_ticker(spec.label, value, spec.decimals, spec.suffix, pct),
        direction=direction_for(pct),
    )


class RenderSink:
    """Pushes render results into the elements bound to each ticker key"""

    def __init__(self, dom: DomBindingPort) -> None:
        self._dom = dom

    def update_targets(
        self, key: str, text: str, direction: Direction | None
    ) -> int:
        """Set text and direction class on every element bound to ``key``

        Returns:
            Number of elements updated
        """
        elements = self._dom.bound_elements(key)
        for element in elements:
            self._dom.set_text(element, text)
            self._dom.remove_classes(element, CLASS_UP, CLASS_DOWN)
            if direction == "up":
                self._dom.add_class(element, CLASS_UP)
            elif direction == "down":
                self._dom.add_class(element, CLASS_DOWN)

        logger.debug(f"Rendered {key} into {len(elements)} element(s): {text}")
        return len(elements)

    def apply(self, result: RenderResult) -> int:
        return self.update_targets(result.key, result.text, result.direction)
