"""Protocols for the collaborators the ticker pipeline depends on.

The pipeline never touches a concrete document type directly; anything that
can look up bound elements and mutate their text and classes satisfies
DomBindingPort.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class DomBindingPort(Protocol):
    """Protocol for the page elements a render pass writes into."""

    def has_container(self) -> bool:
        """Check if the ticker container element exists in the page."""
        ...

    def bound_elements(self, key: str) -> Sequence[Any]:
        """Return every element bound to the given ticker key."""
        ...

    def set_text(self, element: Any, text: str) -> None:
        """Replace the element's text content."""
        ...

    def remove_classes(self, element: Any, *names: str) -> None:
        """Remove CSS classes from the element if present."""
        ...

    def add_class(self, element: Any, name: str) -> None:
        """Add a CSS class to the element."""
        ...


@runtime_checkable
class RelayStrategy(Protocol):
    """Protocol for one transport path in the fallback chain."""

    @property
    def name(self) -> str:
        """Strategy identifier used in logs and errors"""
        ...

    async def fetch(self, client: httpx.AsyncClient, url: str) -> str:
        """Fetch the target URL and return its body text.

        Raises:
            Any exception on failure; the caller escalates to the next path.
        """
        ...
