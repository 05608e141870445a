"""BeautifulSoup-backed implementation of the DOM binding port"""

from pathlib import Path

from bs4 import BeautifulSoup, Tag
from loguru import logger

from tickertape.shared.constants import (
    DEFAULT_BINDING_ATTRIBUTE,
    DEFAULT_CONTAINER_SELECTOR,
)


class SoupDocument:
    """An HTML page whose ticker elements can be rewritten in place"""

    def __init__(
        self,
        html: str,
        binding_attribute: str = DEFAULT_BINDING_ATTRIBUTE,
        container_selector: str = DEFAULT_CONTAINER_SELECTOR,
    ) -> None:
        """Parse an HTML document

        Args:
            html: Page markup
            binding_attribute: Attribute whose value is a ticker key
            container_selector: CSS selector gating whether a pass runs
        """
        self.binding_attribute = binding_attribute
        self.container_selector = container_selector
        self._soup = BeautifulSoup(html, "lxml")

    @classmethod
    def from_path(cls, path: str | Path, **kwargs) -> "SoupDocument":
        """Load and parse an HTML file"""
        path = Path(path)
        logger.debug(f"Loading page from {path}")
        return cls(path.read_text(encoding="utf-8"), **kwargs)

    def has_container(self) -> bool:
        return self._soup.select_one(self.container_selector) is not None

    def bound_elements(self, key: str) -> list[Tag]:
        return self._soup.find_all(attrs={self.binding_attribute: key})

    def set_text(self, element: Tag, text: str) -> None:
        element.string = text

    def remove_classes(self, element: Tag, *names: str) -> None:
        if "class" not in element.attrs:
            return
        remaining = [c for c in element.get("class", []) if c not in names]
        if remaining:
            element["class"] = remaining
        else:
            del element["class"]

    def add_class(self, element: Tag, name: str) -> None:
        classes = list(element.get("class", []))
        if name not in classes:
            classes.append(name)
        element["class"] = classes

    def render(self) -> str:
        """Serialise the (possibly updated) document back to markup"""
        return str(self._soup)

    def write(self, path: str | Path) -> None:
        path = Path(path)
        path.write_text(self.render(), encoding="utf-8")
        logger.info(f"Wrote page to {path}")
