"""Test doubles for the element locator and scroll container."""

from dataclasses import dataclass, field
from typing import Optional

from kbd_list.elements import Element

INDEX_ATTR = "data-index"


@dataclass
class FakeContainer:
    """Scroll container that records scroll requests."""

    offset_height: int = 100
    calls: list[tuple[int, str]] = field(default_factory=list)

    def scroll(self, top: int, behavior: str = "smooth") -> None:
        self.calls.append((top, behavior))


@dataclass
class DictLocator:
    """ElementLocator backed by a dict; missing indices resolve to None."""

    elements: dict[int, Element] = field(default_factory=dict)
    lookups: list[tuple[str, int]] = field(default_factory=list)

    def locate(self, attribute: str, index: int) -> Optional[Element]:
        self.lookups.append((attribute, index))
        return self.elements.get(index)


def build_list(length: int, row_height: int = 20) -> Element:
    """Build a <ul> of <li data-index=i><span/></li> rows."""
    root = Element(tag="ul")
    for i in range(length):
        row = root.append(
            Element(
                tag="li",
                attributes={INDEX_ATTR: str(i)},
                offset_top=i * row_height,
                offset_height=row_height,
            )
        )
        row.append(Element(tag="span"))
    return root
