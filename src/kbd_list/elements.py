"""UI element model shared by the selection core and its hosts.

The core never renders anything. It only needs to look up the element for an
index, walk from a pointer target up to the list item that owns it, and read
the geometry needed for scrolling. Hosts (the blessed terminal UI, tests)
build these elements from whatever they actually draw.
"""

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, Protocol, TypeVar


@dataclass(eq=False)
class Element:
    """A rendered UI element with attributes and vertical geometry."""

    tag: str = "div"
    attributes: dict[str, str] = field(default_factory=dict)
    offset_top: int = 0
    offset_height: int = 0
    parent: Optional["Element"] = None
    children: list["Element"] = field(default_factory=list)

    def append(self, child: "Element") -> "Element":
        """Attach child to this element and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def closest(self, attribute: str) -> Optional["Element"]:
        """Return self or the nearest ancestor carrying ``attribute``."""
        node: Optional[Element] = self
        while node is not None:
            if node.has_attribute(attribute):
                return node
            node = node.parent
        return None

    def iter_tree(self) -> Iterator["Element"]:
        """Yield this element and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()


class ElementLocator(Protocol):
    """Finds the element rendered for a list index."""

    def locate(self, attribute: str, index: int) -> Optional[Element]: ...


class ScrollContainer(Protocol):
    """Scrollable list container attached by the consumer."""

    offset_height: int

    def scroll(self, top: int, behavior: str = "smooth") -> None: ...


class TreeLocator:
    """ElementLocator that queries a rendered element tree.

    Matches elements whose ``attribute`` value equals ``str(index)``. Returns
    None when nothing matches or when the match is ambiguous.
    """

    def __init__(self, root: Element):
        self.root = root

    def locate(self, attribute: str, index: int) -> Optional[Element]:
        if not attribute:
            return None

        wanted = str(index)
        matches = [
            element
            for element in self.root.iter_tree()
            if element.get_attribute(attribute) == wanted
        ]
        if len(matches) != 1:
            return None
        return matches[0]


T = TypeVar("T")


class Ref(Generic[T]):
    """Mutable holder for an object the consumer attaches later."""

    def __init__(self, current: Optional[T] = None):
        self.current = current

    def __repr__(self) -> str:
        return f"Ref({self.current!r})"
