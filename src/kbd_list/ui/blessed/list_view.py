"""Terminal list view: rows rendered as elements inside a scrolling viewport."""

from dataclasses import dataclass, field
from typing import Optional

from blessed import Terminal

from kbd_list.elements import Element, TreeLocator

from .terminal import write_at


@dataclass
class RowViewport:
    """
    Scroll container measured in terminal rows.

    A smooth scroll sets a target that ``step`` approaches one frame at a
    time; a newer request replaces the target.
    """

    offset_height: int = 0
    total_rows: int = 0
    scroll_top: int = 0
    target_top: int = 0
    max_step: int = 3

    def max_scroll(self) -> int:
        return max(0, self.total_rows - self.offset_height)

    def clamp(self, top: int) -> int:
        return max(0, min(top, self.max_scroll()))

    def scroll(self, top: int, behavior: str = "smooth") -> None:
        self.target_top = self.clamp(top)
        if behavior != "smooth":
            self.scroll_top = self.target_top

    @property
    def animating(self) -> bool:
        return self.scroll_top != self.target_top

    def step(self) -> bool:
        """Advance a smooth scroll by one frame. Returns True if it moved."""
        if not self.animating:
            return False
        delta = self.target_top - self.scroll_top
        move = max(-self.max_step, min(self.max_step, delta))
        self.scroll_top += move
        return True

    def resize(self, height: int, total_rows: int) -> None:
        self.offset_height = max(0, height)
        self.total_rows = max(0, total_rows)
        self.scroll_top = self.clamp(self.scroll_top)
        self.target_top = self.clamp(self.target_top)


@dataclass
class ListView:
    """Rows of text mirrored by an element tree the navigator can query."""

    lines: list[str]
    index_attribute: str = "data-index"
    root: Element = field(default_factory=lambda: Element(tag="ul"))
    viewport: RowViewport = field(default_factory=RowViewport)

    def __post_init__(self) -> None:
        self.locator = TreeLocator(self.root)
        self.set_lines(self.lines)

    def set_lines(self, lines: list[str]) -> None:
        """Replace the rendered rows."""
        self.lines = list(lines)
        self.root.children.clear()
        for i, line in enumerate(self.lines):
            row = self.root.append(
                Element(
                    tag="li",
                    attributes={self.index_attribute: str(i)},
                    offset_top=i,
                    offset_height=1,
                )
            )
            # Inner span so pointer hits resolve through the parent row
            row.append(Element(tag="span", offset_top=i, offset_height=1))
        self.viewport.resize(self.viewport.offset_height, len(self.lines))

    def element_at(self, row_offset: int) -> Optional[Element]:
        """Return the innermost element drawn at a row of the viewport."""
        if row_offset < 0 or row_offset >= self.viewport.offset_height:
            return None
        index = self.viewport.scroll_top + row_offset
        if index >= len(self.root.children):
            return None
        row = self.root.children[index]
        return row.children[0] if row.children else row

    def render(
        self, term: Terminal, y: int, height: int, active_index: int
    ) -> int:
        """
        Render visible rows with the active one highlighted.

        Args:
            term: blessed Terminal instance
            y: Starting y position
            height: Available height
            active_index: Index to highlight

        Returns:
            Number of lines rendered
        """
        self.viewport.resize(height, len(self.lines))
        if height <= 0:
            return 0

        start = self.viewport.scroll_top
        line_num = 0
        for i, line in enumerate(self.lines[start : start + height]):
            index = start + i
            if index == active_index:
                write_at(term, 0, y + line_num, term.reverse(f" ▶ {line}"))
            else:
                write_at(term, 0, y + line_num, f"   {line}")
            line_num += 1

        # Clear rows left over from a longer list
        while line_num < height:
            write_at(term, 0, y + line_num, "")
            line_num += 1

        return line_num
