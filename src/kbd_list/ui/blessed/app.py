"""Main event loop for the blessed list browser."""

import sys
from dataclasses import dataclass, field
from typing import Optional

from blessed import Terminal
from blessed.keyboard import Keystroke
from loguru import logger

from kbd_list.core.config import Config
from kbd_list.events.pointer import PointerEvent
from kbd_list.hotkeys import HotkeyRegistry, KeyEvent
from kbd_list.navigator import KbdList, use_kbd_list

from .list_view import ListView
from .mouse import parse_sgr_mouse, read_mouse_report
from .terminal import set_mouse_tracking, write_at

FRAME_TIMEOUT = 0.05  # Seconds per frame while a smooth scroll is running
IDLE_TIMEOUT = 0.5
HEADER_ROWS = 1
FOOTER_ROWS = 1


@dataclass
class ListApp:
    """
    Interactive list browser state.

    ``filter_text`` narrows the visible lines; every change in the number of
    matches is reported to the navigator as a list-length change.
    """

    all_lines: list[str]
    config: Config = field(default_factory=Config)
    title: str = ""
    filter_text: str = ""
    filter_editing: bool = False
    dirty: bool = True
    result: Optional[str] = None
    done: bool = False

    def __post_init__(self) -> None:
        self.view = ListView(
            self.matching_lines(), index_attribute=self.config.list.index_attribute
        )
        self.hotkeys = HotkeyRegistry()
        self.nav: KbdList = use_kbd_list(
            len(self.view.lines),
            self.config.list.index_attribute,
            self.config.keys,
            locator=self.view.locator,
            hotkeys=self.hotkeys,
            scroll_behavior=self.config.scroll.behavior,
            on_change=self._mark_dirty,
        )

    def _mark_dirty(self, _nav: KbdList) -> None:
        self.dirty = True

    def matching_lines(self) -> list[str]:
        if not self.filter_text:
            return list(self.all_lines)
        needle = self.filter_text.lower()
        return [line for line in self.all_lines if needle in line.lower()]

    def apply_filter(self) -> None:
        """Re-render matching lines and report the new length."""
        self.view.set_lines(self.matching_lines())
        self.nav.set_length(len(self.view.lines))
        # Same length, different rows: the active element must be re-resolved
        self.nav.reconcile()
        self.dirty = True

    # Input ----------------------------------------------------------------

    def handle_key(self, key: Keystroke) -> None:
        """Route one keystroke: filter editing, app keys, then navigation."""
        if self.filter_editing:
            self._handle_filter_key(key)
            return

        if key.name == "KEY_ENTER":
            if self.nav.length > 0:
                self.result = self.view.lines[self.nav.active_index]
            self.done = True
        elif key.name == "KEY_ESCAPE" or str(key) == "q":
            self.done = True
        elif str(key) == "/":
            self.filter_editing = True
            self.dirty = True
        else:
            if not self.hotkeys.dispatch(KeyEvent(key)):
                logger.debug(f"Unbound key {key!r}")

    def _handle_filter_key(self, key: Keystroke) -> None:
        if key.name in ("KEY_ENTER", "KEY_ESCAPE"):
            self.filter_editing = False
        elif key.name == "KEY_BACKSPACE" or key == "\x7f":
            self.filter_text = self.filter_text[:-1]
            self.apply_filter()
        elif key and key.isprintable():
            self.filter_text += str(key)
            self.apply_filter()
        else:
            # Navigation keys still reach the list while typing if configured
            self.hotkeys.dispatch(KeyEvent(key, focused_tag="input"))
        self.dirty = True

    def handle_pointer(self, x: int, y: int) -> None:
        """Feed pointer motion at screen position (x, y) to the navigator."""
        row = y - HEADER_ROWS
        target = self.view.element_at(row)
        if target is None:
            self.nav.handle_leave()
            return
        self.nav.handle_move(PointerEvent(target=target, x=x, y=y))

    def handle_escape_sequence(self, key: Keystroke, sequence: str) -> None:
        """
        Handle input that started with an escape.

        Args:
            key: The keystroke that started the sequence
            sequence: Everything read after it, including ``key``
        """
        report = parse_sgr_mouse(sequence)
        if report is not None:
            if not report.is_wheel:
                self.handle_pointer(report.x, report.y)
            return

        tail = sequence[len(str(key)):]
        if not tail:
            self.handle_key(key)
            return

        if tail.startswith("[") or str(key) != "\x1b":
            logger.debug(f"Dropping unrecognized sequence {sequence!r}")
            return

        # Alt+key arrives as escape followed by the key itself
        for ch in tail:
            self.handle_key(Keystroke(ch))

    def tick(self) -> None:
        """Advance the smooth scroll animation by one frame."""
        if self.view.viewport.step():
            self.dirty = True

    # Rendering --------------------------------------------------------------

    def render(self, term: Terminal) -> None:
        self.dirty = False
        height = max(0, term.height - HEADER_ROWS - FOOTER_ROWS)
        count = len(self.view.lines)
        header = self.title or "kbd-list"
        write_at(term, 0, 0, term.bold(f"{header} ({count}/{len(self.all_lines)})"))

        self.view.render(term, HEADER_ROWS, height, self.nav.active_index)
        if self.nav.ref.current is None:
            # Attach once the viewport has a real height
            self.nav.attach(self.view.viewport)

        if self.filter_editing:
            footer = term.bold_green(f"/{self.filter_text}")
        elif self.filter_text:
            footer = term.dim(f"filter: {self.filter_text}  (/ edit, enter select, q quit)")
        else:
            footer = term.dim("↑↓ PgUp PgDn Home End  / filter  enter select  q quit")
        write_at(term, 0, term.height - 1, footer)
        sys.stdout.flush()


def run_list(lines: list[str], config: Optional[Config] = None, title: str = "") -> Optional[str]:
    """
    Run the interactive list browser.

    Args:
        lines: Items to browse
        config: Loaded configuration (defaults if omitted)
        title: Header text

    Returns:
        The selected line, or None if the user quit
    """
    term = Terminal()
    app = ListApp(lines, config=config or Config(), title=title)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        set_mouse_tracking(True)
        try:
            while not app.done:
                if app.dirty:
                    app.render(term)

                timeout = FRAME_TIMEOUT if app.view.viewport.animating else IDLE_TIMEOUT
                key = term.inkey(timeout=timeout)
                if not key:
                    app.tick()
                    continue

                if key.name == "KEY_ESCAPE" or str(key).startswith("\x1b["):
                    app.handle_escape_sequence(key, read_mouse_report(term, key))
                else:
                    app.handle_key(key)
                app.tick()
        finally:
            set_mouse_tracking(False)

    logger.info(f"List closed (selected={app.result!r})")
    return app.result
