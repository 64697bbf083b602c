"""Terminal output utilities that prevent rendering artifacts."""

import sys

from blessed import Terminal

# xterm any-motion tracking with SGR extended coordinates
MOUSE_ON = "\x1b[?1003h\x1b[?1006h"
MOUSE_OFF = "\x1b[?1003l\x1b[?1006l"


def write_at(
    term: Terminal, x: int, y: int, content: str, *, clear: bool = True
) -> None:
    """Write content at position, clearing the rest of the line by default.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Whether to clear to end of line (default True)
    """
    if clear:
        sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        sys.stdout.write(term.move_xy(x, y) + content)


def set_mouse_tracking(enabled: bool) -> None:
    """Turn terminal pointer reporting on or off."""
    sys.stdout.write(MOUSE_ON if enabled else MOUSE_OFF)
    sys.stdout.flush()
