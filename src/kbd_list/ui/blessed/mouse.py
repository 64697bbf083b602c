"""SGR mouse report decoding.

blessed does not resolve SGR mouse reports into named keystrokes, so they
arrive as an escape followed by plain characters. ``read_mouse_report``
collects those characters and ``parse_sgr_mouse`` decodes the result.
"""

import re
from dataclasses import dataclass
from typing import Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

_SGR_RE = re.compile(r"^\x1b\[<(\d+);(\d+);(\d+)([Mm])$")

MOTION_FLAG = 32
WHEEL_FLAG = 64


@dataclass(frozen=True)
class MouseReport:
    """Decoded pointer report with 0-based coordinates."""

    button: int
    x: int
    y: int
    pressed: bool

    @property
    def is_motion(self) -> bool:
        return bool(self.button & MOTION_FLAG)

    @property
    def is_wheel(self) -> bool:
        return bool(self.button & WHEEL_FLAG)


def parse_sgr_mouse(sequence: str) -> Optional[MouseReport]:
    """
    Decode an SGR mouse report such as ``"\\x1b[<35;10;5M"``.

    Returns:
        MouseReport, or None if the sequence is not an SGR mouse report
    """
    match = _SGR_RE.match(sequence)
    if not match:
        return None
    button, col, row, final = match.groups()
    return MouseReport(
        button=int(button),
        x=int(col) - 1,
        y=int(row) - 1,
        pressed=final == "M",
    )


def read_mouse_report(term: Terminal, first: Keystroke) -> str:
    """
    Read the rest of an SGR report after an escape keystroke.

    Args:
        term: blessed Terminal to read from
        first: The keystroke that started the sequence

    Returns:
        Everything read, starting with ``first``. Only a complete report
        is accepted by ``parse_sgr_mouse``; anything else is input the
        caller still has to handle.
    """
    sequence = str(first)
    if sequence == "\x1b":
        nxt = str(term.inkey(timeout=0))
        sequence += nxt
        if nxt != "[":
            return sequence
    if sequence == "\x1b[":
        nxt = str(term.inkey(timeout=0))
        sequence += nxt
        if nxt != "<":
            return sequence
    if not sequence.startswith("\x1b[<"):
        return sequence

    # Parameters end with M (press/motion) or m (release)
    while len(sequence) < 32:
        nxt = str(term.inkey(timeout=0))
        if not nxt:
            return sequence
        sequence += nxt
        if nxt in ("M", "m"):
            return sequence
    return sequence
