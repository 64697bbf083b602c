"""Keyboard and pointer event handlers for list navigation."""

from .keys import (
    KEY_NAMES,
    NAV_KEYS,
    NO_TRANSITION,
    NavKey,
    handle_nav_key,
    next_index,
    parse_key,
)
from .pointer import PointerEvent, handle_leave, handle_move, pointer_index

__all__ = [
    "KEY_NAMES",
    "NAV_KEYS",
    "NO_TRANSITION",
    "NavKey",
    "PointerEvent",
    "handle_leave",
    "handle_move",
    "handle_nav_key",
    "next_index",
    "parse_key",
    "pointer_index",
]
