"""Keyboard navigation: key parsing and the index transition table."""

from enum import Enum
from typing import Optional, Union

from blessed.keyboard import Keystroke
from loguru import logger

from kbd_list.state import NO_HOVER, SelectionState

# Returned by next_index when a key causes no transition
NO_TRANSITION = -1


class NavKey(str, Enum):
    """The six navigation keys."""

    UP = "ArrowUp"
    DOWN = "ArrowDown"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"


NAV_KEYS: tuple[NavKey, ...] = tuple(NavKey)

# Browser-style names, blessed/curses names and short names
_KEY_ALIASES: dict[str, NavKey] = {
    "ArrowUp": NavKey.UP,
    "KEY_UP": NavKey.UP,
    "up": NavKey.UP,
    "ArrowDown": NavKey.DOWN,
    "KEY_DOWN": NavKey.DOWN,
    "down": NavKey.DOWN,
    "PageUp": NavKey.PAGE_UP,
    "KEY_PGUP": NavKey.PAGE_UP,  # blessed uses PGUP not PPAGE
    "KEY_PPAGE": NavKey.PAGE_UP,
    "pageup": NavKey.PAGE_UP,
    "PageDown": NavKey.PAGE_DOWN,
    "KEY_PGDOWN": NavKey.PAGE_DOWN,  # blessed uses PGDOWN not NPAGE
    "KEY_NPAGE": NavKey.PAGE_DOWN,
    "pagedown": NavKey.PAGE_DOWN,
    "Home": NavKey.HOME,
    "KEY_HOME": NavKey.HOME,
    "home": NavKey.HOME,
    "End": NavKey.END,
    "KEY_END": NavKey.END,
    "end": NavKey.END,
}

# Every key name a navigation binding listens to
KEY_NAMES: tuple[str, ...] = tuple(_KEY_ALIASES)


def parse_key(key: Union[Keystroke, str, NavKey, None]) -> Optional[NavKey]:
    """
    Map a keystroke or key name to a navigation key.

    Args:
        key: blessed Keystroke, NavKey, or key name ("ArrowDown", "KEY_DOWN", ...)

    Returns:
        The matching NavKey, or None for anything else
    """
    if key is None:
        return None
    if isinstance(key, NavKey):
        return key

    # Keystroke is a str subclass; sequences carry their name in .name
    name = getattr(key, "name", None)
    if name and name in _KEY_ALIASES:
        return _KEY_ALIASES[name]
    return _KEY_ALIASES.get(str(key))


def next_index(key: Optional[NavKey], length: int, active: int, hover: int) -> int:
    """
    Compute the next active index for a navigation key.

    Movement starts from the hovered item when the pointer is authoritative
    (``hover >= 0``), otherwise from the active item. Up/Down wrap around.

    Args:
        key: Parsed navigation key (None for unrecognized keys)
        length: Number of items in the list
        active: Current active index
        hover: Current hover index (or a negative sentinel)

    Returns:
        New index, or NO_TRANSITION for unrecognized keys and empty lists
    """
    if length == 0 or key is None:
        return NO_TRANSITION

    base = hover if hover >= 0 else active

    match key:
        case NavKey.UP:
            return (base - 1 + length) % length
        case NavKey.DOWN:
            return (base + 1) % length
        case NavKey.PAGE_UP | NavKey.HOME:
            return 0
        case NavKey.PAGE_DOWN | NavKey.END:
            return length - 1
        case _:
            return NO_TRANSITION


def handle_nav_key(
    state: SelectionState, key: Union[Keystroke, str, NavKey, None]
) -> bool:
    """
    Apply a navigation key to the selection state.

    On a transition the keyboard takes back authority: hover resets to
    NO_HOVER even if the pointer is still over an item.

    Returns:
        True if a transition happened
    """
    nav_key = parse_key(key)
    target = next_index(nav_key, state.length, state.active_index, state.hover_index)
    if target == NO_TRANSITION:
        logger.debug(f"Ignoring key {key!r} (length={state.length})")
        return False

    logger.debug(
        f"{nav_key.value}: {state.active_index} -> {target} (hover={state.hover_index})"
    )
    state.set_active_index(target)
    state.set_hover_index(NO_HOVER)
    return True
