"""Pointer tracking: hover over list items drives the selection."""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from kbd_list.elements import Element
from kbd_list.state import POINTER_LEFT, SelectionState


@dataclass
class PointerEvent:
    """Pointer movement over an element."""

    target: Optional[Element]
    x: int = 0
    y: int = 0


def pointer_index(event: PointerEvent, attribute: str) -> Optional[int]:
    """
    Resolve the list index under the pointer.

    Finds the nearest element (target or ancestor) carrying ``attribute`` and
    parses its value as a base-10 integer.

    Returns:
        The index, or None if no list item is under the pointer or the
        attribute value is not an integer
    """
    if event.target is None or not attribute:
        return None

    item = event.target.closest(attribute)
    if item is None:
        return None

    raw = (item.get_attribute(attribute) or "").strip()
    try:
        return int(raw, 10)
    except ValueError:
        logger.debug(f"Non-numeric {attribute}={raw!r} under pointer")
        return None


def handle_move(state: SelectionState, event: PointerEvent, attribute: str) -> bool:
    """
    Make the item under the pointer both hovered and active.

    Moving over the item that is already hovered does nothing, so continuous
    motion within one row causes no state churn.

    Returns:
        True if the state changed
    """
    index = pointer_index(event, attribute)
    if index is None or index == state.hover_index:
        return False

    state.set_hover_index(index)
    state.set_active_index(index)
    return True


def handle_leave(state: SelectionState) -> bool:
    """Mark that the pointer left the container. Returns True if changed."""
    return state.set_hover_index(POINTER_LEFT)
