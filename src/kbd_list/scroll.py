"""Scroll synchronization: keep the active element in view.

The policy is bottom-anchored: the target offset lines up the active
element's bottom edge with the container's visible bottom edge.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .elements import Element, ScrollContainer
from .state import POINTER_LEFT, SelectionState

SCROLL_BEHAVIORS = ("smooth", "instant")


@dataclass(frozen=True)
class ScrollRequest:
    """A scroll issued to the container."""

    top: int
    behavior: str = "smooth"


def should_scroll(
    state: SelectionState, container: Optional[ScrollContainer]
) -> bool:
    """
    Decide whether the container should scroll to the active element.

    No scroll while the active item is the hovered one (the pointer is
    already on it) or after the pointer left the container.
    """
    return (
        container is not None
        and state.active_index >= 0
        and state.active_index != state.hover_index
        and state.active_element is not None
        and state.hover_index != POINTER_LEFT
    )


def bottom_anchored_top(element: Element, container: ScrollContainer) -> int:
    """Scroll offset aligning element's bottom with the container's bottom."""
    return element.offset_top - container.offset_height + element.offset_height


def sync_scroll(
    state: SelectionState,
    container: Optional[ScrollContainer],
    behavior: str = "smooth",
) -> Optional[ScrollRequest]:
    """
    Request a scroll on the container if the selection calls for one.

    Fire-and-forget: the container animates on its own, and a newer request
    simply supersedes an in-flight one.

    Returns:
        The issued ScrollRequest, or None if no scroll was requested
    """
    if not should_scroll(state, container):
        return None

    request = ScrollRequest(
        top=bottom_anchored_top(state.active_element, container),
        behavior=behavior,
    )
    logger.debug(f"Scroll to {request.top} ({behavior}) for index {state.active_index}")
    container.scroll(request.top, behavior=request.behavior)
    return request
