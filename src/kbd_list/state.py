"""Selection state for keyboard/pointer list navigation.

State changes go through setters that report whether anything actually
changed, so the host can decide when to re-render and the navigator can run a
single reconcile step afterwards.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .elements import Element, ElementLocator

# Hover sentinels
NO_HOVER = -1  # Keyboard is authoritative
POINTER_LEFT = -2  # Pointer left the navigable container


@dataclass
class SelectionState:
    """
    Active/hover indices and the resolved active element for one list.

    ``active_index`` is not bounds-checked: callers of ``set_active_index``
    must pass a valid index for the current length.
    """

    length: int = 0
    active_index: int = 0
    hover_index: int = NO_HOVER
    active_element: Optional[Element] = None

    @property
    def pointer_authoritative(self) -> bool:
        """True when the next keyboard move starts from the hovered item."""
        return self.hover_index >= 0

    def set_active_index(self, index: int) -> bool:
        """Set active index unconditionally. Returns True if it changed."""
        if index == self.active_index:
            return False
        self.active_index = index
        return True

    def set_hover_index(self, index: int) -> bool:
        """Set hover index. Returns True if it changed."""
        if index == self.hover_index:
            return False
        self.hover_index = index
        return True

    def resolve_active_element(
        self, locator: ElementLocator, attribute: str
    ) -> bool:
        """
        Look up the element for the active index.

        Keeps the previous element when the locator finds nothing, so the
        highlight survives until a new element renders.

        Returns:
            True if ``active_element`` changed
        """
        element = locator.locate(attribute, self.active_index)
        if element is None:
            logger.debug(
                f"No element for {attribute}={self.active_index}, keeping last"
            )
            return False
        if element is self.active_element:
            return False
        self.active_element = element
        return True

    def on_length_change(self, new_length: int) -> bool:
        """
        Record a new list length and reset the active index to 0.

        Returns:
            True if the length changed (and the reset was applied)
        """
        if new_length == self.length:
            return False
        logger.debug(f"List length {self.length} -> {new_length}, resetting")
        self.length = new_length
        self.active_index = 0
        return True
