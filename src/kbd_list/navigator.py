"""Keyboard/pointer list navigation handle.

``use_kbd_list`` wires the selection state to a key-binding service, an
element locator and a scroll container. Every mutating entry point ends in a
single ``reconcile`` step: re-resolve the active element, then decide whether
to scroll.

Example:
    nav = use_kbd_list(len(items), "data-index", locator=TreeLocator(root))
    nav.ref.current = container
    registry.dispatch(KeyEvent("ArrowDown"))
"""

from typing import Callable, Optional

from loguru import logger

from .elements import Element, ElementLocator, Ref, ScrollContainer
from .events.keys import KEY_NAMES, handle_nav_key
from .events.pointer import PointerEvent, handle_leave, handle_move
from .hotkeys import Binding, HotkeyRegistry, KeyBindingOptions, KeyEvent
from .scroll import SCROLL_BEHAVIORS, ScrollRequest, sync_scroll
from .state import SelectionState

ChangeCallback = Callable[["KbdList"], None]


class KbdList:
    """Selection handle for one rendered list."""

    def __init__(
        self,
        length: int,
        index_attribute: str,
        options: Optional[KeyBindingOptions] = None,
        *,
        locator: ElementLocator,
        hotkeys: Optional[HotkeyRegistry] = None,
        scroll_behavior: str = "smooth",
        on_change: Optional[ChangeCallback] = None,
    ):
        if scroll_behavior not in SCROLL_BEHAVIORS:
            raise ValueError(
                f"Invalid scroll behavior: {scroll_behavior!r}. "
                f"Valid behaviors are: {SCROLL_BEHAVIORS}"
            )

        self.index_attribute = index_attribute
        self.locator = locator
        self.scroll_behavior = scroll_behavior
        self.on_change = on_change
        self.state = SelectionState(length=length)
        self.ref: Ref[ScrollContainer] = Ref()
        self.hotkeys = hotkeys if hotkeys is not None else HotkeyRegistry()
        self.last_scroll: Optional[ScrollRequest] = None
        self.revision = 0  # Bumped on every reconcile that saw a change

        self._seen: Optional[tuple[int, int, Optional[Element]]] = None
        self._binding: Optional[Binding] = self.hotkeys.bind(
            KEY_NAMES, self.handle_keypress, options
        )
        self.reconcile()

    # Read-only views ------------------------------------------------------

    @property
    def active_index(self) -> int:
        return self.state.active_index

    @property
    def active_element(self) -> Optional[Element]:
        return self.state.active_element

    @property
    def hover_index(self) -> int:
        return self.state.hover_index

    @property
    def length(self) -> int:
        return self.state.length

    # Mutations ------------------------------------------------------------

    def set_active_index(self, index: int) -> None:
        """Select ``index`` directly. The caller must pass a valid index."""
        self.state.set_active_index(index)
        self.reconcile()

    def set_length(self, length: int) -> None:
        """Tell the handle the list was replaced or filtered."""
        if self.state.on_length_change(length):
            self.reconcile()

    def handle_keypress(self, event: KeyEvent) -> None:
        # Always claim the key so the host doesn't scroll the page itself
        event.prevent_default()
        if handle_nav_key(self.state, event.key):
            self.reconcile()

    def handle_move(self, event: PointerEvent) -> None:
        if handle_move(self.state, event, self.index_attribute):
            self.reconcile()

    def handle_leave(self) -> None:
        if handle_leave(self.state):
            self.reconcile()

    def attach(self, container: Optional[ScrollContainer]) -> None:
        """Attach (or detach with None) the scrollable container."""
        self.ref.current = container
        if container is not None:
            self._seen = None
            self.reconcile()

    def close(self) -> None:
        """Release the key binding; the handle should not be used afterwards."""
        if self._binding is not None:
            self._binding.unbind()
            self._binding = None

    # Reconciliation ---------------------------------------------------------

    def reconcile(self) -> Optional[ScrollRequest]:
        """
        Bring the resolved element and scroll position in line with the state.

        Returns:
            The scroll request issued, or None
        """
        self.state.resolve_active_element(self.locator, self.index_attribute)

        seen = (
            self.state.active_index,
            self.state.hover_index,
            self.state.active_element,
        )
        if seen == self._seen:
            return None
        self._seen = seen
        self.revision += 1

        request = sync_scroll(self.state, self.ref.current, self.scroll_behavior)
        if request is not None:
            self.last_scroll = request

        if self.on_change is not None:
            self.on_change(self)
        return request

    def __repr__(self) -> str:
        return (
            f"KbdList(length={self.length}, active={self.active_index}, "
            f"hover={self.hover_index})"
        )


def use_kbd_list(
    length: int,
    index_attribute: str,
    options: Optional[KeyBindingOptions] = None,
    *,
    locator: ElementLocator,
    hotkeys: Optional[HotkeyRegistry] = None,
    scroll_behavior: str = "smooth",
    on_change: Optional[ChangeCallback] = None,
) -> KbdList:
    """
    Create a navigation handle for a list.

    Args:
        length: Number of items in the list
        index_attribute: Attribute carrying each item's index, e.g. "data-index"
        options: Forwarded to the key-binding service
        locator: Finds the element rendered for an index
        hotkeys: Key-binding service to subscribe to (a private one if omitted)
        scroll_behavior: "smooth" or "instant"
        on_change: Called after any reconcile that changed the selection

    Returns:
        KbdList handle; attach the scroll container via ``attach`` or ``ref``
    """
    logger.debug(f"Creating list navigation (length={length}, attr={index_attribute})")
    return KbdList(
        length,
        index_attribute,
        options,
        locator=locator,
        hotkeys=hotkeys,
        scroll_behavior=scroll_behavior,
        on_change=on_change,
    )
