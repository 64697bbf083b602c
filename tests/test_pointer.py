"""Tests for pointer tracking."""

from kbd_list.elements import Element
from kbd_list.events.pointer import (
    PointerEvent,
    handle_leave,
    handle_move,
    pointer_index,
)
from kbd_list.state import NO_HOVER, POINTER_LEFT, SelectionState

from .helpers import INDEX_ATTR, build_list


def _span(root: Element, index: int) -> Element:
    return root.children[index].children[0]


class TestPointerIndex:
    def test_resolves_through_ancestor(self) -> None:
        root = build_list(3)
        assert pointer_index(PointerEvent(_span(root, 2)), INDEX_ATTR) == 2

    def test_target_itself_carries_attribute(self) -> None:
        root = build_list(3)
        assert pointer_index(PointerEvent(root.children[1]), INDEX_ATTR) == 1

    def test_no_list_item_under_pointer(self) -> None:
        root = build_list(3)
        assert pointer_index(PointerEvent(root), INDEX_ATTR) is None
        assert pointer_index(PointerEvent(None), INDEX_ATTR) is None

    def test_non_numeric_value(self) -> None:
        for value in ("abc", "", "1.5", "  "):
            item = Element(attributes={INDEX_ATTR: value})
            assert pointer_index(PointerEvent(item), INDEX_ATTR) is None

    def test_whitespace_around_number(self) -> None:
        item = Element(attributes={INDEX_ATTR: " 4 "})
        assert pointer_index(PointerEvent(item), INDEX_ATTR) == 4

    def test_empty_attribute_name(self) -> None:
        root = build_list(3)
        assert pointer_index(PointerEvent(_span(root, 0)), "") is None


class TestHandleMove:
    def test_sets_hover_and_active(self) -> None:
        root = build_list(5)
        state = SelectionState(length=5)

        assert handle_move(state, PointerEvent(_span(root, 3)), INDEX_ATTR) is True
        assert state.hover_index == 3
        assert state.active_index == 3

    def test_repeated_move_over_same_item_is_noop(self) -> None:
        root = build_list(5)
        state = SelectionState(length=5)
        handle_move(state, PointerEvent(_span(root, 3)), INDEX_ATTR)

        state.active_index = 1  # keyboard moved without resetting hover
        assert handle_move(state, PointerEvent(root.children[3]), INDEX_ATTR) is False
        assert state.active_index == 1

    def test_ignored_events_leave_state(self) -> None:
        state = SelectionState(length=5, active_index=2)
        bad = Element(attributes={INDEX_ATTR: "nope"})

        assert handle_move(state, PointerEvent(bad), INDEX_ATTR) is False
        assert handle_move(state, PointerEvent(Element()), INDEX_ATTR) is False
        assert state.active_index == 2
        assert state.hover_index == NO_HOVER


class TestHandleLeave:
    def test_sets_pointer_left(self) -> None:
        state = SelectionState(length=5, hover_index=2)
        assert handle_leave(state) is True
        assert state.hover_index == POINTER_LEFT
        assert handle_leave(state) is False

    def test_move_after_leave_restores_hover(self) -> None:
        root = build_list(5)
        state = SelectionState(length=5)
        handle_leave(state)
        handle_move(state, PointerEvent(_span(root, 1)), INDEX_ATTR)
        assert state.hover_index == 1
