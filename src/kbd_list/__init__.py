"""Keyboard and pointer navigation for one-dimensional lists."""

from .elements import Element, ElementLocator, Ref, ScrollContainer, TreeLocator
from .events import NavKey, PointerEvent
from .hotkeys import HotkeyRegistry, KeyBindingOptions, KeyEvent
from .navigator import KbdList, use_kbd_list
from .scroll import ScrollRequest
from .state import NO_HOVER, POINTER_LEFT, SelectionState

Options = KeyBindingOptions

__version__ = "0.1.0"

__all__ = [
    "Element",
    "ElementLocator",
    "HotkeyRegistry",
    "KbdList",
    "KeyBindingOptions",
    "KeyEvent",
    "NO_HOVER",
    "NavKey",
    "Options",
    "POINTER_LEFT",
    "PointerEvent",
    "Ref",
    "ScrollContainer",
    "ScrollRequest",
    "SelectionState",
    "TreeLocator",
    "use_kbd_list",
]
