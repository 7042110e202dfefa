"""UI-agnostic Emacs-style multiline text input engine."""

from .actions import EditingService, NavigationService
from .buffer import (
    Buffer,
    Cursor,
    CursorHooks,
    KillRing,
    Position,
    Range,
    Selection,
    TextArea,
    TextAreaView,
)
from .keymaps import KeybindingDispatcher, KeyEvent

__all__ = [
    "Buffer",
    "Cursor",
    "CursorHooks",
    "EditingService",
    "KeyEvent",
    "KeybindingDispatcher",
    "KillRing",
    "NavigationService",
    "Position",
    "Range",
    "Selection",
    "TextArea",
    "TextAreaView",
]

__version__ = "0.1.0"
