"""Buffer, cursor, kill ring and the TextArea aggregate."""

from .document import Buffer
from .hooks import (
    REASON_BACKSPACE_BLOCKED,
    REASON_BLOCKED,
    REASON_BOTTOM,
    REASON_NO_VALID_COLUMN,
    REASON_TOP,
    BoundaryHitHandler,
    CursorHooks,
    CursorMovedHandler,
    MovementValidator,
)
from .kill_ring import DEFAULT_KILL_RING_SIZE, KillRing
from .state import Cursor, Selection, copy_selection
from .textarea import DisplayConfig, TextArea
from .validation import clamp_cursor, clamp_position, is_valid_cursor
from .values import Position, Range
from .view import TextAreaView

__all__ = [
    "Buffer",
    "BoundaryHitHandler",
    "Cursor",
    "CursorHooks",
    "CursorMovedHandler",
    "DEFAULT_KILL_RING_SIZE",
    "DisplayConfig",
    "KillRing",
    "MovementValidator",
    "Position",
    "REASON_BACKSPACE_BLOCKED",
    "REASON_BLOCKED",
    "REASON_BOTTOM",
    "REASON_NO_VALID_COLUMN",
    "REASON_TOP",
    "Range",
    "Selection",
    "TextArea",
    "TextAreaView",
    "clamp_cursor",
    "clamp_position",
    "copy_selection",
    "is_valid_cursor",
]
