"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Buffer
from .state import Cursor


def clamp_position(buffer: Buffer, row: int, col: int) -> Cursor:
    row = max(0, min(row, buffer.line_count - 1))
    col = max(0, min(col, buffer.line_length(row)))
    return Cursor(row, col)


def clamp_cursor(buffer: Buffer, cursor: Cursor) -> Cursor:
    return clamp_position(buffer, cursor.row, cursor.col)


def is_valid_cursor(buffer: Buffer, cursor: Cursor) -> bool:
    if cursor.row < 0 or cursor.row >= buffer.line_count:
        return False
    return 0 <= cursor.col <= buffer.line_length(cursor.row)


__all__ = ["clamp_cursor", "clamp_position", "is_valid_cursor"]
