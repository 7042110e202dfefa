"""Cursor and selection state tied to a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .values import Position, Range


@dataclass(frozen=True, slots=True)
class Cursor:
    """Row/column pointer into a buffer.

    Cursors do not validate themselves; whoever applies one to a buffer
    clamps it first.
    """

    row: int = 0
    col: int = 0

    def position(self) -> Position:
        return Position(self.row, self.col)

    def move_to(self, row: int, col: int) -> "Cursor":
        return Cursor(row, col)

    def move_by(self, d_row: int, d_col: int) -> "Cursor":
        return Cursor(self.row + d_row, self.col + d_col)

    def copy(self) -> "Cursor":
        return Cursor(self.row, self.col)


@dataclass(frozen=True, slots=True)
class Selection:
    """Anchor plus moving end; either may come first in the buffer."""

    anchor: Position
    cursor: Position

    def range(self) -> Range:
        return Range(self.anchor, self.cursor)

    def with_cursor(self, cursor: Position) -> "Selection":
        return Selection(self.anchor, cursor)

    def copy(self) -> "Selection":
        return Selection(self.anchor, self.cursor)


def copy_selection(selection: Optional[Selection]) -> Optional[Selection]:
    if selection is None:
        return None
    return selection.copy()


__all__ = ["Cursor", "Selection", "copy_selection"]
