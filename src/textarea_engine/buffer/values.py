"""Position and range value objects shared by every buffer service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Row/column pair; ``col`` is a code point offset, not a display column.

    Field order gives row-major ordering for the comparison operators.
    """

    row: int
    col: int

    def is_before(self, other: "Position") -> bool:
        return self < other

    def is_after(self, other: "Position") -> bool:
        return self > other

    def equals(self, other: "Position") -> bool:
        return self == other

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions, normalized so start <= end."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    def start_row_col(self) -> Tuple[int, int]:
        return self.start.row, self.start.col

    def end_row_col(self) -> Tuple[int, int]:
        return self.end.row, self.end.col

    def contains(self, pos: Position) -> bool:
        return self.start <= pos <= self.end

    def is_empty(self) -> bool:
        return self.start == self.end

    def is_single_line(self) -> bool:
        return self.start.row == self.end.row


__all__ = ["Position", "Range"]
