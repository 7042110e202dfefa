"""Line storage for textarea buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .values import Range


@dataclass(frozen=True, slots=True)
class Buffer:
    """Immutable list-of-lines text storage.

    Lines live in a tuple, so every mutator builds a fresh sequence and two
    buffers never share mutable storage. A buffer always holds at least one
    line. Out-of-range rows and columns are clamped or ignored; nothing here
    raises for bad coordinates.
    """

    _lines: Tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        lines = tuple(self._lines)
        object.__setattr__(self, "_lines", lines or ("",))

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        # Only "\n" separates lines; a "\r" from "\r\n" input stays in the line.
        return cls(tuple(text.split("\n")))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Buffer":
        return cls(tuple(lines))

    def lines(self) -> Sequence[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        if not self._has_row(row):
            return ""
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return len(self.line(row))

    def char_count(self) -> int:
        """Total code points, line separators excluded."""

        return sum(len(line) for line in self._lines)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    def __str__(self) -> str:
        return self.to_text()

    def is_empty(self) -> bool:
        return len(self._lines) == 1 and self._lines[0] == ""

    def copy(self) -> "Buffer":
        return Buffer(self._lines)

    def insert_char(self, row: int, col: int, ch: str) -> "Buffer":
        if not self._has_row(row):
            return self
        line = self._lines[row]
        col = _clamp(col, len(line))
        return self._with_line(row, line[:col] + ch + line[col:])

    def delete_char(self, row: int, col: int) -> "Buffer":
        if not self._has_row(row):
            return self
        line = self._lines[row]
        if col < 0 or col >= len(line):
            return self
        return self._with_line(row, line[:col] + line[col + 1 :])

    def insert_newline(self, row: int, col: int) -> "Buffer":
        if not self._has_row(row):
            return self
        line = self._lines[row]
        col = _clamp(col, len(line))
        lines = list(self._lines)
        lines[row : row + 1] = [line[:col], line[col:]]
        return Buffer(tuple(lines))

    def delete_line(self, row: int) -> Tuple["Buffer", str]:
        if not self._has_row(row):
            return self, ""
        deleted = self._lines[row]
        if len(self._lines) == 1:
            return Buffer(("",)), deleted
        lines = list(self._lines)
        del lines[row]
        return Buffer(tuple(lines)), deleted

    def delete_to_line_end(self, row: int, col: int) -> Tuple["Buffer", str]:
        if not self._has_row(row):
            return self, ""
        line = self._lines[row]
        col = max(col, 0)
        if col >= len(line):
            return self, ""
        return self._with_line(row, line[:col]), line[col:]

    def set_line(self, row: int, text: str) -> "Buffer":
        if not self._has_row(row):
            return self
        return self._with_line(row, text)

    def join_with_next_line(self, row: int) -> "Buffer":
        if row < 0 or row >= len(self._lines) - 1:
            return self
        lines = list(self._lines)
        lines[row : row + 2] = [lines[row] + lines[row + 1]]
        return Buffer(tuple(lines))

    def text_in_range(self, span: Range) -> str:
        start_row, start_col = span.start_row_col()
        end_row, end_col = span.end_row_col()
        start_col, end_col = max(start_col, 0), max(end_col, 0)

        if start_row == end_row:
            line = self.line(start_row)
            if start_col >= len(line) or end_col > len(line):
                return ""
            return line[start_col:end_col]

        parts = [self.line(start_row)[start_col:]]
        parts.extend(self.line(row) for row in range(start_row + 1, end_row))
        last = self.line(end_row)
        parts.append(last[:end_col] if end_col <= len(last) else "")
        return "\n".join(parts)

    def _has_row(self, row: int) -> bool:
        return 0 <= row < len(self._lines)

    def _with_line(self, row: int, text: str) -> "Buffer":
        lines = list(self._lines)
        lines[row] = text
        return Buffer(tuple(lines))


def _clamp(col: int, length: int) -> int:
    return max(0, min(col, length))


__all__ = ["Buffer"]
