"""Render snapshot handed to hosts and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .values import Position


@dataclass(frozen=True, slots=True)
class TextAreaView:
    """Host-friendly snapshot of what should be on screen.

    ``cursor_visible_row`` is the cursor row relative to ``first_row``; it is
    ``None`` when the cursor is scrolled out of the visible window.
    """

    lines: tuple[str, ...]
    first_row: int
    cursor: Position
    cursor_visible_row: Optional[int]
    scroll_col: int = 0
    width: int = 80
    height: int = 24
    show_cursor: bool = True
    show_line_numbers: bool = False
    line_number_width: int = 0
    placeholder: str = ""
    is_empty: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def line_number(self, visible_row: int) -> int:
        """1-based buffer line number for a row of ``lines``."""

        return self.first_row + visible_row + 1


__all__ = ["TextAreaView"]
