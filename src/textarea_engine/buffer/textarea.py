"""TextArea aggregate combining buffer, cursor, kill ring and display config."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from .document import Buffer
from .hooks import BoundaryHitHandler, CursorHooks, CursorMovedHandler, MovementValidator
from .kill_ring import DEFAULT_KILL_RING_SIZE, KillRing
from .state import Cursor, Selection
from .validation import clamp_cursor, clamp_position
from .values import Position
from .view import TextAreaView


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Display and behaviour settings. Zero limits mean unlimited."""

    width: int = 80
    height: int = 24
    max_lines: int = 0
    max_chars: int = 0
    placeholder: str = ""
    wrap: bool = False
    read_only: bool = False
    show_line_numbers: bool = False
    show_cursor: bool = True


@dataclass(frozen=True, slots=True)
class TextArea:
    """Immutable multiline editor value.

    Every builder returns a new TextArea. Hooks travel by reference to every
    derived value, so a validator installed once keeps guarding later edits.
    """

    buffer: Buffer = field(default_factory=Buffer)
    cursor: Cursor = field(default_factory=Cursor)
    selection: Optional[Selection] = None
    kill_ring: KillRing = field(
        default_factory=lambda: KillRing(DEFAULT_KILL_RING_SIZE)
    )
    config: DisplayConfig = field(default_factory=DisplayConfig)
    scroll_row: int = 0
    scroll_col: int = 0
    hooks: CursorHooks = field(default_factory=CursorHooks)

    # -- configuration -------------------------------------------------

    def with_size(self, width: int, height: int) -> "TextArea":
        return self._scrolled(self._configure(width=width, height=height))

    def with_max_lines(self, max_lines: int) -> "TextArea":
        return self._configure(max_lines=max_lines)

    def with_max_chars(self, max_chars: int) -> "TextArea":
        return self._configure(max_chars=max_chars)

    def with_wrap(self, wrap: bool) -> "TextArea":
        configured = self._configure(wrap=wrap)
        if wrap:
            # Wrapped lines never scroll sideways.
            configured = replace(configured, scroll_col=0)
        return self._scrolled(configured)

    def with_placeholder(self, text: str) -> "TextArea":
        return self._configure(placeholder=text)

    def with_read_only(self, read_only: bool) -> "TextArea":
        return self._configure(read_only=read_only)

    def with_line_numbers(self, show: bool) -> "TextArea":
        return self._configure(show_line_numbers=show)

    def with_show_cursor(self, show: bool) -> "TextArea":
        return self._configure(show_cursor=show)

    def with_config(self, config: DisplayConfig) -> "TextArea":
        return replace(self, config=config)

    def _configure(self, **changes: object) -> "TextArea":
        return replace(self, config=replace(self.config, **changes))

    # -- hooks ---------------------------------------------------------

    def with_hooks(self, hooks: CursorHooks) -> "TextArea":
        return replace(self, hooks=hooks)

    def on_movement(self, validator: Optional[MovementValidator]) -> "TextArea":
        return replace(self, hooks=replace(self.hooks, validator=validator))

    def on_cursor_moved(self, handler: Optional[CursorMovedHandler]) -> "TextArea":
        return replace(self, hooks=replace(self.hooks, on_moved=handler))

    def on_boundary_hit(self, handler: Optional[BoundaryHitHandler]) -> "TextArea":
        return replace(self, hooks=replace(self.hooks, on_boundary_hit=handler))

    # -- content and cursor --------------------------------------------

    def with_buffer(self, buffer: Buffer) -> "TextArea":
        """Swap the buffer; cursor returns to (0, 0) and the selection is dropped."""

        return replace(
            self,
            buffer=buffer,
            cursor=Cursor(0, 0),
            selection=None,
            scroll_row=0,
            scroll_col=0,
        )

    def with_cursor(self, cursor: Cursor) -> "TextArea":
        """Place the cursor as given and scroll so it stays visible."""

        return self._scrolled(replace(self, cursor=cursor))

    def with_kill_ring(self, kill_ring: KillRing) -> "TextArea":
        return replace(self, kill_ring=kill_ring)

    def with_selection(self, selection: Optional[Selection]) -> "TextArea":
        return replace(self, selection=selection)

    def clear_selection(self) -> "TextArea":
        return replace(self, selection=None)

    def apply_edit(
        self,
        buffer: Buffer,
        cursor: Cursor,
        kill_ring: Optional[KillRing] = None,
    ) -> "TextArea":
        """Commit an edit: new buffer, clamped cursor, no selection, scroll kept."""

        updated = replace(
            self,
            buffer=buffer,
            cursor=clamp_cursor(buffer, cursor),
            selection=None,
            kill_ring=self.kill_ring if kill_ring is None else kill_ring,
        )
        return self._scrolled(updated)

    def set_value(self, text: str) -> "TextArea":
        return self.with_buffer(Buffer.from_text(text))

    def set_cursor_position(self, row: int, col: int) -> "TextArea":
        return self.with_cursor(clamp_position(self.buffer, row, col))

    def move_cursor_to_end(self) -> "TextArea":
        last_row = self.buffer.line_count - 1
        return self.with_cursor(Cursor(last_row, self.buffer.line_length(last_row)))

    # -- getters -------------------------------------------------------

    def value(self) -> str:
        return self.buffer.to_text()

    def lines(self) -> Sequence[str]:
        return self.buffer.lines()

    def line_count(self) -> int:
        return self.buffer.line_count

    def current_line(self) -> str:
        return self.buffer.line(self.cursor.row)

    def cursor_position(self) -> Tuple[int, int]:
        return self.cursor.row, self.cursor.col

    def position(self) -> Position:
        return self.cursor.position()

    def content_parts(self) -> Tuple[str, str, str]:
        """Split the current line around the cursor as (before, at, after).

        At the end of a line ``at`` is a single space so hosts can draw a
        block cursor there.
        """

        line = self.current_line()
        col = self.cursor.col
        if col >= len(line):
            return line, " ", ""
        return line[:col], line[col], line[col + 1 :]

    def has_selection(self) -> bool:
        return self.selection is not None

    def selected_text(self) -> str:
        if self.selection is None:
            return ""
        return self.buffer.text_in_range(self.selection.range())

    def is_empty(self) -> bool:
        return self.buffer.is_empty()

    def is_read_only(self) -> bool:
        return self.config.read_only

    def width(self) -> int:
        return self.config.width

    def height(self) -> int:
        return self.config.height

    def max_lines(self) -> int:
        return self.config.max_lines

    def max_chars(self) -> int:
        return self.config.max_chars

    def placeholder(self) -> str:
        return self.config.placeholder

    def show_cursor(self) -> bool:
        return self.config.show_cursor

    def show_line_numbers(self) -> bool:
        return self.config.show_line_numbers

    def line_number_width(self) -> int:
        if not self.config.show_line_numbers:
            return 0
        return len(str(self.buffer.line_count))

    def visible_lines(self) -> Sequence[str]:
        lines = self.buffer.lines()
        start = self.scroll_row
        if start >= len(lines):
            return ()
        return lines[start : start + max(self.config.height, 0)]

    def view(self) -> TextAreaView:
        visible = tuple(self.visible_lines())
        relative = self.cursor.row - self.scroll_row
        cursor_visible_row = relative if 0 <= relative < len(visible) else None
        return TextAreaView(
            lines=visible,
            first_row=self.scroll_row,
            cursor=self.cursor.position(),
            cursor_visible_row=cursor_visible_row,
            scroll_col=self.scroll_col,
            width=self.config.width,
            height=self.config.height,
            show_cursor=self.config.show_cursor,
            show_line_numbers=self.config.show_line_numbers,
            line_number_width=self.line_number_width(),
            placeholder=self.config.placeholder,
            is_empty=self.is_empty(),
        )

    def _scrolled(self, textarea: "TextArea") -> "TextArea":
        row, col = textarea.cursor.row, textarea.cursor.col
        height, width = textarea.config.height, textarea.config.width
        scroll_row, scroll_col = textarea.scroll_row, textarea.scroll_col

        if height > 0:
            if row < scroll_row:
                scroll_row = row
            if row >= scroll_row + height:
                scroll_row = row - height + 1

        if not textarea.config.wrap and width > 0:
            if col < scroll_col:
                scroll_col = col
            if col >= scroll_col + width:
                scroll_col = col - width + 1

        if (scroll_row, scroll_col) == (textarea.scroll_row, textarea.scroll_col):
            return textarea
        return replace(textarea, scroll_row=scroll_row, scroll_col=scroll_col)


__all__ = ["DisplayConfig", "TextArea"]
