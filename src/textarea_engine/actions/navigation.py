"""Cursor motion over the TextArea aggregate."""

from __future__ import annotations

from textarea_engine.buffer import (
    REASON_BLOCKED,
    REASON_BOTTOM,
    REASON_NO_VALID_COLUMN,
    REASON_TOP,
    Cursor,
    Position,
    TextArea,
)
from textarea_engine.runtime.telemetry import record_event

from .words import word_end, word_start


def report_blocked(textarea: TextArea, attempted: Position, reason: str) -> None:
    """Tell the host a motion was refused, then log it at debug level."""

    textarea.hooks.boundary_hit(attempted, reason)
    record_event(
        "cursor.blocked",
        level="debug",
        data={
            "from": str(textarea.position()),
            "attempted": str(attempted),
            "reason": reason,
        },
    )


class NavigationService:
    """Stateless cursor motion; every method maps a TextArea to a TextArea.

    A registered validator sees ``(from, to)`` before any motion is applied.
    On a veto the boundary-hit hook receives the attempted position and the
    input value comes back untouched. Accepted motions fire the moved hook.
    """

    def move_left(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        if col > 0:
            return self._move_cursor(textarea, Position(row, col - 1))
        if row > 0:
            return self._move_cursor(
                textarea, Position(row - 1, textarea.buffer.line_length(row - 1))
            )
        return textarea

    def move_right(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        if col < len(textarea.current_line()):
            return self._move_cursor(textarea, Position(row, col + 1))
        if row < textarea.line_count() - 1:
            return self._move_cursor(textarea, Position(row + 1, 0))
        return textarea

    def move_up(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        if row == 0:
            self._probe_edge(textarea, Position(row - 1, col), REASON_TOP)
            return textarea
        target_col = min(col, textarea.buffer.line_length(row - 1))
        return self._move_cursor(textarea, Position(row - 1, target_col))

    def move_down(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        if row >= textarea.line_count() - 1:
            self._probe_edge(textarea, Position(row + 1, col), REASON_BOTTOM)
            return textarea
        target_col = min(col, textarea.buffer.line_length(row + 1))
        return self._move_cursor(textarea, Position(row + 1, target_col))

    def move_to_line_start(self, textarea: TextArea) -> TextArea:
        """Jump to column 0, or to the first column the validator accepts."""

        hooks = textarea.hooks
        origin = textarea.position()
        row = origin.row
        if hooks.validator is None:
            return self._move_cursor(textarea, Position(row, 0))

        for col in range(0, textarea.buffer.line_length(row) + 1):
            target = Position(row, col)
            if hooks.allows(origin, target):
                return self._move_cursor(textarea, target, checked=True)

        report_blocked(textarea, Position(row, 0), REASON_NO_VALID_COLUMN)
        return textarea

    def move_to_line_end(self, textarea: TextArea) -> TextArea:
        row = textarea.cursor.row
        return self._move_cursor(
            textarea, Position(row, textarea.buffer.line_length(row))
        )

    def move_to_buffer_start(self, textarea: TextArea) -> TextArea:
        return self._move_cursor(textarea, Position(0, 0))

    def move_to_buffer_end(self, textarea: TextArea) -> TextArea:
        last_row = textarea.line_count() - 1
        return self._move_cursor(
            textarea, Position(last_row, textarea.buffer.line_length(last_row))
        )

    def forward_word(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        return self._move_cursor(
            textarea, Position(row, word_end(textarea.current_line(), col))
        )

    def backward_word(self, textarea: TextArea) -> TextArea:
        row, col = textarea.cursor_position()
        if col == 0:
            return textarea
        return self._move_cursor(
            textarea, Position(row, word_start(textarea.current_line(), col))
        )

    def _move_cursor(
        self, textarea: TextArea, target: Position, *, checked: bool = False
    ) -> TextArea:
        origin = textarea.position()
        if origin == target:
            return textarea
        if not checked and not textarea.hooks.allows(origin, target):
            report_blocked(textarea, target, REASON_BLOCKED)
            return textarea
        result = textarea.with_cursor(Cursor(target.row, target.col))
        textarea.hooks.moved(origin, target)
        return result

    def _probe_edge(self, textarea: TextArea, attempted: Position, reason: str) -> None:
        # Edge probes only matter to hosts that installed a validator.
        hooks = textarea.hooks
        if hooks.validator is None:
            return
        if not hooks.allows(textarea.position(), attempted):
            report_blocked(textarea, attempted, reason)


__all__ = ["NavigationService", "report_blocked"]
