"""Content mutation and kill/yank over the TextArea aggregate."""

from __future__ import annotations

from textarea_engine.buffer import REASON_BACKSPACE_BLOCKED, Cursor, Position, TextArea

from .navigation import report_blocked
from .words import is_word_boundary, word_start


def _has_room(textarea: TextArea, added: int) -> bool:
    limit = textarea.max_chars()
    if limit <= 0:
        return True
    return textarea.buffer.char_count() + added <= limit


def _insert_text(textarea: TextArea, text: str) -> TextArea:
    row, col = textarea.cursor_position()
    buffer = textarea.buffer
    for ch in text:
        if ch == "\n":
            buffer = buffer.insert_newline(row, col)
            row, col = row + 1, 0
        else:
            buffer = buffer.insert_char(row, col, ch)
            col += 1
    return textarea.apply_edit(buffer, Cursor(row, col))


class EditingService:
    """Stateless editing operations; read-only text areas pass through unchanged.

    Edits keep the cursor where the operation leaves it and drop any
    selection. Kills push the removed text onto the kill ring.
    """

    def insert_char(self, textarea: TextArea, ch: str) -> TextArea:
        """Insert ``ch`` at the cursor; embedded ``"\\n"`` characters split lines."""

        if textarea.is_read_only() or not ch:
            return textarea
        if ch == "\n":
            return self.insert_newline(textarea)
        if not _has_room(textarea, len(ch) - ch.count("\n")):
            return textarea
        max_lines = textarea.max_lines()
        if max_lines > 0 and textarea.line_count() + ch.count("\n") > max_lines:
            return textarea
        return _insert_text(textarea, ch)

    def delete_char_backward(self, textarea: TextArea) -> TextArea:
        """Backspace; the validator sees the move the cursor would make."""

        if textarea.is_read_only():
            return textarea
        row, col = textarea.cursor_position()
        if row == 0 and col == 0:
            return textarea

        if col > 0:
            target = Position(row, col - 1)
        else:
            target = Position(row - 1, textarea.buffer.line_length(row - 1))
        if not textarea.hooks.allows(textarea.position(), target):
            report_blocked(textarea, target, REASON_BACKSPACE_BLOCKED)
            return textarea

        buffer = textarea.buffer
        if col > 0:
            buffer = buffer.delete_char(row, col - 1)
        else:
            buffer = buffer.join_with_next_line(row - 1)
        return textarea.apply_edit(buffer, Cursor(target.row, target.col))

    def delete_char_forward(self, textarea: TextArea) -> TextArea:
        # Joining the next line leaves the cursor in place, so no validator call.
        if textarea.is_read_only():
            return textarea
        row, col = textarea.cursor_position()
        if col >= len(textarea.current_line()):
            if row >= textarea.line_count() - 1:
                return textarea
            buffer = textarea.buffer.join_with_next_line(row)
        else:
            buffer = textarea.buffer.delete_char(row, col)
        return textarea.apply_edit(buffer, Cursor(row, col))

    def insert_newline(self, textarea: TextArea) -> TextArea:
        if textarea.is_read_only():
            return textarea
        max_lines = textarea.max_lines()
        if max_lines > 0 and textarea.line_count() >= max_lines:
            return textarea
        row, col = textarea.cursor_position()
        buffer = textarea.buffer.insert_newline(row, col)
        return textarea.apply_edit(buffer, Cursor(row + 1, 0))

    def kill_line(self, textarea: TextArea) -> TextArea:
        """Cut to end of line; at the end of a line, cut the line break."""

        if textarea.is_read_only():
            return textarea
        row, col = textarea.cursor_position()
        if col >= len(textarea.current_line()):
            if row >= textarea.line_count() - 1:
                return textarea
            buffer = textarea.buffer.join_with_next_line(row)
            killed = "\n"
        else:
            buffer, killed = textarea.buffer.delete_to_line_end(row, col)
        return textarea.apply_edit(
            buffer, Cursor(row, col), textarea.kill_ring.kill(killed)
        )

    def kill_word(self, textarea: TextArea) -> TextArea:
        if textarea.is_read_only():
            return textarea
        row, col = textarea.cursor_position()
        line = textarea.current_line()
        end = col
        while end < len(line) and not is_word_boundary(line[end]):
            end += 1
        if end == col:
            return textarea
        buffer = textarea.buffer.set_line(row, line[:col] + line[end:])
        return textarea.apply_edit(
            buffer, Cursor(row, col), textarea.kill_ring.kill(line[col:end])
        )

    def kill_word_backward(self, textarea: TextArea) -> TextArea:
        if textarea.is_read_only():
            return textarea
        row, col = textarea.cursor_position()
        if col == 0:
            return textarea
        line = textarea.current_line()
        start = word_start(line, col)
        if start == col:
            return textarea
        buffer = textarea.buffer.set_line(row, line[:start] + line[col:])
        return textarea.apply_edit(
            buffer, Cursor(row, start), textarea.kill_ring.kill(line[start:col])
        )

    def yank(self, textarea: TextArea) -> TextArea:
        """Insert the current kill-ring entry; ``"\\n"`` splits the line."""

        if textarea.is_read_only():
            return textarea
        text = textarea.kill_ring.yank()
        if not text:
            return textarea
        if not _has_room(textarea, len(text) - text.count("\n")):
            return textarea
        return _insert_text(textarea, text)

    def yank_pop(self, textarea: TextArea) -> TextArea:
        """Rotate the kill ring to the previous entry without inserting."""

        if textarea.is_read_only():
            return textarea
        return textarea.with_kill_ring(textarea.kill_ring.yank_pop())


__all__ = ["EditingService"]
