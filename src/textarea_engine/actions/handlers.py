"""Keymap action handlers wrapping the navigation and editing services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textarea_engine.buffer import TextArea

from .editing import EditingService
from .navigation import NavigationService

if TYPE_CHECKING:  # pragma: no cover
    from textarea_engine.keymaps.models import KeyEvent

navigation = NavigationService()
editing = EditingService()


def move_left(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_left(textarea)


def move_right(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_right(textarea)


def move_up(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_up(textarea)


def move_down(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_down(textarea)


def move_to_line_start(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_to_line_start(textarea)


def move_to_line_end(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_to_line_end(textarea)


def move_to_buffer_start(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_to_buffer_start(textarea)


def move_to_buffer_end(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.move_to_buffer_end(textarea)


def forward_word(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.forward_word(textarea)


def backward_word(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return navigation.backward_word(textarea)


def insert_rune(textarea: TextArea, event: "KeyEvent") -> TextArea:
    return editing.insert_char(textarea, event.rune)


def insert_space(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.insert_char(textarea, " ")


def delete_char_backward(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.delete_char_backward(textarea)


def delete_char_forward(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.delete_char_forward(textarea)


def insert_newline(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.insert_newline(textarea)


def kill_line(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.kill_line(textarea)


def kill_to_line_start(textarea: TextArea, event: "KeyEvent") -> TextArea:
    """Ctrl+U: jump to the line start, then kill to the end of the line."""

    del event
    return editing.kill_line(navigation.move_to_line_start(textarea))


def kill_word(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.kill_word(textarea)


def kill_word_backward(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.kill_word_backward(textarea)


def yank(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.yank(textarea)


def yank_pop(textarea: TextArea, event: "KeyEvent") -> TextArea:
    del event
    return editing.yank_pop(textarea)


__all__ = [
    "backward_word",
    "delete_char_backward",
    "delete_char_forward",
    "editing",
    "forward_word",
    "insert_newline",
    "insert_rune",
    "insert_space",
    "kill_line",
    "kill_to_line_start",
    "kill_word",
    "kill_word_backward",
    "move_down",
    "move_left",
    "move_right",
    "move_to_buffer_end",
    "move_to_buffer_start",
    "move_to_line_end",
    "move_to_line_start",
    "move_up",
    "navigation",
    "yank",
    "yank_pop",
]
