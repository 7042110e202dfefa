from __future__ import annotations

import random
from typing import List, Tuple

from textarea_engine.buffer import KillRing, Position, TextArea
from textarea_engine.keymaps import KeybindingDispatcher, KeyEvent, dispatch


def type_text(textarea: TextArea, text: str) -> TextArea:
    for ch in text:
        textarea, _ = dispatch(KeyEvent.char(ch), textarea)
    return textarea


def test_typing_into_empty_area() -> None:
    result = type_text(TextArea(), "hello")

    assert result.value() == "hello"
    assert result.cursor_position() == (0, 5)


def test_set_value_then_move_to_end() -> None:
    result = TextArea().set_value("hello\nworld").move_cursor_to_end()

    assert result.cursor_position() == (1, 5)


def test_kill_to_end_then_yank_elsewhere() -> None:
    textarea = TextArea().set_value("hello world").set_cursor_position(0, 6)

    killed, _ = dispatch(KeyEvent("rune", rune="k", ctrl=True), textarea)

    assert killed.value() == "hello "
    assert killed.kill_ring.yank() == "world"

    at_start, _ = dispatch(KeyEvent("rune", rune="a", ctrl=True), killed)
    yanked, _ = dispatch(KeyEvent("rune", rune="y", ctrl=True), at_start)
    assert yanked.value() == "worldhello "


def test_validator_blocks_left_motion() -> None:
    hits: List[Tuple[Position, str]] = []
    textarea = (
        TextArea()
        .set_value("> ls")
        .set_cursor_position(0, 2)
        .on_movement(lambda a, b: b.col >= 2)
        .on_boundary_hit(lambda pos, reason: hits.append((pos, reason)))
    )

    result, _ = dispatch(KeyEvent("left"), textarea)

    assert result is textarea
    assert hits == [(Position(0, 1), "movement blocked by validator")]


def test_yank_multiline_entry() -> None:
    textarea = TextArea().set_value("x").with_kill_ring(KillRing().kill("a\nb"))

    result, _ = dispatch(KeyEvent("rune", rune="y", ctrl=True), textarea)

    assert result.value() == "a\nbx"
    assert result.cursor_position() == (1, 1)


def test_cursor_stays_in_bounds_under_random_input() -> None:
    rng = random.Random(1234)
    dispatcher = KeybindingDispatcher()
    events = [
        KeyEvent("up"),
        KeyEvent("down"),
        KeyEvent("left"),
        KeyEvent("right"),
        KeyEvent("home"),
        KeyEvent("end"),
        KeyEvent("backspace"),
        KeyEvent("delete"),
        KeyEvent("enter"),
        KeyEvent("space"),
        KeyEvent("backspace", alt=True),
        KeyEvent("rune", rune="x"),
        KeyEvent("rune", rune="."),
    ]
    events.extend(KeyEvent("rune", rune=ch, ctrl=True) for ch in "aefbnpkuwydh")
    events.extend(KeyEvent("rune", rune=ch, alt=True) for ch in "fbd<>")

    textarea = TextArea().set_value("first line\nsecond\n\nfourth one").with_size(20, 3)
    for _ in range(500):
        textarea = dispatcher.handle(rng.choice(events), textarea)

        row, col = textarea.cursor_position()
        assert textarea.line_count() >= 1
        assert 0 <= row < textarea.line_count()
        assert 0 <= col <= len(textarea.buffer.line(row))
        assert textarea.scroll_row <= row < textarea.scroll_row + 3
        assert len(textarea.kill_ring) <= textarea.kill_ring.max_size


def test_original_value_survives_edits() -> None:
    original = TextArea().set_value("keep me").set_cursor_position(0, 4)

    type_text(original, "!!")
    dispatch(KeyEvent("rune", rune="k", ctrl=True), original)

    assert original.value() == "keep me"
    assert original.cursor_position() == (0, 4)
    assert original.kill_ring.is_empty()
