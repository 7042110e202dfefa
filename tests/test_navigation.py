from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from textarea_engine.actions import NavigationService
from textarea_engine.buffer import Position, TextArea

Validator = Callable[[Position, Position], bool]


class Recorder:
    """Collects hook calls for assertions."""

    def __init__(self) -> None:
        self.moves: List[Tuple[Position, Position]] = []
        self.hits: List[Tuple[Position, str]] = []
        self.checks: List[Tuple[Position, Position]] = []

    def attach(self, textarea: TextArea, validator: Optional[Validator] = None) -> TextArea:
        textarea = textarea.on_cursor_moved(
            lambda a, b: self.moves.append((a, b))
        ).on_boundary_hit(lambda pos, reason: self.hits.append((pos, reason)))
        if validator is not None:

            def checked(a: Position, b: Position) -> bool:
                self.checks.append((a, b))
                return validator(a, b)

            textarea = textarea.on_movement(checked)
        return textarea


def make_textarea(text: str, row: int = 0, col: int = 0) -> TextArea:
    return TextArea().set_value(text).set_cursor_position(row, col)


nav = NavigationService()


def test_move_left_at_origin_is_silent_noop() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc"), lambda a, b: False)

    result = nav.move_left(textarea)

    assert result is textarea
    assert result == textarea
    assert recorder.checks == []
    assert recorder.moves == []
    assert recorder.hits == []


def test_move_left_wraps_to_previous_line_end() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc\nde", 1, 0))

    result = nav.move_left(textarea)

    assert result.cursor_position() == (0, 3)
    assert recorder.moves == [(Position(1, 0), Position(0, 3))]


def test_move_right_wraps_and_stops_at_buffer_end() -> None:
    textarea = make_textarea("ab\nc", 0, 2)

    wrapped = nav.move_right(textarea)
    assert wrapped.cursor_position() == (1, 0)

    end = nav.move_right(nav.move_right(wrapped))
    assert end.cursor_position() == (1, 1)
    assert nav.move_right(end) is end


def test_up_down_preserve_column_clamped() -> None:
    textarea = make_textarea("long line\nab\nanother", 0, 7)

    down = nav.move_down(textarea)
    assert down.cursor_position() == (1, 2)

    down_again = nav.move_down(down)
    assert down_again.cursor_position() == (2, 2)

    up = nav.move_up(textarea.set_cursor_position(2, 6))
    assert up.cursor_position() == (1, 2)


def test_validator_veto_reports_attempted_position() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc", 0, 2), lambda a, b: b.col >= 2)

    result = nav.move_left(textarea)

    assert result is textarea
    assert recorder.moves == []
    assert recorder.hits == [(Position(0, 1), "movement blocked by validator")]


def test_move_up_at_top_consults_validator_with_out_of_bounds_target() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc", 0, 1), lambda a, b: b.row >= 0)

    result = nav.move_up(textarea)

    assert result is textarea
    assert recorder.checks == [(Position(0, 1), Position(-1, 1))]
    assert recorder.hits == [(Position(-1, 1), "already at top")]


def test_move_down_at_bottom_reports_when_vetoed() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc\nd", 1, 1), lambda a, b: b.row <= 1)

    result = nav.move_down(textarea)

    assert result is textarea
    assert recorder.hits == [(Position(2, 1), "already at bottom")]


def test_edges_without_validator_fire_nothing() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc"))

    assert nav.move_up(textarea) is textarea
    assert nav.move_down(textarea) is textarea
    assert recorder.hits == []


def test_edge_allowed_by_validator_is_quiet() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc"), lambda a, b: True)

    assert nav.move_up(textarea) is textarea
    assert recorder.checks == [(Position(0, 0), Position(-1, 0))]
    assert recorder.hits == []


def test_move_to_line_start_skips_protected_prefix() -> None:
    recorder = Recorder()
    textarea = recorder.attach(
        make_textarea("> echo", 0, 5), lambda a, b: not (b.row == 0 and b.col < 2)
    )

    result = nav.move_to_line_start(textarea)

    assert result.cursor_position() == (0, 2)
    assert recorder.moves == [(Position(0, 5), Position(0, 2))]
    assert recorder.hits == []


def test_move_to_line_start_reports_when_every_column_blocked() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc", 0, 3), lambda a, b: False)

    result = nav.move_to_line_start(textarea)

    assert result is textarea
    assert recorder.hits == [(Position(0, 0), "no valid position found in line")]


def test_line_and_buffer_jumps() -> None:
    textarea = make_textarea("one\ntwo\nthree", 1, 1)

    assert nav.move_to_line_start(textarea).cursor_position() == (1, 0)
    assert nav.move_to_line_end(textarea).cursor_position() == (1, 3)
    assert nav.move_to_buffer_start(textarea).cursor_position() == (0, 0)
    assert nav.move_to_buffer_end(textarea).cursor_position() == (2, 5)


def test_zero_distance_jump_consults_nobody() -> None:
    recorder = Recorder()
    textarea = recorder.attach(make_textarea("abc", 0, 3), lambda a, b: False)

    assert nav.move_to_line_end(textarea) is textarea
    assert recorder.checks == []
    assert recorder.hits == []


def test_forward_word_skips_word_then_separators() -> None:
    textarea = make_textarea("foo, bar.baz")

    first = nav.forward_word(textarea)
    assert first.cursor_position() == (0, 5)

    second = nav.forward_word(first)
    assert second.cursor_position() == (0, 9)

    assert nav.forward_word(nav.forward_word(second)).cursor_position() == (0, 12)


def test_backward_word_skips_separators_then_word() -> None:
    textarea = make_textarea("foo, bar.baz", 0, 12)

    first = nav.backward_word(textarea)
    assert first.cursor_position() == (0, 9)

    second = nav.backward_word(first)
    assert second.cursor_position() == (0, 5)

    assert nav.backward_word(second).cursor_position() == (0, 0)
    assert nav.backward_word(textarea.set_cursor_position(0, 0)).cursor_position() == (
        0,
        0,
    )


def test_scroll_follows_navigation() -> None:
    textarea = make_textarea("\n".join("x" for _ in range(5))).with_size(80, 2)

    result = textarea
    for _ in range(4):
        result = nav.move_down(result)

    assert result.cursor_position() == (4, 0)
    assert result.scroll_row == 3
    assert result.view().cursor_visible_row == 1
