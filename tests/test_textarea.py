from __future__ import annotations

from textarea_engine.buffer import (
    Buffer,
    Cursor,
    CursorHooks,
    KillRing,
    Position,
    Selection,
    TextArea,
)


def make_textarea(text: str = "hello\nworld") -> TextArea:
    return TextArea().set_value(text)


def test_defaults() -> None:
    textarea = TextArea()

    assert textarea.width() == 80
    assert textarea.height() == 24
    assert textarea.max_lines() == 0
    assert textarea.max_chars() == 0
    assert not textarea.is_read_only()
    assert textarea.show_cursor()
    assert not textarea.show_line_numbers()
    assert textarea.kill_ring.max_size == 10
    assert textarea.cursor_position() == (0, 0)
    assert textarea.is_empty()


def test_builders_return_new_values() -> None:
    base = TextArea()

    configured = (
        base.with_size(40, 5)
        .with_max_lines(3)
        .with_max_chars(20)
        .with_placeholder("type here")
        .with_wrap(True)
        .with_read_only(True)
        .with_show_cursor(False)
    )

    assert base.width() == 80
    assert configured.width() == 40
    assert configured.height() == 5
    assert configured.max_lines() == 3
    assert configured.max_chars() == 20
    assert configured.placeholder() == "type here"
    assert configured.config.wrap
    assert configured.is_read_only()
    assert not configured.show_cursor()


def test_with_buffer_resets_cursor_selection_and_scroll() -> None:
    textarea = (
        make_textarea("a\nb\nc")
        .with_size(80, 1)
        .set_cursor_position(2, 1)
        .with_selection(Selection(Position(0, 0), Position(1, 0)))
    )
    assert textarea.scroll_row == 2

    replaced = textarea.with_buffer(Buffer.from_text("new"))

    assert replaced.cursor_position() == (0, 0)
    assert replaced.selection is None
    assert replaced.scroll_row == 0


def test_set_cursor_position_clamps() -> None:
    textarea = make_textarea("short")

    assert textarea.set_cursor_position(10, 100).cursor_position() == (0, 5)
    assert textarea.set_cursor_position(-1, -1).cursor_position() == (0, 0)


def test_move_cursor_to_end() -> None:
    textarea = make_textarea().move_cursor_to_end()

    assert textarea.cursor_position() == (1, 5)


def test_content_parts() -> None:
    textarea = make_textarea().set_cursor_position(0, 1)

    assert textarea.content_parts() == ("h", "e", "llo")
    assert textarea.set_cursor_position(0, 5).content_parts() == ("hello", " ", "")


def test_selected_text() -> None:
    textarea = make_textarea()
    assert textarea.selected_text() == ""
    assert not textarea.has_selection()

    selected = textarea.with_selection(Selection(Position(1, 2), Position(0, 3)))

    assert selected.has_selection()
    assert selected.selected_text() == "lo\nwo"
    assert selected.clear_selection().selection is None


def test_line_number_width_tracks_line_count() -> None:
    textarea = make_textarea("\n".join(str(n) for n in range(12)))

    assert textarea.line_number_width() == 0
    assert textarea.with_line_numbers(True).line_number_width() == 2


def test_hooks_survive_copies() -> None:
    def validator(_from: Position, _to: Position) -> bool:
        return True

    textarea = TextArea().on_movement(validator)

    derived = textarea.set_value("x").with_size(10, 2).with_kill_ring(KillRing(3))

    assert derived.hooks.validator is validator


def test_with_hooks_replaces_bundle() -> None:
    hooks = CursorHooks(on_moved=lambda a, b: None)

    textarea = TextArea().with_hooks(hooks)

    assert textarea.hooks is hooks


def test_vertical_scroll_follows_cursor() -> None:
    textarea = make_textarea("\n".join("line" for _ in range(10))).with_size(80, 3)

    down = textarea.with_cursor(Cursor(5, 0))
    assert down.scroll_row == 3

    up = down.with_cursor(Cursor(1, 0))
    assert up.scroll_row == 1


def test_horizontal_scroll_only_without_wrap() -> None:
    textarea = make_textarea("x" * 30).with_size(10, 3)

    assert textarea.with_cursor(Cursor(0, 25)).scroll_col == 16
    assert textarea.with_wrap(True).with_cursor(Cursor(0, 25)).scroll_col == 0


def test_resizing_keeps_cursor_in_view() -> None:
    textarea = make_textarea("\n".join("line" for _ in range(10))).set_cursor_position(9, 0)
    assert textarea.scroll_row == 0

    shrunk = textarea.with_size(80, 2)

    assert shrunk.scroll_row == 8
    assert shrunk.view().cursor_visible_row == 1


def test_enabling_wrap_resets_horizontal_scroll() -> None:
    textarea = make_textarea("x" * 30).with_size(10, 3).with_cursor(Cursor(0, 25))
    assert textarea.scroll_col == 16

    assert textarea.with_wrap(True).scroll_col == 0


def test_visible_lines_respects_scroll_and_height() -> None:
    textarea = make_textarea("a\nb\nc\nd").with_size(80, 2).set_cursor_position(3, 0)

    assert tuple(textarea.visible_lines()) == ("c", "d")


def test_view_reports_cursor_row_relative_to_scroll() -> None:
    textarea = make_textarea("a\nb\nc\nd").with_size(80, 2).set_cursor_position(3, 0)

    view = textarea.view()

    assert view.first_row == 2
    assert view.lines == ("c", "d")
    assert view.cursor == Position(3, 0)
    assert view.cursor_visible_row == 1
    assert view.line_number(view.cursor_visible_row) == 4


def test_view_cursor_out_of_window_is_none() -> None:
    textarea = make_textarea("a\nb\nc").with_size(80, 1).set_cursor_position(2, 0)

    hidden = textarea.with_size(80, 0).view()

    assert hidden.cursor_visible_row is None


def test_apply_edit_clamps_cursor_and_drops_selection() -> None:
    textarea = make_textarea().with_selection(Selection(Position(0, 0), Position(0, 2)))

    edited = textarea.apply_edit(Buffer.from_text("ab"), Cursor(4, 9))

    assert edited.cursor_position() == (0, 2)
    assert edited.selection is None
    assert edited.kill_ring is textarea.kill_ring
