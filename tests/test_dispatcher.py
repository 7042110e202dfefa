from __future__ import annotations

from typing import List

import pytest

from textarea_engine.buffer import KillRing, Position, TextArea
from textarea_engine.keymaps import (
    EMACS_PROFILE,
    ActionRef,
    Binding,
    KeybindingDispatcher,
    KeyEvent,
    KeymapRegistry,
    KeyStroke,
    get_default_dispatcher,
    load_default_keymaps,
    set_default_dispatcher,
)


def make_textarea(text: str, row: int = 0, col: int = 0) -> TextArea:
    return TextArea().set_value(text).set_cursor_position(row, col)


def ctrl(ch: str) -> KeyEvent:
    return KeyEvent("rune", rune=ch, ctrl=True)


def alt(ch: str) -> KeyEvent:
    return KeyEvent("rune", rune=ch, alt=True)


def press(dispatcher: KeybindingDispatcher, textarea: TextArea, *events: KeyEvent) -> TextArea:
    for event in events:
        textarea, _ = dispatcher.dispatch(event, textarea)
    return textarea


@pytest.fixture
def dispatcher() -> KeybindingDispatcher:
    return KeybindingDispatcher()


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (ctrl("a"), (1, 0)),
        (ctrl("A"), (1, 0)),
        (ctrl("e"), (1, 5)),
        (ctrl("p"), (0, 2)),
        (ctrl("n"), (2, 2)),
        (ctrl("f"), (1, 3)),
        (ctrl("b"), (1, 1)),
        (alt("<"), (0, 0)),
        (alt(">"), (2, 4)),
        (KeyEvent("up"), (0, 2)),
        (KeyEvent("down"), (2, 2)),
        (KeyEvent("left"), (1, 1)),
        (KeyEvent("right"), (1, 3)),
        (KeyEvent("home"), (1, 0)),
        (KeyEvent("end"), (1, 5)),
    ],
)
def test_navigation_bindings(
    dispatcher: KeybindingDispatcher, event: KeyEvent, expected: tuple[int, int]
) -> None:
    textarea = make_textarea("one\ntwo x\nlast", 1, 2)

    updated, command = dispatcher.dispatch(event, textarea)

    assert updated.cursor_position() == expected
    assert command is None


def test_word_motion_bindings(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("alpha beta", 0, 0)

    forward = press(dispatcher, textarea, alt("f"))
    assert forward.cursor_position() == (0, 6)

    back = press(dispatcher, forward, alt("B"))
    assert back.cursor_position() == (0, 0)


def test_typing_runes_and_space(dispatcher: KeybindingDispatcher) -> None:
    textarea = press(
        dispatcher,
        TextArea(),
        KeyEvent("rune", rune="h"),
        KeyEvent("rune", rune="i"),
        KeyEvent("space"),
        KeyEvent("rune", rune="!"),
    )

    assert textarea.value() == "hi !"


def test_pasted_rune_with_newline_keeps_lines_consistent(
    dispatcher: KeybindingDispatcher,
) -> None:
    textarea = press(dispatcher, TextArea(), KeyEvent("rune", rune="a\nb"))

    assert textarea.line_count() == 2
    assert textarea.cursor_position() == (1, 1)


def test_editing_bindings(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("hello world", 0, 5)

    killed = press(dispatcher, textarea, ctrl("k"))
    assert killed.value() == "hello"

    yanked = press(dispatcher, killed, ctrl("a"), ctrl("y"))
    assert yanked.value() == " worldhello"

    assert press(dispatcher, textarea, ctrl("d")).value() == "helloworld"
    assert press(dispatcher, textarea, ctrl("h")).value() == "hell world"
    assert press(dispatcher, textarea, KeyEvent("backspace")).value() == "hell world"
    assert press(dispatcher, textarea, KeyEvent("delete")).value() == "helloworld"
    assert press(dispatcher, textarea, ctrl("m")).value() == "hello\n world"
    assert press(dispatcher, textarea, KeyEvent("enter")).value() == "hello\n world"


def test_word_kill_bindings(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("foo bar baz", 0, 4)

    assert press(dispatcher, textarea, alt("d")).value() == "foo  baz"
    assert press(dispatcher, textarea, ctrl("w")).value() == "bar baz"
    assert (
        press(dispatcher, textarea, KeyEvent("backspace", alt=True)).value()
        == "bar baz"
    )


def test_ctrl_u_kills_from_line_start(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("first\nsecond line", 1, 6)

    result = press(dispatcher, textarea, ctrl("u"))

    assert result.value() == "first\n"
    assert result.cursor_position() == (1, 0)
    assert result.kill_ring.yank() == "second line"


def test_ctrl_u_respects_protected_prefix(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("> rm -rf", 0, 8).on_movement(
        lambda a, b: not (b.row == 0 and b.col < 2)
    )

    result = press(dispatcher, textarea, ctrl("u"))

    assert result.value() == "> "
    assert result.cursor_position() == (0, 2)


def test_unknown_combinations_pass_through(dispatcher: KeybindingDispatcher) -> None:
    textarea = make_textarea("abc", 0, 1)

    for event in (
        ctrl("x"),
        alt("z"),
        KeyEvent("other"),
        KeyEvent("space", ctrl=True),
        KeyEvent("enter", alt=True),
    ):
        updated, command = dispatcher.dispatch(event, textarea)
        assert updated is textarea
        assert command is None


def test_handler_may_return_command() -> None:
    submitted: List[str] = []

    def submit(textarea: TextArea, event: KeyEvent):
        del event
        line = textarea.value()
        return textarea.set_value(""), lambda: submitted.append(line)

    registry = KeymapRegistry()
    load_default_keymaps(
        registry,
        exclude_bindings=("emacs.enter",),
        extra_actions=(ActionRef(id="test.submit", handler=submit),),
        extra_bindings=(
            Binding(
                id="test.enter",
                profile=EMACS_PROFILE,
                stroke=KeyStroke("enter"),
                action_id="test.submit",
            ),
        ),
    )
    dispatcher = KeybindingDispatcher(registry)

    updated, command = dispatcher.dispatch(KeyEvent("enter"), make_textarea("ls"))

    assert updated.value() == ""
    assert command is not None
    command()
    assert submitted == ["ls"]


def test_dispatch_fires_hooks() -> None:
    hits: List[str] = []
    dispatcher = KeybindingDispatcher()
    textarea = make_textarea("ab", 0, 1).on_movement(lambda a, b: False).on_boundary_hit(
        lambda pos, reason: hits.append(reason)
    )

    updated = dispatcher.handle(KeyEvent("left"), textarea)

    assert updated is textarea
    assert hits == ["movement blocked by validator"]


def test_read_only_blocks_edit_keys(dispatcher: KeybindingDispatcher) -> None:
    textarea = (
        make_textarea("abc", 0, 1)
        .with_read_only(True)
        .with_kill_ring(KillRing().kill("zz"))
    )

    for event in (KeyEvent("rune", rune="x"), ctrl("k"), ctrl("y"), KeyEvent("enter")):
        assert dispatcher.handle(event, textarea) is textarea
    assert dispatcher.handle(KeyEvent("right"), textarea).position() == Position(0, 2)


def test_default_dispatcher_is_shared() -> None:
    set_default_dispatcher(None)
    first = get_default_dispatcher()

    assert get_default_dispatcher() is first

    custom = KeybindingDispatcher(load_defaults=False)
    set_default_dispatcher(custom)
    try:
        assert get_default_dispatcher() is custom
        assert custom.registry.stats().binding_count == 0
    finally:
        set_default_dispatcher(None)
