"""Executable Textual app: a shell prompt built on the textarea engine."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textarea_engine.adapters.textual.app"
    ) from exc

from textarea_engine.actions import handlers, word_start
from textarea_engine.buffer import Cursor, Position, TextArea, TextAreaView
from textarea_engine.keymaps import (
    EMACS_PROFILE,
    ActionRef,
    Binding,
    Command,
    KeybindingDispatcher,
    KeyEvent,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)

from .controller import TextualTextAreaAdapter, TextualUIHooks

DEFAULT_PROMPT = os.environ.get("TEXTAREA_ENGINE_PROMPT", "> ")
CURSOR_GLYPH = "█"


def render_view(view: TextAreaView) -> str:
    """Plain-text rendering of a view with a block cursor."""

    if view.is_empty and view.placeholder:
        return view.placeholder

    rendered: list[str] = []
    for index, line in enumerate(view.lines):
        if view.width > 0:
            visible = line[view.scroll_col : view.scroll_col + view.width]
        else:
            visible = line[view.scroll_col :]
        if view.show_cursor and index == view.cursor_visible_row:
            col = view.cursor.col - view.scroll_col
            visible = visible[:col] + CURSOR_GLYPH + visible[col + 1 :]
        if view.show_line_numbers:
            number = str(view.line_number(index)).rjust(view.line_number_width)
            visible = f"{number} {visible}"
        rendered.append(visible)
    return "\n".join(rendered)


def build_prompt_textarea(
    prompt: str, *, height: int = 1, read_only: bool = False
) -> TextArea:
    """TextArea holding ``prompt`` with a validator that keeps the cursor after it."""

    prompt_len = len(prompt)

    def outside_prompt(_from: Position, to: Position) -> bool:
        return not (to.row == 0 and to.col < prompt_len)

    return (
        TextArea()
        .set_value(prompt)
        .set_cursor_position(0, prompt_len)
        .with_size(80, height)
        .with_read_only(read_only)
        .on_movement(outside_prompt)
    )


def _shell_binding(
    binding_id: str, stroke: str, action_id: str, description: str
) -> Binding:
    return Binding(
        id=binding_id,
        profile=EMACS_PROFILE,
        stroke=KeyStroke.parse(stroke),
        action_id=action_id,
        description=description,
        source="shell-demo",
    )


def build_shell_dispatcher(prompt: str) -> KeybindingDispatcher:
    """Emacs dispatcher whose Enter key submits the line instead of splitting it.

    Word and line kills are rebound so they never cut into the prompt; the
    engine's own kills do not consult the movement validator.
    """

    prompt_len = len(prompt)

    def submit(textarea: TextArea, event: KeyEvent) -> tuple[TextArea, Command]:
        del event
        line = textarea.value()[prompt_len:]
        reset = textarea.set_value(prompt).set_cursor_position(0, prompt_len)
        return reset, lambda: line

    def kill_word_backward(textarea: TextArea, event: KeyEvent) -> TextArea:
        row, col = textarea.cursor_position()
        if row != 0 or textarea.is_read_only():
            return handlers.kill_word_backward(textarea, event)
        line = textarea.current_line()
        start = max(word_start(line, col), prompt_len)
        if start >= col:
            return textarea
        buffer = textarea.buffer.set_line(row, line[:start] + line[col:])
        return textarea.apply_edit(
            buffer, Cursor(row, start), textarea.kill_ring.kill(line[start:col])
        )

    def keeps_prompt(handler: Callable[[TextArea, KeyEvent], TextArea]):
        def guarded(textarea: TextArea, event: KeyEvent) -> TextArea:
            if textarea.cursor.row == 0 and textarea.cursor.col < prompt_len:
                return textarea
            updated = handler(textarea, event)
            if not updated.value().startswith(prompt):
                return textarea
            return updated

        return guarded

    registry = KeymapRegistry()
    load_default_keymaps(
        registry,
        exclude_bindings=("emacs.enter", "emacs.ctrl_m"),
        extra_actions=(
            ActionRef(id="shell.submit", handler=submit, description="Submit line"),
            ActionRef(
                id="shell.kill_word_backward",
                handler=kill_word_backward,
                description="Kill previous word, stopping at the prompt",
            ),
            ActionRef(
                id="shell.kill_word",
                handler=keeps_prompt(handlers.kill_word),
                description="Kill word outside the prompt",
            ),
            ActionRef(
                id="shell.kill_line",
                handler=keeps_prompt(handlers.kill_line),
                description="Kill line outside the prompt",
            ),
        ),
        extra_bindings=(
            _shell_binding("shell.enter", "enter", "shell.submit", "Submit line"),
            _shell_binding("shell.ctrl_m", "ctrl+m", "shell.submit", "Submit line"),
        ),
    )
    for binding in (
        _shell_binding(
            "shell.ctrl_w", "ctrl+w", "shell.kill_word_backward", "Kill previous word"
        ),
        _shell_binding(
            "shell.alt_backspace",
            "alt+backspace",
            "shell.kill_word_backward",
            "Kill previous word",
        ),
        _shell_binding("shell.alt_d", "alt+d", "shell.kill_word", "Kill word"),
        _shell_binding("shell.ctrl_k", "ctrl+k", "shell.kill_line", "Kill line"),
    ):
        registry.register_binding(binding, replace=True)
    return KeybindingDispatcher(registry)


@dataclass
class UIState:
    view_text: str = ""
    status_text: str = ""
    last_command: str = ""


class ShellPromptApp(App[None]):
    """Minimal Textual UI embedding a protected shell prompt."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#prompt-view {
		height: auto;
		min-height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        prompt: str = DEFAULT_PROMPT,
        height: int = 1,
        read_only: bool = False,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._prompt = prompt
        self._height = height
        self._read_only = read_only
        self.adapter: TextualTextAreaAdapter | None = None
        self._view_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="prompt-area"):
            self._view_widget = Static("", id="prompt-view", markup=False)
            yield self._view_widget
        self._status_widget = Static("", id="status-line", markup=False)
        self._command_widget = Static("", id="command-line", markup=False)
        yield self._status_widget
        yield self._command_widget
        yield Footer()

    def on_mount(self) -> None:
        textarea = build_prompt_textarea(
            self._prompt, height=self._height, read_only=self._read_only
        ).on_boundary_hit(self._boundary_hit)
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            handle_command=self._run_command,
        )
        self.adapter = TextualTextAreaAdapter(
            textarea, hooks, dispatcher=build_shell_dispatcher(self._prompt)
        )
        self._update_status("Type a command; the prompt cannot be edited.")

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        self.adapter.handle_textual_key(event.key, event.character)
        event.stop()

    def _update_view(self, view: TextAreaView) -> None:
        self._state.view_text = render_view(view)
        if self._view_widget:
            self._view_widget.update(self._state.view_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _boundary_hit(self, attempted: Position, reason: str) -> None:
        self._update_status(f"boundary {attempted}: {reason}")

    def _run_command(self, command: Command) -> None:
        line = str(command())
        self._state.last_command = line
        if self._command_widget:
            self._command_widget.update(f"Executing: {line}")


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the textarea engine shell-prompt demo."
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="Prompt prefix the cursor may not enter (default: '> ')",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=_env_int("TEXTAREA_ENGINE_HEIGHT", 1),
        help="Visible rows of the input area (default: 1)",
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Open the prompt read-only",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = ShellPromptApp(prompt=args.prompt, height=args.height, read_only=args.read_only)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
