"""Textual adapter feeding Textual key names through the keybinding dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textarea_engine.buffer import TextArea, TextAreaView
from textarea_engine.keymaps import Command, KeybindingDispatcher, KeyEvent
from textarea_engine.runtime.telemetry import get_logger

_NAMED_KEYS: Dict[str, str] = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "home": "home",
    "end": "end",
    "backspace": "backspace",
    "delete": "delete",
    "enter": "enter",
    "return": "enter",
    "space": "space",
}

_log = get_logger("adapters.textual")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def key_event_from_textual(key: str, character: Optional[str] = None) -> KeyEvent:
    """Translate a Textual key name plus its character into a ``KeyEvent``.

    Textual names modified keys ``"ctrl+a"`` / ``"alt+backspace"`` and gives
    punctuation long names (``"less_than_sign"``), so the printable character
    wins over the name whenever there is one.
    """

    parts = key.split("+") if key != "+" else [key]
    base = parts[-1] or "+"
    modifiers = {part.lower() for part in parts[:-1]}
    ctrl = "ctrl" in modifiers
    alt = "alt" in modifiers or "meta" in modifiers

    named = _NAMED_KEYS.get(base.lower())
    if named is not None:
        return KeyEvent(named, ctrl=ctrl, alt=alt)
    if character and len(character) == 1 and character.isprintable():
        return KeyEvent.char(character, ctrl=ctrl, alt=alt)
    if len(base) == 1:
        return KeyEvent.char(base, ctrl=ctrl, alt=alt)
    return KeyEvent("other", ctrl=ctrl, alt=alt)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[TextAreaView], None]
    update_status: Callable[[str], None] = _noop
    handle_command: Callable[[Command], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualTextAreaAdapter:
    """Holds the current TextArea value and swaps it on every key press."""

    def __init__(
        self,
        textarea: TextArea,
        hooks: TextualUIHooks,
        *,
        dispatcher: Optional[KeybindingDispatcher] = None,
    ) -> None:
        self.textarea = textarea
        self.hooks = hooks
        self.dispatcher = dispatcher or KeybindingDispatcher()
        self._refresh_view()

    def handle_textual_key(
        self, key: str, character: Optional[str] = None
    ) -> Optional[Command]:
        """Dispatch one Textual key; returns the command a binding produced."""

        event = key_event_from_textual(key, character)
        self._log_state("key ->", key=key, event=event)
        updated, command = self.dispatcher.dispatch(event, self.textarea)
        self.textarea = updated
        self._refresh_view()
        self._log_state("result <-", command=command is not None)
        if command is not None:
            self.hooks.handle_command(command)
        return command

    def replace(self, textarea: TextArea) -> None:
        self.textarea = textarea
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.textarea.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.textarea.cursor_position(),
            "lines": self.textarea.line_count(),
            "scroll": (self.textarea.scroll_row, self.textarea.scroll_col),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{k}={v!r}" for k, v in snapshot.items())])
        _log.debug(line)
        self.hooks.log(line)


__all__ = ["TextualTextAreaAdapter", "TextualUIHooks", "key_event_from_textual"]
