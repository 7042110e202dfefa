"""Built-in Emacs keymap seeding a registry with the standard bindings."""

from __future__ import annotations

from typing import Iterable, Sequence

from textarea_engine.actions import handlers

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

EMACS_PROFILE = "emacs"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="nav.move_left",
        handler=handlers.move_left,
        description="Move one character left",
    ),
    ActionRef(
        id="nav.move_right",
        handler=handlers.move_right,
        description="Move one character right",
    ),
    ActionRef(id="nav.move_up", handler=handlers.move_up, description="Move up a line"),
    ActionRef(
        id="nav.move_down", handler=handlers.move_down, description="Move down a line"
    ),
    ActionRef(
        id="nav.line_start",
        handler=handlers.move_to_line_start,
        description="Move to the start of the line",
    ),
    ActionRef(
        id="nav.line_end",
        handler=handlers.move_to_line_end,
        description="Move to the end of the line",
    ),
    ActionRef(
        id="nav.buffer_start",
        handler=handlers.move_to_buffer_start,
        description="Move to the start of the buffer",
    ),
    ActionRef(
        id="nav.buffer_end",
        handler=handlers.move_to_buffer_end,
        description="Move to the end of the buffer",
    ),
    ActionRef(
        id="nav.forward_word",
        handler=handlers.forward_word,
        description="Move forward one word",
    ),
    ActionRef(
        id="nav.backward_word",
        handler=handlers.backward_word,
        description="Move backward one word",
    ),
    ActionRef(
        id="edit.insert_rune",
        handler=handlers.insert_rune,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.insert_space", handler=handlers.insert_space, description="Insert a space"
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=handlers.delete_char_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=handlers.delete_char_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=handlers.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="kill.line",
        handler=handlers.kill_line,
        description="Kill to the end of the line",
    ),
    ActionRef(
        id="kill.whole_line",
        handler=handlers.kill_to_line_start,
        description="Move to the line start, then kill to the end",
    ),
    ActionRef(
        id="kill.word", handler=handlers.kill_word, description="Kill the next word"
    ),
    ActionRef(
        id="kill.word_backward",
        handler=handlers.kill_word_backward,
        description="Kill the previous word",
    ),
    ActionRef(
        id="kill.yank", handler=handlers.yank, description="Yank the current kill"
    ),
    ActionRef(
        id="kill.yank_pop",
        handler=handlers.yank_pop,
        description="Rotate the kill ring to the previous kill",
    ),
)


def _bind(binding_id: str, token: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        profile=EMACS_PROFILE,
        stroke=KeyStroke.parse(token),
        action_id=action_id,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("emacs.ctrl_a", "ctrl+a", "nav.line_start", "Beginning of line"),
    _bind("emacs.ctrl_e", "ctrl+e", "nav.line_end", "End of line"),
    _bind("emacs.ctrl_p", "ctrl+p", "nav.move_up", "Previous line"),
    _bind("emacs.ctrl_n", "ctrl+n", "nav.move_down", "Next line"),
    _bind("emacs.ctrl_f", "ctrl+f", "nav.move_right", "Forward character"),
    _bind("emacs.ctrl_b", "ctrl+b", "nav.move_left", "Backward character"),
    _bind("emacs.ctrl_k", "ctrl+k", "kill.line", "Kill line"),
    _bind("emacs.ctrl_u", "ctrl+u", "kill.whole_line", "Kill whole line"),
    _bind("emacs.ctrl_w", "ctrl+w", "kill.word_backward", "Kill previous word"),
    _bind("emacs.ctrl_y", "ctrl+y", "kill.yank", "Yank"),
    _bind("emacs.ctrl_d", "ctrl+d", "edit.delete_forward", "Delete character"),
    _bind("emacs.ctrl_h", "ctrl+h", "edit.delete_backward", "Backspace"),
    _bind("emacs.ctrl_m", "ctrl+m", "edit.newline", "Newline"),
    _bind("emacs.alt_f", "alt+f", "nav.forward_word", "Forward word"),
    _bind("emacs.alt_b", "alt+b", "nav.backward_word", "Backward word"),
    _bind("emacs.alt_lt", "alt+<", "nav.buffer_start", "Beginning of buffer"),
    _bind("emacs.alt_gt", "alt+>", "nav.buffer_end", "End of buffer"),
    _bind("emacs.alt_d", "alt+d", "kill.word", "Kill word"),
    _bind(
        "emacs.alt_backspace", "alt+backspace", "kill.word_backward", "Kill previous word"
    ),
    _bind("emacs.up", "up", "nav.move_up", "Previous line"),
    _bind("emacs.down", "down", "nav.move_down", "Next line"),
    _bind("emacs.left", "left", "nav.move_left", "Backward character"),
    _bind("emacs.right", "right", "nav.move_right", "Forward character"),
    _bind("emacs.home", "home", "nav.line_start", "Beginning of line"),
    _bind("emacs.end", "end", "nav.line_end", "End of line"),
    _bind("emacs.backspace", "backspace", "edit.delete_backward", "Backspace"),
    _bind("emacs.delete", "delete", "edit.delete_forward", "Delete character"),
    _bind("emacs.enter", "enter", "edit.newline", "Newline"),
    _bind("emacs.space", "space", "edit.insert_space", "Insert space"),
    _bind("emacs.rune", "rune", "edit.insert_rune", "Self-insert"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_actions: Iterable[ActionRef] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in Emacs actions and bindings."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    if extra_actions:
        for action in extra_actions:
            registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        if not registry.has_action(binding.action_id):
            # The action was filtered out; skip bindings that would dangle.
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "EMACS_PROFILE",
    "load_default_keymaps",
]
