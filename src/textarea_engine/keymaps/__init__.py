"""Declarative keymap registry, Emacs defaults and the key dispatcher."""

from .models import ANY_RUNE, KEY_TYPES, ActionRef, Binding, KeyEvent, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import (
    KeymapResolver,
    KeymapTable,
    ResolutionMatch,
    ResolutionResult,
    candidate_tokens,
)
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    EMACS_PROFILE,
    load_default_keymaps,
)
from .dispatcher import (
    Command,
    KeybindingDispatcher,
    dispatch,
    get_default_dispatcher,
    set_default_dispatcher,
)

__all__ = [
    "ANY_RUNE",
    "ActionRef",
    "Binding",
    "Command",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "EMACS_PROFILE",
    "KEY_TYPES",
    "KeyEvent",
    "KeyStroke",
    "KeybindingDispatcher",
    "KeymapConflictError",
    "KeymapRegistry",
    "KeymapResolver",
    "KeymapTable",
    "RegistryStats",
    "ResolutionMatch",
    "ResolutionResult",
    "candidate_tokens",
    "dispatch",
    "get_default_dispatcher",
    "load_default_keymaps",
    "set_default_dispatcher",
]
