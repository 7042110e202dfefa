"""Key event dispatch onto the TextArea services."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from textarea_engine.buffer import TextArea
from textarea_engine.runtime.telemetry import span

from .defaults import EMACS_PROFILE, load_default_keymaps
from .models import KeyEvent
from .registry import KeymapRegistry
from .resolver import KeymapResolver

Command = Callable[[], object]
DispatchResult = Tuple[TextArea, Optional[Command]]


class KeybindingDispatcher:
    """Maps key events to TextArea transitions under one keymap profile.

    Unbound keys pass the TextArea through untouched with no command. A bound
    handler returns either a TextArea or a ``(TextArea, command)`` pair; the
    command is handed back to the host to run.
    """

    def __init__(
        self,
        registry: Optional[KeymapRegistry] = None,
        *,
        resolver: Optional[KeymapResolver] = None,
        profile: str = EMACS_PROFILE,
        load_defaults: bool = True,
        logger_name: str | None = None,
    ) -> None:
        """Without a registry or resolver, build one seeded with the defaults."""

        if resolver is not None:
            if registry is not None and resolver.registry is not registry:
                raise ValueError("resolver must wrap the given registry")
            registry = resolver.registry
        elif registry is None:
            registry = KeymapRegistry(logger_name=logger_name)
            if load_defaults:
                load_default_keymaps(registry)
        self.registry = registry
        self.resolver = resolver or KeymapResolver(registry, logger_name=logger_name)
        self.profile = profile
        self._logger_name = logger_name

    def dispatch(self, event: KeyEvent, textarea: TextArea) -> DispatchResult:
        with span(
            "keymaps::dispatch",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"profile": self.profile, "key": event.key},
        ) as handle:
            result = self.resolver.resolve(self.profile, event)
            if result.match is None:
                handle.add_metadata("status", "passthrough")
                return textarea, None

            action = result.match.action
            handle.add_metadata("action", action.telemetry_name)
            outcome = action(textarea, event)
            if isinstance(outcome, tuple):
                updated, command = outcome
                return updated, command
            if outcome is None:
                return textarea, None
            return outcome, None

    def handle(self, event: KeyEvent, textarea: TextArea) -> TextArea:
        """Dispatch and drop any command."""

        updated, _ = self.dispatch(event, textarea)
        return updated


_default_dispatcher: Optional[KeybindingDispatcher] = None


def get_default_dispatcher() -> KeybindingDispatcher:
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = KeybindingDispatcher()
    return _default_dispatcher


def set_default_dispatcher(dispatcher: Optional[KeybindingDispatcher]) -> None:
    global _default_dispatcher
    _default_dispatcher = dispatcher


def dispatch(event: KeyEvent, textarea: TextArea) -> DispatchResult:
    """Dispatch through the shared Emacs dispatcher."""

    return get_default_dispatcher().dispatch(event, textarea)


__all__ = [
    "Command",
    "DispatchResult",
    "KeybindingDispatcher",
    "dispatch",
    "get_default_dispatcher",
    "set_default_dispatcher",
]
