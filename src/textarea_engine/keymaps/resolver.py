"""Lookup-table keymap resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from textarea_engine.runtime.telemetry import span

from .models import ANY_RUNE, ActionRef, Binding, KeyEvent
from .registry import KeymapRegistry


@dataclass(slots=True)
class KeymapTable:
    """Flat stroke-token to binding-id table built for one profile."""

    profile: str
    entries: Dict[str, str] = field(default_factory=dict)

    def add_binding(self, binding: Binding) -> None:
        self.entries[binding.key_signature] = binding.id

    def get(self, token: str) -> Optional[str]:
        return self.entries.get(token)


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None
    token: Optional[str] = None
    tried: tuple[str, ...] = ()


def candidate_tokens(event: KeyEvent) -> tuple[str, ...]:
    """Tokens to try for ``event``, highest priority first.

    Ctrl wins over Alt, and modified keys never fall through to the plain
    table. Unmodified runes try the exact character before the wildcard.
    """

    key = event.key
    if event.ctrl or event.alt:
        if len(key) == 1:
            key = key.lower()
        tokens: list[str] = []
        if event.ctrl and event.alt:
            tokens.append(f"alt+ctrl+{key}")
        if event.ctrl:
            tokens.append(f"ctrl+{key}")
        if event.alt:
            tokens.append(f"alt+{key}")
        return tuple(tokens)

    if event.type == "rune" and key != "space":
        if key == ANY_RUNE:
            return (ANY_RUNE,)
        return (key, ANY_RUNE)
    return (key,)


class KeymapResolver:
    """Builds profile-specific lookup tables and resolves key events."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, KeymapTable]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, profile: str, event: KeyEvent) -> ResolutionResult:
        tokens = candidate_tokens(event)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"profile": profile, "key": event.key},
        ) as handle:
            table = self._ensure_table(profile)
            for token in tokens:
                binding_id = table.get(token)
                if binding_id is None:
                    continue
                binding = self._registry.get_binding(binding_id)
                action = self._registry.get_action(binding.action_id)
                handle.add_metadata("status", "match")
                handle.add_metadata("binding_id", binding.id)
                return ResolutionResult(
                    status="match",
                    match=ResolutionMatch(binding=binding, action=action),
                    token=token,
                    tried=tokens,
                )

            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss", tried=tokens)

    def table(self, profile: str) -> KeymapTable:
        return self._ensure_table(profile)

    def reset(self, profile: Optional[str] = None) -> None:
        if profile is None:
            self._cache.clear()
        else:
            self._cache.pop(profile, None)

    def _ensure_table(self, profile: str) -> KeymapTable:
        revision = self._registry.revision()
        cached = self._cache.get(profile)
        if cached and cached[0] == revision:
            return cached[1]

        table = KeymapTable(profile=profile)
        for binding in self._registry.iter_bindings(profile):
            table.add_binding(binding)
        self._cache[profile] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "KeymapTable",
    "ResolutionResult",
    "ResolutionMatch",
    "candidate_tokens",
]
