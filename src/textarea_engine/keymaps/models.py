"""Dataclasses describing key events, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Literal, Mapping, MutableMapping

KeyType = Literal[
    "up",
    "down",
    "left",
    "right",
    "home",
    "end",
    "backspace",
    "delete",
    "enter",
    "space",
    "rune",
    "other",
]

KEY_TYPES: tuple[str, ...] = (
    "up",
    "down",
    "left",
    "right",
    "home",
    "end",
    "backspace",
    "delete",
    "enter",
    "space",
    "rune",
    "other",
)

MODIFIERS: tuple[str, ...] = ("alt", "ctrl")

# Binding key that matches any unmodified printable rune.
ANY_RUNE = "rune"


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    for value in values:
        if value not in MODIFIERS:
            raise ValueError(f"Unknown modifier '{value}'")
    return tuple(sorted(dict.fromkeys(values)))


def _normalize_key(key: str, modifiers: tuple[str, ...]) -> str:
    if len(key) == 1:
        # Modified letters match regardless of case.
        return key.lower() if modifiers else key
    lowered = key.lower()
    if lowered not in KEY_TYPES:
        raise ValueError(f"Unknown key '{key}'")
    return lowered


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Normalized key press handed to the dispatcher.

    ``rune`` carries the character for ``type == "rune"``. The space bar is
    its own ``"space"`` type; decoders that report it as a rune still work
    because the dispatcher folds ``rune == " "`` into ``"space"``.
    """

    type: KeyType
    rune: str = ""
    ctrl: bool = False
    alt: bool = False

    def __post_init__(self) -> None:
        if self.type not in KEY_TYPES:
            raise ValueError(f"Unknown key type '{self.type}'")

    @classmethod
    def char(cls, ch: str, *, ctrl: bool = False, alt: bool = False) -> "KeyEvent":
        if ch == " ":
            return cls("space", ctrl=ctrl, alt=alt)
        return cls("rune", rune=ch, ctrl=ctrl, alt=alt)

    @property
    def modifiers(self) -> tuple[str, ...]:
        mods: list[str] = []
        if self.alt:
            mods.append("alt")
        if self.ctrl:
            mods.append("ctrl")
        return tuple(mods)

    @property
    def key(self) -> str:
        """Logical key name: the rune itself for runes, otherwise the type."""

        if self.type == "rune" and self.rune == " ":
            return "space"
        if self.type == "rune" and self.rune:
            return self.rune
        return self.type


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press used as a binding trigger."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        modifiers = _normalize_modifiers(self.modifiers)
        object.__setattr__(self, "modifiers", modifiers)
        object.__setattr__(self, "key", _normalize_key(self.key, modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+a"``, ``"alt+<"`` or ``"ctrl++"`` style text."""

        text = token.strip()
        if not text:
            raise ValueError("token cannot be empty")
        if text == "+" or text.endswith("++"):
            key = "+"
            prefix = text[:-2] if len(text) > 1 else ""
        else:
            prefix, _, key = text.rpartition("+")
        modifiers = tuple(part for part in prefix.split("+") if part)
        return cls(key, modifiers)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


def _normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    seen: MutableMapping[str, None] = {}
    result: list[str] = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen[cleaned] = None
            result.append(cleaned)
    return tuple(result)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke with an action inside a profile."""

    id: str
    profile: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    tags: tuple[str, ...] = ()
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.profile:
            raise ValueError("binding profile cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "ANY_RUNE",
    "KEY_TYPES",
    "KeyType",
    "KeyEvent",
    "KeyStroke",
    "ActionRef",
    "Binding",
]
