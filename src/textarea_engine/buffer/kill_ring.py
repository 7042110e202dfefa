"""Emacs-style kill ring storage."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_KILL_RING_SIZE = 10


@dataclass(frozen=True, slots=True)
class KillRing:
    """Bounded history of killed text with a rotating yank index.

    ``kill`` and ``yank_pop`` return new rings; the receiver is never changed.
    """

    max_size: int = DEFAULT_KILL_RING_SIZE
    entries: tuple[str, ...] = ()
    index: int = 0

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            object.__setattr__(self, "max_size", DEFAULT_KILL_RING_SIZE)
        object.__setattr__(self, "entries", tuple(self.entries)[-self.max_size :])

    def kill(self, text: str) -> "KillRing":
        if not text:
            return self
        entries = (self.entries + (text,))[-self.max_size :]
        return KillRing(self.max_size, entries, len(entries) - 1)

    def yank(self) -> str:
        if not self.entries or not 0 <= self.index < len(self.entries):
            return ""
        return self.entries[self.index]

    def yank_pop(self) -> "KillRing":
        if not self.entries:
            return self
        index = self.index - 1
        if index < 0:
            index = len(self.entries) - 1
        return KillRing(self.max_size, self.entries, index)

    def items(self) -> tuple[str, ...]:
        return self.entries

    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["DEFAULT_KILL_RING_SIZE", "KillRing"]
