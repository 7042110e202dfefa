"""Host callbacks consulted or notified around cursor motion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .values import Position

MovementValidator = Callable[[Position, Position], bool]
CursorMovedHandler = Callable[[Position, Position], None]
BoundaryHitHandler = Callable[[Position, str], None]

REASON_BLOCKED = "movement blocked by validator"
REASON_TOP = "already at top"
REASON_BOTTOM = "already at bottom"
REASON_NO_VALID_COLUMN = "no valid position found in line"
REASON_BACKSPACE_BLOCKED = "backspace blocked by validator"


@dataclass(frozen=True, slots=True)
class CursorHooks:
    """Bundle of the three optional movement callbacks.

    Callables are shared by reference between every TextArea derived from the
    one they were installed on.
    """

    validator: Optional[MovementValidator] = None
    on_moved: Optional[CursorMovedHandler] = None
    on_boundary_hit: Optional[BoundaryHitHandler] = None

    def allows(self, from_pos: Position, to_pos: Position) -> bool:
        if self.validator is None:
            return True
        return bool(self.validator(from_pos, to_pos))

    def moved(self, from_pos: Position, to_pos: Position) -> None:
        if self.on_moved is not None:
            self.on_moved(from_pos, to_pos)

    def boundary_hit(self, attempted: Position, reason: str) -> None:
        if self.on_boundary_hit is not None:
            self.on_boundary_hit(attempted, reason)


__all__ = [
    "BoundaryHitHandler",
    "CursorHooks",
    "CursorMovedHandler",
    "MovementValidator",
    "REASON_BACKSPACE_BLOCKED",
    "REASON_BLOCKED",
    "REASON_BOTTOM",
    "REASON_NO_VALID_COLUMN",
    "REASON_TOP",
]
