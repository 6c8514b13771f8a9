"""Distance model and transition rules."""
from __future__ import annotations

from enum import Enum

from duel.domain.commands import Command


class Distance(str, Enum):
    """Three-step abstraction of spatial separation, ordered NEAR < MID < FAR."""

    NEAR = "NEAR"
    MID = "MID"
    FAR = "FAR"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.rank >= other.rank


_ORDER = (Distance.NEAR, Distance.MID, Distance.FAR)


def move_closer(current: Distance) -> Distance:
    """Shift one step toward NEAR, clamped."""
    return _ORDER[max(current.rank - 1, 0)]


def move_farther(current: Distance) -> Distance:
    """Shift one step toward FAR, clamped."""
    return _ORDER[min(current.rank + 1, len(_ORDER) - 1)]


def calculate_distance(current: Distance, command_a: Command, command_b: Command) -> Distance:
    """Return the distance after both sides' simultaneous commands."""
    advancing = (command_a is Command.ADVANCE) + (command_b is Command.ADVANCE)
    retreating = (command_a is Command.RETREAT) + (command_b is Command.RETREAT)

    if advancing == 2:
        return move_closer(move_closer(current))
    if retreating == 2:
        return move_farther(move_farther(current))
    if advancing and retreating:
        return current
    if advancing:
        return move_closer(current)
    if retreating:
        return move_farther(current)
    return current
