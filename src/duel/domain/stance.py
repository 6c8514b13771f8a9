"""Stance model, multipliers and the transition table."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from duel.domain.commands import Command


class Stance(str, Enum):
    """Combat posture; each carries fixed attack and defense multipliers."""

    NORMAL = "NORMAL"
    OFFENSIVE = "OFFENSIVE"
    DEFENSIVE = "DEFENSIVE"

    @property
    def attack_modifier(self) -> float:
        return STANCE_MODIFIERS[self][0]

    @property
    def defense_modifier(self) -> float:
        return STANCE_MODIFIERS[self][1]


STANCE_MODIFIERS: Mapping[Stance, Tuple[float, float]] = MappingProxyType(
    {
        Stance.NORMAL: (1.0, 1.0),
        Stance.OFFENSIVE: (1.3, 0.7),
        Stance.DEFENSIVE: (0.7, 1.3),
    }
)

# (current stance, command) -> next stance. Not a simple toggle.
_TRANSITIONS: Mapping[Tuple[Stance, Command], Stance] = MappingProxyType(
    {
        (Stance.NORMAL, Command.STANCE_A): Stance.OFFENSIVE,
        (Stance.NORMAL, Command.STANCE_B): Stance.DEFENSIVE,
        (Stance.OFFENSIVE, Command.STANCE_A): Stance.NORMAL,
        (Stance.OFFENSIVE, Command.STANCE_B): Stance.DEFENSIVE,
        (Stance.DEFENSIVE, Command.STANCE_A): Stance.NORMAL,
        (Stance.DEFENSIVE, Command.STANCE_B): Stance.OFFENSIVE,
    }
)


def next_stance(current: Stance, command: Command) -> Stance:
    """Return the stance after ``command``; non-stance commands change nothing."""
    return _TRANSITIONS.get((current, command), current)
