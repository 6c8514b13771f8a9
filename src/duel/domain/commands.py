"""Battle commands and the per-turn command pair."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Command(str, Enum):
    """The seven discrete actions a combatant can submit for a turn slot."""

    ADVANCE = "ADVANCE"
    RETREAT = "RETREAT"
    WEAPON_ATTACK = "WEAPON_ATTACK"
    SPECIAL_ATTACK = "SPECIAL_ATTACK"
    REFLECT = "REFLECT"
    STANCE_A = "STANCE_A"
    STANCE_B = "STANCE_B"


# Canonical order used wherever commands are enumerated.
ALL_COMMANDS: Tuple[Command, ...] = tuple(Command)


@dataclass(frozen=True, slots=True)
class CommandPair:
    """The two commands one combatant submits for a single turn."""

    first: Command
    second: Command

    def __iter__(self):
        yield self.first
        yield self.second
