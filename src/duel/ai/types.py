"""AI tier enumeration and weight-vector helpers."""
from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from duel.domain.commands import ALL_COMMANDS, Command

CommandWeights = Mapping[Command, float]


class AITier(IntEnum):
    RANDOM = 1
    """Uniform random among legal commands."""
    DISTANCE = 2
    """Species tendency weighted by distance."""
    SITUATIONAL = 3
    """Adds HP, stance and reflect awareness with one-step lookahead."""
    PATTERN = 4
    """Adds opponent pattern reading and pair-space sampling."""
    OPTIMAL = 5
    """Deterministic maximum of the tier-4 weights."""


def weight_vector(
    advance: float,
    retreat: float,
    weapon_attack: float,
    special_attack: float,
    reflect: float,
    stance_a: float,
    stance_b: float,
) -> CommandWeights:
    """Build a read-only 7-command vector in canonical order."""
    values = (advance, retreat, weapon_attack, special_attack, reflect, stance_a, stance_b)
    return MappingProxyType(dict(zip(ALL_COMMANDS, values)))


NEUTRAL_WEIGHTS: CommandWeights = weight_vector(1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0)


def multiply(*vectors: CommandWeights, commands: Iterable[Command] = ALL_COMMANDS) -> Dict[Command, float]:
    """Element-wise product over ``commands``; missing entries count as 1.0."""
    result: Dict[Command, float] = {}
    for command in commands:
        value = 1.0
        for vector in vectors:
            value *= vector.get(command, 1.0)
        result[command] = value
    return result
