"""Counter-strategy table keyed by distance and the opponent's frequent command."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from duel.ai.types import NEUTRAL_WEIGHTS, CommandWeights
from duel.domain.commands import Command
from duel.domain.distance import Distance

A = Command.ADVANCE
R = Command.RETREAT
W = Command.WEAPON_ATTACK
S = Command.SPECIAL_ATTACK
F = Command.REFLECT

CounterTable = Mapping[Command, Mapping[Command, float]]


def _table(entries: dict) -> CounterTable:
    return MappingProxyType({key: MappingProxyType(value) for key, value in entries.items()})


# Observed command -> partial overrides on our own commands.
COUNTER_AT_NEAR = _table(
    {
        W: {R: 1.5, F: 1.2},
        S: {F: 1.8, W: 1.5},
        A: {R: 1.6, W: 1.3},
        R: {A: 1.7, W: 1.4},
        F: {W: 1.8, A: 1.2},
        Command.STANCE_A: {W: 1.5, S: 1.5},
        Command.STANCE_B: {W: 1.5, S: 1.5},
    }
)

COUNTER_AT_MID = _table(
    {
        W: {R: 1.4, S: 1.3},
        S: {F: 1.7, A: 1.3},
        A: {R: 1.5, S: 1.4},
        R: {A: 1.6},
        F: {A: 1.5, W: 1.2},
        Command.STANCE_A: {S: 1.5},
        Command.STANCE_B: {S: 1.5},
    }
)

COUNTER_AT_FAR = _table(
    {
        W: {S: 1.4},
        S: {F: 1.8},
        A: {R: 1.7, S: 1.5},
        R: {A: 1.8, S: 1.4},
        F: {A: 1.6},
        Command.STANCE_A: {S: 1.6},
        Command.STANCE_B: {S: 1.6},
    }
)

COUNTER_BY_DISTANCE: Mapping[Distance, CounterTable] = MappingProxyType(
    {
        Distance.NEAR: COUNTER_AT_NEAR,
        Distance.MID: COUNTER_AT_MID,
        Distance.FAR: COUNTER_AT_FAR,
    }
)


def get_counter_modifiers(target_command: Command, distance: Distance) -> CommandWeights:
    """Full 7-command vector: listed counters above 1.0, everything else 1.0."""
    overrides = COUNTER_BY_DISTANCE[distance].get(target_command)
    if not overrides:
        return NEUTRAL_WEIGHTS
    return MappingProxyType({command: overrides.get(command, 1.0) for command in NEUTRAL_WEIGHTS})
