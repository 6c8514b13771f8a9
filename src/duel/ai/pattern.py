"""Opponent pattern mining over recent turn history."""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from duel.core.types import Side
from duel.domain.battle_models import TurnResult
from duel.domain.commands import ALL_COMMANDS, Command
from duel.domain.distance import Distance

DEFAULT_LOOKBACK = 3

DistanceFrequency = Dict[Distance, Counter]


def analyze_pattern(
    history: Sequence[TurnResult], side: Side, lookback: int = DEFAULT_LOOKBACK
) -> DistanceFrequency:
    """Count ``side``'s commands over the last ``lookback`` turns, per distance.

    Both slots of a turn count, bucketed by the distance in effect before
    that turn. The first turn of the history is never analysed.
    """
    frequency: DistanceFrequency = {distance: Counter() for distance in Distance}
    start = max(1, len(history) - lookback)
    for turn in history[start:]:
        for command in turn.commands_for(side):
            frequency[turn.distance_before][command] += 1
    return frequency


def most_frequent_commands(frequency: DistanceFrequency, distance: Distance) -> List[Command] | None:
    """Most frequent commands at ``distance`` (all ties, canonical order), or None."""
    counts = frequency.get(distance)
    if not counts:
        return None
    top = max(counts.values())
    return [command for command in ALL_COMMANDS if counts.get(command, 0) == top]
