"""One-step prediction of the acting side's own position."""
from __future__ import annotations

from typing import NamedTuple

from duel.domain.commands import Command
from duel.domain.distance import Distance, move_closer, move_farther
from duel.domain.stance import Stance, next_stance


class PredictedState(NamedTuple):
    distance: Distance
    stance: Stance


def predict_state(distance: Distance, stance: Stance, command: Command) -> PredictedState:
    """Apply only our own command; the opponent's simultaneous move is ignored."""
    if command is Command.ADVANCE:
        distance = move_closer(distance)
    elif command is Command.RETREAT:
        distance = move_farther(distance)
    return PredictedState(distance=distance, stance=next_stance(stance, command))
