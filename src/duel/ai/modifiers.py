"""Situational weight modifiers and the composite weight model.

Each modifier returns a 7-command multiplier vector. ``composite_weights``
multiplies them together with the species tendency and distance weights and
is the single place tiers 3 to 5 compute their weights.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from duel.ai.counter import get_counter_modifiers
from duel.ai.distance_weights import get_distance_weights
from duel.ai.tendencies import get_tendency
from duel.ai.types import NEUTRAL_WEIGHTS, CommandWeights, multiply, weight_vector
from duel.domain.commands import Command
from duel.domain.distance import Distance
from duel.domain.stance import Stance, next_stance


def get_hp_modifiers(own_hp_ratio: float, opponent_hp_ratio: float) -> CommandWeights:
    """Low own HP leans defensive; low opponent HP leans aggressive."""
    own_low = max(0.0, 1.0 - own_hp_ratio)
    opp_low = max(0.0, 1.0 - opponent_hp_ratio)
    return weight_vector(
        1.0 - 0.4 * own_low + 0.4 * opp_low,
        1.0 + 0.5 * own_low - 0.3 * opp_low,
        1.0 + 0.4 * opp_low,
        1.0 + 0.4 * opp_low,
        1.0 + 0.5 * own_low,
        1.0 + 0.3 * opp_low,
        1.0 + 0.3 * own_low,
    )


def _stance_shift_modifier(own_stance: Stance, command: Command, desired: Stance) -> float:
    target = next_stance(own_stance, command)
    if target is desired:
        return 1.5
    if target is own_stance:
        return 0.8
    return 0.7


def get_stance_response_modifiers(own_stance: Stance, opponent_stance: Stance) -> CommandWeights:
    """Answer an offensive opponent defensively and a defensive one offensively."""
    if opponent_stance is Stance.NORMAL:
        return NEUTRAL_WEIGHTS

    desired = Stance.DEFENSIVE if opponent_stance is Stance.OFFENSIVE else Stance.OFFENSIVE
    if own_stance is desired:
        stance_a = stance_b = 0.6
    else:
        stance_a = _stance_shift_modifier(own_stance, Command.STANCE_A, desired)
        stance_b = _stance_shift_modifier(own_stance, Command.STANCE_B, desired)

    if opponent_stance is Stance.OFFENSIVE:
        return weight_vector(0.7, 1.2, 0.9, 0.9, 1.5, stance_a, stance_b)
    return weight_vector(1.3, 0.7, 1.4, 1.3, 0.8, stance_a, stance_b)


def get_reflect_modifiers(opponent_remaining_reflects: int) -> CommandWeights:
    """Avoid specials into live reflects; exploit an exhausted reflector."""
    if opponent_remaining_reflects <= 0:
        return weight_vector(1.0, 1.0, 1.0, 1.4, 1.0, 1.0, 1.0)
    suppress = min(opponent_remaining_reflects * 0.15, 0.4)
    return weight_vector(1.0, 1.0, 1.0 + suppress * 0.5, 1.0 - suppress, 1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class SituationView:
    """What the AI knows about the battle apart from its own position.

    ``opponent_remaining_reflects`` is None when the opponent's definition is
    unknown, which makes the reflect modifier neutral.
    """

    archetype: str
    own_hp_ratio: float
    opponent_hp_ratio: float
    opponent_stance: Stance
    opponent_remaining_reflects: int | None
    countered_command: Command | None = None


def composite_weights(
    view: SituationView,
    distance: Distance,
    own_stance: Stance,
    commands: Iterable[Command],
) -> Dict[Command, float]:
    """Weights for ``commands`` at the given own position.

    tendency x distance x HP x stance-response x reflect, times the
    counter-strategy overrides when a frequent opponent command is known.
    """
    vectors = [
        get_tendency(view.archetype),
        get_distance_weights(distance),
        get_hp_modifiers(view.own_hp_ratio, view.opponent_hp_ratio),
        get_stance_response_modifiers(own_stance, view.opponent_stance),
    ]
    if view.opponent_remaining_reflects is not None:
        vectors.append(get_reflect_modifiers(view.opponent_remaining_reflects))
    if view.countered_command is not None:
        vectors.append(get_counter_modifiers(view.countered_command, distance))
    return multiply(*vectors, commands=commands)
