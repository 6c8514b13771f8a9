"""Tier dispatcher for AI command selection."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Sequence, Tuple

from duel.ai.distance_weights import get_distance_weights
from duel.ai.errors import AIConfigurationError
from duel.ai.modifiers import SituationView, composite_weights
from duel.ai.pattern import DEFAULT_LOOKBACK, analyze_pattern, most_frequent_commands
from duel.ai.predictor import predict_state
from duel.ai.selection import first_by_priority, select_max, select_weighted
from duel.ai.tendencies import get_tendency
from duel.ai.types import AITier, multiply
from duel.battle.legality import get_valid_commands
from duel.core.types import RandomFn, Side, opposite_side
from duel.domain.battle_models import BattleState, TurnResult
from duel.domain.commands import Command, CommandPair
from duel.domain.defs import CombatantDef
from duel.domain.distance import Distance
from duel.domain.stance import Stance

logger = logging.getLogger(__name__)

# Share of tier-4 decisions that fall back to tier 3 so the AI stays hard to read.
PATTERN_NOISE_PROBABILITY = 0.2


def select_commands(
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    tier: AITier | int,
    rng: RandomFn,
    opponent_def: CombatantDef | None = None,
    history: Sequence[TurnResult] | None = None,
) -> CommandPair:
    """Choose both commands for ``side`` this turn.

    Tiers 4 and 5 need ``opponent_def`` and ``history`` (an empty history is
    fine) and raise AIConfigurationError without them.
    """
    try:
        tier = AITier(tier)
    except ValueError as exc:
        raise AIConfigurationError(f"Unknown AI tier: {tier!r}") from exc

    if tier is AITier.RANDOM:
        pair = _select_random(state, side, combatant_def, rng)
    elif tier is AITier.DISTANCE:
        pair = _select_by_distance(state, side, combatant_def, rng)
    elif tier is AITier.SITUATIONAL:
        pair = _select_situational(state, side, combatant_def, rng, opponent_def)
    else:
        if opponent_def is None:
            raise AIConfigurationError(f"AI tier {tier.value} requires the opponent's definition.")
        if history is None:
            raise AIConfigurationError(f"AI tier {tier.value} requires the turn history.")
        if tier is AITier.PATTERN:
            pair = _select_by_pattern(state, side, combatant_def, rng, opponent_def, history)
        else:
            pair = _select_optimal(state, side, combatant_def, opponent_def, history)

    logger.debug("Tier %d AI for %s chose %s, %s", tier.value, side, pair.first.value, pair.second.value)
    return pair


# -----------------------
# Tier 1-2
# -----------------------
def _uniform_choice(commands: Sequence[Command], rng: RandomFn) -> Command:
    index = min(int(rng() * len(commands)), len(commands) - 1)
    return commands[index]


def _select_random(state: BattleState, side: Side, combatant_def: CombatantDef, rng: RandomFn) -> CommandPair:
    valid = get_valid_commands(state, side, combatant_def)
    return CommandPair(_uniform_choice(valid, rng), _uniform_choice(valid, rng))


def _select_by_distance(state: BattleState, side: Side, combatant_def: CombatantDef, rng: RandomFn) -> CommandPair:
    valid = get_valid_commands(state, side, combatant_def)
    weights = multiply(
        get_tendency(combatant_def.archetype),
        get_distance_weights(state.distance),
        commands=valid,
    )
    # No lookahead: both slots are drawn against the current distance.
    return CommandPair(select_weighted(weights, rng), select_weighted(weights, rng))


# -----------------------
# Tier 3-5 shared helpers
# -----------------------
def _situation_view(
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    opponent_def: CombatantDef | None,
    countered_command: Command | None = None,
) -> SituationView:
    own = state.combatant(side)
    opponent = state.combatant(opposite_side(side))
    own_ratio = own.current_hp / combatant_def.stats.hp
    if opponent_def is None:
        opponent_ratio = own_ratio
        remaining_reflects = None
    else:
        opponent_ratio = opponent.current_hp / opponent_def.stats.hp
        remaining_reflects = opponent_def.reflector.max_reflect_count - opponent.used_reflect_count
    return SituationView(
        archetype=combatant_def.archetype,
        own_hp_ratio=own_ratio,
        opponent_hp_ratio=opponent_ratio,
        opponent_stance=opponent.stance,
        opponent_remaining_reflects=remaining_reflects,
        countered_command=countered_command,
    )


def _weights_at(
    view: SituationView,
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    distance: Distance,
    stance: Stance,
) -> Dict[Command, float]:
    """Composite weights over the commands legal at ``distance``."""
    valid = get_valid_commands(replace(state, distance=distance), side, combatant_def)
    return composite_weights(view, distance, stance, valid)


def _frequent_opponent_command(
    history: Sequence[TurnResult],
    side: Side,
    distance: Distance,
    pick: Callable[[Sequence[Command]], Command],
) -> Command | None:
    frequency = analyze_pattern(history, opposite_side(side), DEFAULT_LOOKBACK)
    tied = most_frequent_commands(frequency, distance)
    if not tied:
        return None
    return tied[0] if len(tied) == 1 else pick(tied)


# -----------------------
# Tier 3
# -----------------------
def _select_situational(
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    rng: RandomFn,
    opponent_def: CombatantDef | None,
) -> CommandPair:
    view = _situation_view(state, side, combatant_def, opponent_def)
    own_stance = state.combatant(side).stance

    first = select_weighted(_weights_at(view, state, side, combatant_def, state.distance, own_stance), rng)
    predicted = predict_state(state.distance, own_stance, first)
    second = select_weighted(
        _weights_at(view, state, side, combatant_def, predicted.distance, predicted.stance), rng
    )
    return CommandPair(first, second)


# -----------------------
# Tier 4
# -----------------------
def _select_by_pattern(
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    rng: RandomFn,
    opponent_def: CombatantDef,
    history: Sequence[TurnResult],
) -> CommandPair:
    if rng() < PATTERN_NOISE_PROBABILITY:
        return _select_situational(state, side, combatant_def, rng, opponent_def)

    countered = _frequent_opponent_command(
        history, side, state.distance, pick=lambda tied: _uniform_choice(tied, rng)
    )
    view = _situation_view(state, side, combatant_def, opponent_def, countered)
    own_stance = state.combatant(side).stance

    pair_weights: Dict[Tuple[Command, Command], float] = {}
    for first, first_weight in _weights_at(view, state, side, combatant_def, state.distance, own_stance).items():
        predicted = predict_state(state.distance, own_stance, first)
        second_weights = _weights_at(view, state, side, combatant_def, predicted.distance, predicted.stance)
        for second, second_weight in second_weights.items():
            pair_weights[(first, second)] = first_weight * second_weight

    first, second = select_weighted(pair_weights, rng)
    return CommandPair(first, second)


# -----------------------
# Tier 5
# -----------------------
def _select_optimal(
    state: BattleState,
    side: Side,
    combatant_def: CombatantDef,
    opponent_def: CombatantDef,
    history: Sequence[TurnResult],
) -> CommandPair:
    countered = _frequent_opponent_command(history, side, state.distance, pick=first_by_priority)
    view = _situation_view(state, side, combatant_def, opponent_def, countered)
    own_stance = state.combatant(side).stance
    best = select_max(_weights_at(view, state, side, combatant_def, state.distance, own_stance))
    return CommandPair(best, best)
