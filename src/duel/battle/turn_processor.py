"""Turn resolution.

A turn is two sequential sub-phases. Each sub-phase moves, shifts stances,
resolves the command interaction at the post-movement distance and applies
damage; the second sub-phase starts from exactly what the first produced.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from duel.battle.damage import evasion_rate, is_guaranteed_hit, reflect_damage, special_damage, weapon_damage
from duel.battle.interaction import resolve_command_interaction
from duel.core.types import RandomFn
from duel.domain.battle_models import (
    NO_DAMAGE,
    BattleState,
    CombatantState,
    CommandOutcome,
    CommandPhaseResult,
    DamageInfo,
    TurnResult,
)
from duel.domain.commands import Command, CommandPair
from duel.domain.defs import CombatantDef
from duel.domain.distance import Distance, calculate_distance
from duel.domain.stance import next_stance

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _AttackResolution:
    """Effects of one side's command acting as attacker."""

    damage_to_defender: DamageInfo = NO_DAMAGE
    damage_to_attacker: DamageInfo = NO_DAMAGE
    attacker_special_spent: bool = False
    defender_reflect_used: bool = False


_NOTHING = _AttackResolution()


def _roll_evaded(
    distance: Distance, attacker_command: Command, defender_command: Command, defender_def: CombatantDef, rng: RandomFn
) -> bool:
    if is_guaranteed_hit(distance, attacker_command, defender_command):
        return False
    return rng() * 100 < evasion_rate(defender_def.stats.speed)


def _resolve_attack(
    outcome: CommandOutcome,
    attacker_command: Command,
    defender_command: Command,
    attacker_def: CombatantDef,
    defender_def: CombatantDef,
    attacker: CombatantState,
    defender: CombatantState,
    distance: Distance,
    rng: RandomFn,
) -> _AttackResolution:
    if outcome in (CommandOutcome.MISS, CommandOutcome.NO_EFFECT):
        return _NOTHING

    if outcome is CommandOutcome.CANCELLED:
        # The attempt was made, so the special use is spent.
        return _AttackResolution(attacker_special_spent=attacker_command is Command.SPECIAL_ATTACK)

    if outcome is CommandOutcome.COUNTERED:
        remaining_reflects = defender_def.reflector.max_reflect_count - defender.used_reflect_count
        if remaining_reflects <= 0:
            return _AttackResolution(attacker_special_spent=True)
        incoming = special_damage(
            special=attacker_def.stats.special,
            attacker_stance=attacker.stance,
            is_exceeded=attacker.remaining_special_count <= 0,
        )
        bounced = reflect_damage(incoming, defender_def.reflector.reflect_rate)
        return _AttackResolution(
            damage_to_attacker=DamageInfo(damage=bounced, is_reflected=True),
            attacker_special_spent=True,
            defender_reflect_used=True,
        )

    # HIT
    spends_special = attacker_command is Command.SPECIAL_ATTACK
    if _roll_evaded(distance, attacker_command, defender_command, defender_def, rng):
        return _AttackResolution(
            damage_to_defender=DamageInfo(is_evaded=True),
            attacker_special_spent=spends_special,
        )

    if attacker_command is Command.WEAPON_ATTACK:
        damage = weapon_damage(
            strength=attacker_def.stats.strength,
            weapon_multiplier=attacker_def.weapon.multiplier,
            attacker_stance=attacker.stance,
            toughness=defender_def.stats.toughness,
            defender_stance=defender.stance,
        )
    else:
        damage = special_damage(
            special=attacker_def.stats.special,
            attacker_stance=attacker.stance,
            is_exceeded=attacker.remaining_special_count <= 0,
        )
    return _AttackResolution(damage_to_defender=DamageInfo(damage=damage), attacker_special_spent=spends_special)


def _apply(
    state: CombatantState,
    combatant_def: CombatantDef,
    own_attack: _AttackResolution,
    opponent_attack: _AttackResolution,
) -> Tuple[CombatantState, DamageInfo]:
    received = DamageInfo(
        damage=opponent_attack.damage_to_defender.damage + own_attack.damage_to_attacker.damage,
        is_evaded=opponent_attack.damage_to_defender.is_evaded,
        is_reflected=own_attack.damage_to_attacker.is_reflected,
    )
    remaining_special = state.remaining_special_count
    if own_attack.attacker_special_spent:
        remaining_special = max(remaining_special - 1, 0)
    used_reflects = state.used_reflect_count + (1 if opponent_attack.defender_reflect_used else 0)
    hp = min(max(state.current_hp - received.damage, 0), combatant_def.stats.hp)
    updated = replace(
        state,
        current_hp=hp,
        remaining_special_count=remaining_special,
        used_reflect_count=used_reflects,
    )
    return updated, received


def process_command_phase(
    distance: Distance,
    player1: CombatantState,
    player2: CombatantState,
    player1_def: CombatantDef,
    player2_def: CombatantDef,
    player1_command: Command,
    player2_command: Command,
    rng: RandomFn,
) -> Tuple[CommandPhaseResult, CombatantState, CombatantState]:
    """Resolve one sub-phase and return its record plus both updated states."""
    new_distance = calculate_distance(distance, player1_command, player2_command)
    player1 = replace(player1, stance=next_stance(player1.stance, player1_command))
    player2 = replace(player2, stance=next_stance(player2.stance, player2_command))

    resolution = resolve_command_interaction(new_distance, player1_command, player2_command)

    # Both attacks read the post-stance states; player 1 rolls first.
    p1_attack = _resolve_attack(
        resolution.player1_outcome,
        player1_command,
        player2_command,
        player1_def,
        player2_def,
        player1,
        player2,
        new_distance,
        rng,
    )
    p2_attack = _resolve_attack(
        resolution.player2_outcome,
        player2_command,
        player1_command,
        player2_def,
        player1_def,
        player2,
        player1,
        new_distance,
        rng,
    )

    player1, p1_damage = _apply(player1, player1_def, p1_attack, p2_attack)
    player2, p2_damage = _apply(player2, player2_def, p2_attack, p1_attack)

    phase = CommandPhaseResult(
        player1_command=player1_command,
        player2_command=player2_command,
        player1_outcome=resolution.player1_outcome,
        player2_outcome=resolution.player2_outcome,
        distance_after=new_distance,
        player1_damage=p1_damage,
        player2_damage=p2_damage,
    )
    return phase, player1, player2


def process_turn(
    state: BattleState,
    player1_def: CombatantDef,
    player2_def: CombatantDef,
    player1_commands: CommandPair,
    player2_commands: CommandPair,
    rng: RandomFn,
) -> Tuple[BattleState, TurnResult]:
    """Resolve a full turn and return the new state with its TurnResult.

    ``state`` is not modified. Calling this on a finished battle is the
    caller's mistake; the result is undefined.
    """
    first, p1, p2 = process_command_phase(
        state.distance,
        state.player1,
        state.player2,
        player1_def,
        player2_def,
        player1_commands.first,
        player2_commands.first,
        rng,
    )
    second, p1, p2 = process_command_phase(
        first.distance_after,
        p1,
        p2,
        player1_def,
        player2_def,
        player1_commands.second,
        player2_commands.second,
        rng,
    )

    turn_result = TurnResult(
        turn_number=state.turn,
        player1_commands=player1_commands,
        player2_commands=player2_commands,
        distance_before=state.distance,
        distance_after=second.distance_after,
        player1_damage=first.player1_damage.merge(second.player1_damage),
        player2_damage=first.player2_damage.merge(second.player2_damage),
        player1_stance_after=p1.stance,
        player2_stance_after=p2.stance,
        phases=(first, second),
    )
    new_state = replace(state, player1=p1, player2=p2, distance=second.distance_after, turn=state.turn + 1)
    logger.debug(
        "Turn %d resolved: distance %s -> %s, damage p1=%d p2=%d",
        state.turn,
        state.distance.value,
        new_state.distance.value,
        turn_result.player1_damage.damage,
        turn_result.player2_damage.damage,
    )
    return new_state, turn_result
