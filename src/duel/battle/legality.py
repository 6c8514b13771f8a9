"""Advisory filter for the commands a combatant may currently choose."""
from __future__ import annotations

from typing import List

from duel.core.types import Side
from duel.domain.battle_models import BattleState
from duel.domain.commands import ALL_COMMANDS, Command
from duel.domain.defs import CombatantDef
from duel.domain.distance import Distance


def is_command_legal(command: Command, state: BattleState, side: Side, combatant_def: CombatantDef) -> bool:
    if command is Command.WEAPON_ATTACK:
        return state.distance is Distance.NEAR
    if command is Command.REFLECT:
        return state.combatant(side).used_reflect_count < combatant_def.reflector.max_reflect_count
    return True


def get_valid_commands(state: BattleState, side: Side, combatant_def: CombatantDef) -> List[Command]:
    """Return the legal commands for ``side`` in canonical order.

    ADVANCE, RETREAT, SPECIAL_ATTACK and both stance shifts are always legal,
    so the result is never empty.
    """
    return [command for command in ALL_COMMANDS if is_command_legal(command, state, side, combatant_def)]
