"""Priority resolution between two simultaneous commands.

WEAPON_ATTACK beats SPECIAL_ATTACK at NEAR and pierces REFLECT, while REFLECT
counters SPECIAL_ATTACK. SPECIAL_ATTACK is the only attack that connects at
every distance.
"""
from __future__ import annotations

from typing import NamedTuple

from duel.domain.battle_models import CommandOutcome
from duel.domain.commands import Command
from duel.domain.distance import Distance


class CommandResolution(NamedTuple):
    player1_outcome: CommandOutcome
    player2_outcome: CommandOutcome


def is_weapon_in_range(distance: Distance) -> bool:
    return distance is Distance.NEAR


def resolve_single_command(attacker: Command, defender: Command, distance: Distance) -> CommandOutcome:
    """Outcome of ``attacker``'s command against ``defender``'s."""
    if attacker is Command.WEAPON_ATTACK:
        return CommandOutcome.HIT if is_weapon_in_range(distance) else CommandOutcome.MISS
    if attacker is Command.SPECIAL_ATTACK:
        if defender is Command.REFLECT:
            return CommandOutcome.COUNTERED
        if defender is Command.WEAPON_ATTACK and is_weapon_in_range(distance):
            return CommandOutcome.CANCELLED
        return CommandOutcome.HIT
    # Movement, stance shifts and REFLECT itself do nothing offensively.
    return CommandOutcome.NO_EFFECT


def resolve_command_interaction(distance: Distance, command_a: Command, command_b: Command) -> CommandResolution:
    return CommandResolution(
        player1_outcome=resolve_single_command(command_a, command_b, distance),
        player2_outcome=resolve_single_command(command_b, command_a, distance),
    )
