"""Damage and evasion formulas."""
from __future__ import annotations

import math

from duel.domain.commands import Command
from duel.domain.distance import Distance
from duel.domain.stance import Stance

SPECIAL_POWER = 1.0
EXCEEDED_SPECIAL_MODIFIER = 0.5
EVASION_PER_SPEED = 0.5
MAX_EVASION_RATE = 25.0
MIN_DAMAGE = 1


def weapon_damage(
    *,
    strength: int,
    weapon_multiplier: float,
    attacker_stance: Stance,
    toughness: int,
    defender_stance: Stance,
) -> int:
    raw = strength * attacker_stance.attack_modifier * weapon_multiplier - toughness * defender_stance.defense_modifier
    return max(math.floor(raw), MIN_DAMAGE)


def special_damage(*, special: int, attacker_stance: Stance, is_exceeded: bool) -> int:
    """Special attacks ignore toughness; past the use budget they deal half."""
    exceed = EXCEEDED_SPECIAL_MODIFIER if is_exceeded else 1.0
    raw = special * attacker_stance.attack_modifier * SPECIAL_POWER * exceed
    return max(math.floor(raw), MIN_DAMAGE)


def reflect_damage(incoming_special_damage: int, reflect_rate: float) -> int:
    return max(math.floor(incoming_special_damage * reflect_rate), MIN_DAMAGE)


def evasion_rate(speed: int) -> float:
    """Evasion chance in percent."""
    return min(speed * EVASION_PER_SPEED, MAX_EVASION_RATE)


def is_guaranteed_hit(distance: Distance, attacker: Command, defender: Command) -> bool:
    """A NEAR weapon clash cannot be evaded by either side."""
    return distance is Distance.NEAR and attacker is Command.WEAPON_ATTACK and defender is Command.WEAPON_ATTACK
