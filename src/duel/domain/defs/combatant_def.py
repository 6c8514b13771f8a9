"""Combatant definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BaseStats:
    """Static combat parameters of a combatant."""

    hp: int
    strength: int
    special: int
    speed: int
    toughness: int
    special_attack_count: int


@dataclass(frozen=True, slots=True)
class WeaponDef:
    name: str
    multiplier: float


@dataclass(frozen=True, slots=True)
class ReflectorDef:
    name: str
    max_reflect_count: int
    reflect_rate: float


@dataclass(frozen=True, slots=True)
class GrowthDef:
    """Per-stage stat increase; special_attack_count never grows."""

    hp: int
    strength: int
    special: int
    speed: int
    toughness: int


@dataclass(frozen=True, slots=True)
class CombatantDef:
    """Immutable combatant definition; never mutated during battle."""

    id: str
    name: str
    archetype: str
    stats: BaseStats
    weapon: WeaponDef
    reflector: ReflectorDef
    growth: GrowthDef | None = None
