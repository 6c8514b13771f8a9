"""Domain definition exports."""

from .combatant_def import BaseStats, CombatantDef, GrowthDef, ReflectorDef, WeaponDef

__all__ = [
    "BaseStats",
    "CombatantDef",
    "GrowthDef",
    "ReflectorDef",
    "WeaponDef",
]
