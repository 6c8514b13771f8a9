"""Deterministic growth-stage stat scaling."""
from __future__ import annotations

from dataclasses import replace

from duel.domain.defs import BaseStats, CombatantDef, GrowthDef

# Combatants grow linearly over at most seven stages. The special attack
# count is a fixed budget and is not part of growth.
MAX_GROWTH_STAGES = 7


def grow_stats(base: BaseStats, growth: GrowthDef, *, stages: int) -> BaseStats:
    level = max(0, min(stages, MAX_GROWTH_STAGES))
    return BaseStats(
        hp=base.hp + growth.hp * level,
        strength=base.strength + growth.strength * level,
        special=base.special + growth.special * level,
        speed=base.speed + growth.speed * level,
        toughness=base.toughness + growth.toughness * level,
        special_attack_count=base.special_attack_count,
    )


def apply_growth(combatant: CombatantDef, *, stages: int) -> CombatantDef:
    """Return a copy of ``combatant`` grown by ``stages``.

    Definitions without growth data are returned unchanged.
    """
    if combatant.growth is None:
        return combatant
    return replace(combatant, stats=grow_stats(combatant.stats, combatant.growth, stages=stages))
