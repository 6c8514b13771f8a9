"""Combatant roster repository."""
from __future__ import annotations

import logging
from typing import Dict

from duel.data.errors import DataReferenceError, DataValidationError
from duel.data.repositories.base import RepositoryBase
from duel.domain.defs import BaseStats, CombatantDef, GrowthDef, ReflectorDef, WeaponDef

logger = logging.getLogger(__name__)

_STAT_FIELDS = ("hp", "strength", "special", "speed", "toughness", "special_attack_count")
_GROWTH_FIELDS = ("hp", "strength", "special", "speed", "toughness")


class CombatantsRepository(RepositoryBase[CombatantDef]):
    """Loads and validates combatant definitions and equipment presets."""

    def __init__(self, base_path=None) -> None:
        super().__init__("combatants.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CombatantDef]:
        self._assert_required(raw, {"equipment_presets", "combatants"}, "combatants.json")
        presets = self._require_mapping(raw["equipment_presets"], "equipment_presets")
        entries = self._require_mapping(raw["combatants"], "combatants")

        combatants: Dict[str, CombatantDef] = {}
        for raw_id, payload in entries.items():
            context = f"combatant '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(
                data, {"name", "archetype", "equipment", "weapon_name", "reflector_name", "stats"}, context
            )

            preset_id = self._require_str(data["equipment"], f"{context} equipment")
            if preset_id not in presets:
                raise DataReferenceError(f"{context} references unknown equipment preset '{preset_id}'.")
            preset = self._require_mapping(presets[preset_id], f"equipment preset '{preset_id}'")
            self._assert_required(
                preset, {"weapon_multiplier", "max_reflect_count", "reflect_rate"}, f"equipment preset '{preset_id}'"
            )

            stats_data = self._require_mapping(data["stats"], f"{context} stats")
            self._assert_required(stats_data, set(_STAT_FIELDS), f"{context} stats")
            stats = BaseStats(
                **{name: self._require_int(stats_data[name], f"{context} {name}") for name in _STAT_FIELDS}
            )
            if stats.hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")

            growth = None
            if "growth" in data:
                growth_data = self._require_mapping(data["growth"], f"{context} growth")
                self._assert_required(growth_data, set(_GROWTH_FIELDS), f"{context} growth")
                growth = GrowthDef(
                    **{
                        name: self._require_int(growth_data[name], f"{context} growth {name}")
                        for name in _GROWTH_FIELDS
                    }
                )

            combatants[raw_id] = CombatantDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                archetype=self._require_str(data["archetype"], f"{context} archetype"),
                stats=stats,
                weapon=WeaponDef(
                    name=self._require_str(data["weapon_name"], f"{context} weapon_name"),
                    multiplier=self._require_number(preset["weapon_multiplier"], f"preset '{preset_id}' weapon_multiplier"),
                ),
                reflector=ReflectorDef(
                    name=self._require_str(data["reflector_name"], f"{context} reflector_name"),
                    max_reflect_count=self._require_int(
                        preset["max_reflect_count"], f"preset '{preset_id}' max_reflect_count"
                    ),
                    reflect_rate=self._require_number(preset["reflect_rate"], f"preset '{preset_id}' reflect_rate"),
                ),
                growth=growth,
            )
        logger.debug("Loaded %d combatant definitions", len(combatants))
        return combatants
