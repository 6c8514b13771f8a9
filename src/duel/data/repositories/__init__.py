"""Repository exports."""

from .combatants_repo import CombatantsRepository

__all__ = ["CombatantsRepository"]
