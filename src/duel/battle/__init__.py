"""Battle rules: legality, interaction, damage, turn resolution and victory."""

from .damage import evasion_rate, is_guaranteed_hit, reflect_damage, special_damage, weapon_damage
from .interaction import CommandResolution, resolve_command_interaction
from .legality import get_valid_commands, is_command_legal
from .turn_processor import process_command_phase, process_turn
from .victory import check_victory_after_turn, check_victory_on_give_up, check_victory_on_timeout

__all__ = [
    "CommandResolution",
    "check_victory_after_turn",
    "check_victory_on_give_up",
    "check_victory_on_timeout",
    "evasion_rate",
    "get_valid_commands",
    "is_command_legal",
    "is_guaranteed_hit",
    "process_command_phase",
    "process_turn",
    "reflect_damage",
    "resolve_command_interaction",
    "special_damage",
    "weapon_damage",
]
