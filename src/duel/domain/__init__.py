"""Domain exports for battle rules."""

from .commands import ALL_COMMANDS, Command, CommandPair
from .distance import Distance, calculate_distance, move_closer, move_farther
from .stance import Stance, next_stance

__all__ = [
    "ALL_COMMANDS",
    "Command",
    "CommandPair",
    "Distance",
    "Stance",
    "calculate_distance",
    "move_closer",
    "move_farther",
    "next_stance",
]
