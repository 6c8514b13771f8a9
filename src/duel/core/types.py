"""Shared type aliases for the core and domain layers."""
from typing import Callable, Literal

Side = Literal["player1", "player2"]

RandomFn = Callable[[], float]
"""Uniform random source returning a float in [0.0, 1.0)."""


def opposite_side(side: Side) -> Side:
    return "player2" if side == "player1" else "player1"


__all__ = ["RandomFn", "Side", "opposite_side"]
