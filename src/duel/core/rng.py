"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence


class RNG:
    """Wrapper around random.Random that provides deterministic helpers.

    Rules code never holds an RNG directly; it receives a ``RandomFn``.
    Pass ``rng.random`` (or the instance itself, which is callable) where one
    is expected.
    """

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def __call__(self) -> float:
        return self._random.random()

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()


class ScriptedRandom:
    """Replays a fixed sequence of values, cycling when exhausted.

    Useful for replays and for pinning down exact outcomes in tests.
    """

    def __init__(self, values: Sequence[float]) -> None:
        if not values:
            raise ValueError("ScriptedRandom needs at least one value.")
        for value in values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted value {value} is outside [0.0, 1.0).")
        self._values = tuple(values)
        self._index = 0

    def __call__(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    @property
    def calls(self) -> int:
        return self._index
