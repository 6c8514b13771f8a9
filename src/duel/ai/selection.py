"""Weighted random and deterministic command selection."""
from __future__ import annotations

from typing import Hashable, List, Mapping, Sequence, Tuple, TypeVar

from duel.ai.errors import NoCandidateError
from duel.core.types import RandomFn
from duel.domain.commands import Command

K = TypeVar("K", bound=Hashable)

# Highest priority first.
TIE_BREAK_ORDER: Tuple[Command, ...] = (
    Command.WEAPON_ATTACK,
    Command.SPECIAL_ATTACK,
    Command.REFLECT,
    Command.ADVANCE,
    Command.RETREAT,
    Command.STANCE_A,
    Command.STANCE_B,
)


def _positive_entries(weights: Mapping[K, float]) -> List[Tuple[K, float]]:
    entries = [(key, weight) for key, weight in weights.items() if weight > 0]
    if not entries:
        raise NoCandidateError("No candidates with positive weight.")
    return entries


def select_weighted(weights: Mapping[K, float], rng: RandomFn) -> K:
    """Draw one key with probability proportional to its weight.

    Works for single commands and for (first, second) pairs alike.
    """
    entries = _positive_entries(weights)
    if len(entries) == 1:
        return entries[0][0]

    total = sum(weight for _, weight in entries)
    remaining = rng() * total
    for key, weight in entries:
        remaining -= weight
        if remaining < 0:
            return key
    # Floating-point drift can leave a tiny positive remainder.
    return entries[-1][0]


def select_max(weights: Mapping[Command, float]) -> Command:
    """Deterministically pick the heaviest command, ties broken by TIE_BREAK_ORDER."""
    entries = dict(_positive_entries(weights))
    best = max(entries.values())
    for command in TIE_BREAK_ORDER:
        if entries.get(command) == best:
            return command
    raise NoCandidateError("Maximum weight belongs to no known command.")


def first_by_priority(commands: Sequence[Command]) -> Command:
    for command in TIE_BREAK_ORDER:
        if command in commands:
            return command
    raise NoCandidateError("No command to choose from.")
