"""Per-archetype command tendencies."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from duel.ai.types import NEUTRAL_WEIGHTS, CommandWeights, weight_vector

# Columns: advance, retreat, weapon, special, reflect, stance A, stance B.
# STANCE_A/B only express a liking for shifting; whether the destination
# stance suits the situation is judged by the situational modifiers.
SPECIES_TENDENCIES: Mapping[str, CommandWeights] = MappingProxyType(
    {
        # Swordsman: all-rounder.
        "zaag": weight_vector(1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
        # Golem: closes in and hits.
        "gardan": weight_vector(1.8, 0.5, 2.0, 0.6, 0.8, 1.0, 0.5),
        # Wisp: keeps away and casts.
        "roona": weight_vector(0.5, 1.8, 0.4, 2.0, 1.0, 0.8, 0.8),
        # Wyvern: balanced, shifts stance often.
        "zephyr": weight_vector(1.0, 1.0, 1.0, 1.0, 0.8, 1.5, 1.5),
        # Great turtle: defensive stance and reflects.
        "balga": weight_vector(0.6, 1.2, 0.8, 0.7, 2.0, 0.5, 1.8),
        # Treant: defensive, holds range.
        "morsu": weight_vector(0.6, 1.5, 0.7, 1.0, 1.2, 0.6, 1.5),
        # Minotaur: offensive stance, charges, weapon.
        "graon": weight_vector(1.8, 0.4, 2.2, 0.4, 0.6, 1.8, 0.4),
        # Phoenix: stays far and spams specials.
        "igna": weight_vector(0.3, 2.0, 0.3, 2.5, 0.8, 0.8, 0.6),
    }
)


def get_tendency(archetype: str) -> CommandWeights:
    """Return the archetype's vector, or the uniform default for unknown ones."""
    return SPECIES_TENDENCIES.get(archetype, NEUTRAL_WEIGHTS)
