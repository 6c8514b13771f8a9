"""Distance-dependent command weights."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from duel.ai.types import CommandWeights, weight_vector
from duel.domain.distance import Distance

DISTANCE_WEIGHTS: Mapping[Distance, CommandWeights] = MappingProxyType(
    {
        # Weapons connect, no reason to close further.
        Distance.NEAR: weight_vector(0.6, 1.2, 2.0, 0.8, 1.0, 1.0, 1.0),
        Distance.MID: weight_vector(1.2, 1.0, 1.0, 1.2, 1.0, 1.0, 1.0),
        # Only specials reach; closing in is attractive, backing off is not.
        Distance.FAR: weight_vector(1.8, 0.4, 1.0, 2.0, 1.0, 0.8, 0.8),
    }
)


def get_distance_weights(distance: Distance) -> CommandWeights:
    return DISTANCE_WEIGHTS[distance]
