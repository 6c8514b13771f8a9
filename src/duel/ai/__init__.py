"""Five-tier AI opponent."""

from .counter import get_counter_modifiers
from .distance_weights import DISTANCE_WEIGHTS, get_distance_weights
from .errors import AIConfigurationError, AIError, NoCandidateError
from .modifiers import (
    SituationView,
    composite_weights,
    get_hp_modifiers,
    get_reflect_modifiers,
    get_stance_response_modifiers,
)
from .pattern import analyze_pattern, most_frequent_commands
from .predictor import PredictedState, predict_state
from .selection import TIE_BREAK_ORDER, select_max, select_weighted
from .selector import select_commands
from .tendencies import SPECIES_TENDENCIES, get_tendency
from .types import AITier

__all__ = [
    "AIConfigurationError",
    "AIError",
    "AITier",
    "DISTANCE_WEIGHTS",
    "NoCandidateError",
    "PredictedState",
    "SPECIES_TENDENCIES",
    "SituationView",
    "TIE_BREAK_ORDER",
    "analyze_pattern",
    "composite_weights",
    "get_counter_modifiers",
    "get_distance_weights",
    "get_hp_modifiers",
    "get_reflect_modifiers",
    "get_stance_response_modifiers",
    "get_tendency",
    "most_frequent_commands",
    "predict_state",
    "select_commands",
    "select_max",
    "select_weighted",
]
