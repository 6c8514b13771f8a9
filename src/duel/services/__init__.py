"""Service layer exports."""

from .battle_service import (
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleSession,
    BattleStartedEvent,
    TurnResolvedEvent,
)
from .errors import BattleStateError

__all__ = [
    "BattleEvent",
    "BattleResolvedEvent",
    "BattleService",
    "BattleSession",
    "BattleStartedEvent",
    "BattleStateError",
    "TurnResolvedEvent",
]
