"""Battle service driving a single duel from start to verdict."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from duel.ai import AITier, select_commands
from duel.battle import (
    check_victory_after_turn,
    check_victory_on_give_up,
    check_victory_on_timeout,
    process_turn,
)
from duel.core.types import RandomFn, Side, opposite_side
from duel.data.repositories import CombatantsRepository
from duel.domain.battle_models import BattleResult, BattleState, CombatantState, TurnResult
from duel.domain.commands import CommandPair
from duel.domain.defs import CombatantDef
from duel.domain.distance import Distance
from duel.domain.growth import apply_growth
from duel.services.errors import BattleStateError

logger = logging.getLogger(__name__)

INITIAL_DISTANCE = Distance.MID
TIME_LIMIT_SECONDS = 120


@dataclass(slots=True)
class BattleSession:
    """One battle: both definitions, the current state and what happened so far."""

    player1_def: CombatantDef
    player2_def: CombatantDef
    state: BattleState
    history: List[TurnResult] = field(default_factory=list)
    result: BattleResult | None = None

    @property
    def is_over(self) -> bool:
        return self.result is not None

    def definition(self, side: Side) -> CombatantDef:
        return self.player1_def if side == "player1" else self.player2_def


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    player1_name: str
    player2_name: str
    distance: Distance


@dataclass(slots=True)
class TurnResolvedEvent(BattleEvent):
    turn_result: TurnResult
    player1_hp: int
    player2_hp: int


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    result: BattleResult


class BattleService:
    """Starts battles and advances them turn by turn."""

    def __init__(self, combatants_repo: CombatantsRepository | None = None) -> None:
        self._combatants_repo = combatants_repo or CombatantsRepository()

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(
        self, player1_id: str, player2_id: str, *, growth_stages: int = 0
    ) -> Tuple[BattleSession, List[BattleEvent]]:
        """Start a battle between two roster combatants."""
        player1_def = apply_growth(self._combatants_repo.get(player1_id), stages=growth_stages)
        player2_def = apply_growth(self._combatants_repo.get(player2_id), stages=growth_stages)
        return self.start_battle_with(player1_def, player2_def)

    def start_battle_with(
        self, player1_def: CombatantDef, player2_def: CombatantDef
    ) -> Tuple[BattleSession, List[BattleEvent]]:
        state = BattleState(
            player1=CombatantState.fresh(player1_def),
            player2=CombatantState.fresh(player2_def),
            distance=INITIAL_DISTANCE,
            turn=1,
            remaining_time=TIME_LIMIT_SECONDS,
            is_finished=False,
        )
        session = BattleSession(player1_def=player1_def, player2_def=player2_def, state=state)
        logger.info("Battle started: %s vs %s", player1_def.name, player2_def.name)
        events: List[BattleEvent] = [
            BattleStartedEvent(player1_name=player1_def.name, player2_name=player2_def.name, distance=state.distance)
        ]
        return session, events

    def resolve_turn(
        self,
        session: BattleSession,
        player1_commands: CommandPair,
        player2_commands: CommandPair,
        rng: RandomFn,
    ) -> List[BattleEvent]:
        """Resolve one turn, record it and check for a verdict."""
        self._require_active(session)
        new_state, turn_result = process_turn(
            session.state, session.player1_def, session.player2_def, player1_commands, player2_commands, rng
        )
        session.state = new_state
        session.history.append(turn_result)
        events: List[BattleEvent] = [
            TurnResolvedEvent(
                turn_result=turn_result,
                player1_hp=new_state.player1.current_hp,
                player2_hp=new_state.player2.current_hp,
            )
        ]
        maybe_result = check_victory_after_turn(new_state, session.history)
        if maybe_result is not None:
            events.append(self._conclude(session, maybe_result))
        return events

    def elapse(self, session: BattleSession, seconds: int) -> List[BattleEvent]:
        """Consume battle time; running out ends the battle on HP."""
        self._require_active(session)
        if seconds < 0:
            raise ValueError("Elapsed time cannot be negative.")
        remaining = max(session.state.remaining_time - seconds, 0)
        session.state = replace(session.state, remaining_time=remaining)
        if remaining > 0:
            return []
        return [self._conclude(session, check_victory_on_timeout(session.state, session.history))]

    def give_up(self, session: BattleSession, side: Side) -> List[BattleEvent]:
        self._require_active(session)
        return [self._conclude(session, check_victory_on_give_up(session.state, side, session.history))]

    # -----------------------
    # AI
    # -----------------------
    def choose_ai_commands(self, session: BattleSession, side: Side, tier: AITier | int, rng: RandomFn) -> CommandPair:
        """Pick commands for an AI-controlled side with full battle knowledge."""
        self._require_active(session)
        return select_commands(
            session.state,
            side,
            session.definition(side),
            tier,
            rng,
            opponent_def=session.definition(opposite_side(side)),
            history=session.history,
        )

    # -----------------------
    # Helpers
    # -----------------------
    @staticmethod
    def _require_active(session: BattleSession) -> None:
        if session.is_over:
            raise BattleStateError("Battle has already finished.")

    @staticmethod
    def _conclude(session: BattleSession, result: BattleResult) -> BattleResolvedEvent:
        session.state = result.final_state
        session.result = result
        logger.info("Battle finished: %s (%s)", result.result_type.value, result.reason)
        return BattleResolvedEvent(result=result)
