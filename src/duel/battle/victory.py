"""Victory-condition checks: HP depletion, timeout and surrender."""
from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from duel.core.types import Side
from duel.domain.battle_models import BattleResult, BattleResultType, BattleState, TurnResult


def _finish(
    state: BattleState, result_type: BattleResultType, reason: str, history: Sequence[TurnResult]
) -> BattleResult:
    return BattleResult(
        result_type=result_type,
        final_state=replace(state, is_finished=True),
        reason=reason,
        turn_history=tuple(history),
    )


def check_victory_after_turn(state: BattleState, history: Sequence[TurnResult] = ()) -> BattleResult | None:
    """Return a result when either side is at 0 HP, otherwise None."""
    p1_down = state.player1.current_hp <= 0
    p2_down = state.player2.current_hp <= 0
    if p1_down and p2_down:
        return _finish(state, BattleResultType.DRAW, "Both players HP reached 0", history)
    if p2_down:
        return _finish(state, BattleResultType.PLAYER1_WIN, "Player 2 HP reached 0", history)
    if p1_down:
        return _finish(state, BattleResultType.PLAYER2_WIN, "Player 1 HP reached 0", history)
    return None


def check_victory_on_timeout(state: BattleState, history: Sequence[TurnResult] = ()) -> BattleResult:
    """Higher remaining HP wins; equal HP is a draw."""
    expired = replace(state, remaining_time=0)
    p1_hp = state.player1.current_hp
    p2_hp = state.player2.current_hp
    if p1_hp > p2_hp:
        return _finish(expired, BattleResultType.PLAYER1_WIN, "Time expired - Player 1 has more HP", history)
    if p2_hp > p1_hp:
        return _finish(expired, BattleResultType.PLAYER2_WIN, "Time expired - Player 2 has more HP", history)
    return _finish(expired, BattleResultType.DRAW, "Time expired - Both players have same HP", history)


def check_victory_on_give_up(state: BattleState, side: Side, history: Sequence[TurnResult] = ()) -> BattleResult:
    """The side that did not give up wins regardless of HP."""
    if side == "player1":
        return _finish(state, BattleResultType.PLAYER2_WIN, "Player 1 gave up", history)
    return _finish(state, BattleResultType.PLAYER1_WIN, "Player 2 gave up", history)
