"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import List, Sequence

from duel.domain.battle_models import BattleResult, DamageInfo, TurnResult


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def _format_damage(info: DamageInfo) -> str:
    parts = [str(info.damage)]
    if info.is_evaded:
        parts.append("evaded")
    if info.is_reflected:
        parts.append("reflected")
    return parts[0] if len(parts) == 1 else f"{parts[0]} ({', '.join(parts[1:])})"


def format_turn(turn: TurnResult, player1_hp: int, player2_hp: int) -> List[str]:
    """Describe one resolved turn as display lines."""
    lines = [
        f"Turn {turn.turn_number}: {turn.distance_before.value} -> {turn.distance_after.value}",
    ]
    for index, phase in enumerate(turn.phases, start=1):
        lines.append(
            f"  [{index}] P1 {phase.player1_command.value} ({phase.player1_outcome.value})"
            f" vs P2 {phase.player2_command.value} ({phase.player2_outcome.value})"
        )
    lines.append(
        f"  Damage taken: P1 {_format_damage(turn.player1_damage)}, P2 {_format_damage(turn.player2_damage)}"
    )
    lines.append(
        f"  HP: P1 {player1_hp} [{turn.player1_stance_after.value}], P2 {player2_hp} [{turn.player2_stance_after.value}]"
    )
    return lines


def render_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def format_result(result: BattleResult) -> str:
    return f"{result.result_type.value}: {result.reason} after {len(result.turn_history)} turn(s)"
