"""Battle domain models.

All records are frozen: turn resolution returns new values instead of
mutating its inputs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from duel.core.types import Side
from duel.domain.commands import Command, CommandPair
from duel.domain.defs import CombatantDef
from duel.domain.distance import Distance
from duel.domain.stance import Stance


@dataclass(frozen=True, slots=True)
class CombatantState:
    """Per-battle state of one combatant."""

    combatant_id: str
    current_hp: int
    stance: Stance = Stance.NORMAL
    remaining_special_count: int = 0
    used_reflect_count: int = 0

    @classmethod
    def fresh(cls, combatant: CombatantDef) -> "CombatantState":
        """Full HP, NORMAL stance, full special count, no reflects used."""
        return cls(
            combatant_id=combatant.id,
            current_hp=combatant.stats.hp,
            stance=Stance.NORMAL,
            remaining_special_count=combatant.stats.special_attack_count,
            used_reflect_count=0,
        )


@dataclass(frozen=True, slots=True)
class BattleState:
    """Aggregate state of an ongoing battle."""

    player1: CombatantState
    player2: CombatantState
    distance: Distance = Distance.MID
    turn: int = 1
    remaining_time: int = 120
    is_finished: bool = False

    def combatant(self, side: Side) -> CombatantState:
        return self.player1 if side == "player1" else self.player2


@dataclass(frozen=True, slots=True)
class DamageInfo:
    """Damage received by one side.

    ``is_reflected`` marks damage that bounced back onto the side that
    launched a special attack.
    """

    damage: int = 0
    is_evaded: bool = False
    is_reflected: bool = False

    def merge(self, other: "DamageInfo") -> "DamageInfo":
        return DamageInfo(
            damage=self.damage + other.damage,
            is_evaded=self.is_evaded or other.is_evaded,
            is_reflected=self.is_reflected or other.is_reflected,
        )


NO_DAMAGE = DamageInfo()


class CommandOutcome(str, Enum):
    HIT = "HIT"
    MISS = "MISS"
    CANCELLED = "CANCELLED"
    COUNTERED = "COUNTERED"
    NO_EFFECT = "NO_EFFECT"


@dataclass(frozen=True, slots=True)
class CommandPhaseResult:
    """Result of one sub-phase (first or second command of the turn)."""

    player1_command: Command
    player2_command: Command
    player1_outcome: CommandOutcome
    player2_outcome: CommandOutcome
    distance_after: Distance
    player1_damage: DamageInfo
    player2_damage: DamageInfo


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Everything that happened in one turn."""

    turn_number: int
    player1_commands: CommandPair
    player2_commands: CommandPair
    distance_before: Distance
    distance_after: Distance
    player1_damage: DamageInfo
    player2_damage: DamageInfo
    player1_stance_after: Stance
    player2_stance_after: Stance
    phases: Tuple[CommandPhaseResult, CommandPhaseResult]

    def commands_for(self, side: Side) -> CommandPair:
        return self.player1_commands if side == "player1" else self.player2_commands


class BattleResultType(str, Enum):
    PLAYER1_WIN = "PLAYER1_WIN"
    PLAYER2_WIN = "PLAYER2_WIN"
    DRAW = "DRAW"


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Terminal verdict of a battle."""

    result_type: BattleResultType
    final_state: BattleState
    reason: str
    turn_history: Tuple[TurnResult, ...] = field(default_factory=tuple)

    @property
    def winner(self) -> Side | None:
        if self.result_type is BattleResultType.PLAYER1_WIN:
            return "player1"
        if self.result_type is BattleResultType.PLAYER2_WIN:
            return "player2"
        return None
