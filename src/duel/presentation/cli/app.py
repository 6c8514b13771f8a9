"""AI-vs-AI battle simulation from the command line."""
from __future__ import annotations

import argparse
import logging
import secrets
from typing import List, Sequence

from duel.ai.types import AITier
from duel.core.rng import RNG
from duel.data.repositories import CombatantsRepository
from duel.domain.growth import MAX_GROWTH_STAGES
from duel.presentation.cli.config import LOG_LEVELS, load_config
from duel.presentation.cli.render import format_result, format_turn, render_heading, render_lines
from duel.services import (
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleSession,
    BattleStartedEvent,
    TurnResolvedEvent,
)

logger = logging.getLogger(__name__)

_MAX_RANDOM_SEED = 2**31 - 1
_DEFAULT_MAX_TURNS = 100
_DEFAULT_SECONDS_PER_TURN = 5


def build_parser(default_tier: int) -> argparse.ArgumentParser:
    roster = [combatant.id for combatant in CombatantsRepository().all()]
    tiers = [int(tier) for tier in AITier]
    parser = argparse.ArgumentParser(prog="duel-sim", description="Simulate a duel between two AI combatants.")
    parser.add_argument("--player1", default="zaag", choices=roster, help="Combatant id for player 1.")
    parser.add_argument("--player2", default="gardan", choices=roster, help="Combatant id for player 2.")
    parser.add_argument("--tier1", type=int, default=default_tier, choices=tiers, help="AI tier for player 1.")
    parser.add_argument("--tier2", type=int, default=default_tier, choices=tiers, help="AI tier for player 2.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random).")
    parser.add_argument(
        "--growth",
        type=int,
        default=0,
        choices=range(MAX_GROWTH_STAGES + 1),
        metavar=f"0-{MAX_GROWTH_STAGES}",
        help="Growth stages applied to both combatants.",
    )
    parser.add_argument("--max-turns", type=int, default=_DEFAULT_MAX_TURNS, help="Run down the clock after this many turns.")
    parser.add_argument(
        "--seconds-per-turn",
        type=int,
        default=_DEFAULT_SECONDS_PER_TURN,
        help="Battle clock consumed by each turn (0 disables the clock).",
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=None, choices=LOG_LEVELS, help="Logging level override."
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the final result.")
    return parser


def run_simulation(
    service: BattleService,
    session: BattleSession,
    *,
    tier1: int,
    tier2: int,
    rng: RNG,
    max_turns: int,
    seconds_per_turn: int,
) -> List[BattleEvent]:
    """Play AI turns until the battle ends and return every event produced.

    When ``max_turns`` runs out first the clock is run down, so the battle
    always ends with a verdict.
    """
    events: List[BattleEvent] = []
    while not session.is_over and len(session.history) < max_turns:
        player1_commands = service.choose_ai_commands(session, "player1", tier1, rng)
        player2_commands = service.choose_ai_commands(session, "player2", tier2, rng)
        events.extend(service.resolve_turn(session, player1_commands, player2_commands, rng))
        if not session.is_over and seconds_per_turn > 0:
            events.extend(service.elapse(session, seconds_per_turn))
    if not session.is_over:
        logger.info("Turn limit of %d reached; running down the clock.", max_turns)
        events.extend(service.elapse(session, session.state.remaining_time))
    return events


def _render_events(events: Sequence[BattleEvent], *, quiet: bool) -> None:
    for event in events:
        if isinstance(event, BattleStartedEvent) and not quiet:
            render_heading(f"{event.player1_name} vs {event.player2_name}")
            print(f"Starting distance: {event.distance.value}")
        elif isinstance(event, TurnResolvedEvent) and not quiet:
            render_lines(format_turn(event.turn_result, event.player1_hp, event.player2_hp))
        elif isinstance(event, BattleResolvedEvent):
            render_heading("Result")
            print(format_result(event.result))


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, run one simulated battle and print its log."""
    config = load_config()
    parser = build_parser(int(config["default_tier"]))
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or str(config["log_level"]),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.max_turns <= 0:
        parser.error("--max-turns must be positive")
    if args.seconds_per_turn < 0:
        parser.error("--seconds-per-turn cannot be negative")

    seed = args.seed if args.seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)
    service = BattleService()
    session, events = service.start_battle(args.player1, args.player2, growth_stages=args.growth)
    events.extend(
        run_simulation(
            service,
            session,
            tier1=args.tier1,
            tier2=args.tier2,
            rng=RNG(seed),
            max_turns=args.max_turns,
            seconds_per_turn=args.seconds_per_turn,
        )
    )
    if not args.quiet:
        print(f"Seed: {seed}")
    _render_events(events, quiet=args.quiet)
