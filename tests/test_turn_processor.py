from __future__ import annotations

from duel.battle.turn_processor import process_turn
from duel.core.rng import ScriptedRandom
from duel.domain.battle_models import CommandOutcome
from duel.domain.commands import Command, CommandPair
from duel.domain.distance import Distance
from duel.domain.stance import Stance
from tests.helpers.combatants import make_combatant_def, make_state


def _never() -> float:
    return 0.99


def _pair(first: Command, second: Command) -> CommandPair:
    return CommandPair(first, second)


def test_near_weapon_clash_damages_both_sides() -> None:
    fighter = make_combatant_def()
    state = make_state(fighter, fighter, distance=Distance.NEAR)
    commands = _pair(Command.WEAPON_ATTACK, Command.REFLECT)

    new_state, result = process_turn(state, fighter, fighter, commands, commands, _never)

    # floor(50 * 1.0 * 1.5 - 20 * 1.0)
    assert result.player1_damage.damage == 55
    assert result.player2_damage.damage == 55
    assert new_state.player1.current_hp == 245
    assert new_state.player2.current_hp == 245
    assert result.phases[0].player1_outcome is CommandOutcome.HIT
    assert result.phases[0].player2_outcome is CommandOutcome.HIT


def test_weapon_clash_out_of_range_deals_nothing() -> None:
    fighter = make_combatant_def()
    for distance in (Distance.MID, Distance.FAR):
        state = make_state(fighter, fighter, distance=distance)
        commands = _pair(Command.WEAPON_ATTACK, Command.WEAPON_ATTACK)

        new_state, result = process_turn(state, fighter, fighter, commands, commands, _never)

        assert result.player1_damage.damage == 0
        assert result.player2_damage.damage == 0
        assert new_state.player1.current_hp == fighter.stats.hp
        assert result.phases[0].player1_outcome is CommandOutcome.MISS


def test_special_into_reflect_bounces_back() -> None:
    caster = make_combatant_def("roona", special=50)
    mirror = make_combatant_def("balga", reflect_rate=0.5, max_reflect_count=2)
    state = make_state(caster, mirror, distance=Distance.MID)

    new_state, result = process_turn(
        state,
        caster,
        mirror,
        _pair(Command.SPECIAL_ATTACK, Command.ADVANCE),
        _pair(Command.REFLECT, Command.RETREAT),
        _never,
    )

    assert result.phases[0].player1_outcome is CommandOutcome.COUNTERED
    assert result.player1_damage.damage == 25
    assert result.player1_damage.is_reflected
    assert result.player2_damage.damage == 0
    assert new_state.player2.used_reflect_count == 1
    assert new_state.player1.remaining_special_count == caster.stats.special_attack_count - 1
    assert new_state.distance is Distance.MID


def test_exhausted_reflector_absorbs_without_bouncing() -> None:
    caster = make_combatant_def("roona")
    mirror = make_combatant_def("balga", max_reflect_count=2)
    state = make_state(caster, mirror, distance=Distance.MID, player2_used_reflects=2)

    new_state, result = process_turn(
        state,
        caster,
        mirror,
        _pair(Command.SPECIAL_ATTACK, Command.STANCE_A),
        _pair(Command.REFLECT, Command.STANCE_A),
        _never,
    )

    assert result.player1_damage.damage == 0
    assert result.player2_damage.damage == 0
    assert new_state.player2.used_reflect_count == 2
    assert new_state.player1.remaining_special_count == caster.stats.special_attack_count - 1


def test_mid_weapon_misses_while_special_hits() -> None:
    fighter = make_combatant_def("gardan")
    caster = make_combatant_def("roona", special=50)
    state = make_state(fighter, caster, distance=Distance.MID)

    new_state, result = process_turn(
        state,
        fighter,
        caster,
        _pair(Command.WEAPON_ATTACK, Command.STANCE_A),
        _pair(Command.SPECIAL_ATTACK, Command.STANCE_B),
        _never,
    )

    assert result.phases[0].player1_outcome is CommandOutcome.MISS
    assert result.phases[0].player2_outcome is CommandOutcome.HIT
    assert result.player1_damage.damage == 50
    assert result.player2_damage.damage == 0
    assert new_state.player1.current_hp == fighter.stats.hp - 50


def test_second_phase_sees_first_phase_result() -> None:
    fighter = make_combatant_def()
    state = make_state(fighter, fighter, distance=Distance.MID)

    new_state, result = process_turn(
        state,
        fighter,
        fighter,
        _pair(Command.STANCE_A, Command.WEAPON_ATTACK),
        _pair(Command.ADVANCE, Command.STANCE_B),
        _never,
    )

    assert result.phases[0].distance_after is Distance.NEAR
    # floor(50 * 1.3 * 1.5 - 20 * 1.3): offensive attacker into a defender who just turned defensive.
    assert result.player2_damage.damage == 71
    assert new_state.player1.stance is Stance.OFFENSIVE
    assert new_state.player2.stance is Stance.DEFENSIVE
    assert result.player1_stance_after is Stance.OFFENSIVE
    assert result.distance_before is Distance.MID
    assert result.distance_after is Distance.NEAR


def test_turn_counter_advances_and_input_is_untouched() -> None:
    fighter = make_combatant_def()
    state = make_state(fighter, fighter, distance=Distance.NEAR)
    snapshot = state
    commands = _pair(Command.WEAPON_ATTACK, Command.WEAPON_ATTACK)

    new_state, result = process_turn(state, fighter, fighter, commands, commands, _never)

    assert state == snapshot
    assert state.player1.current_hp == fighter.stats.hp
    assert result.turn_number == 1
    assert new_state.turn == 2
    assert new_state.remaining_time == state.remaining_time


def test_player1_rolls_evasion_first() -> None:
    quick = make_combatant_def(special=40, speed=50)
    state = make_state(quick, quick, distance=Distance.FAR)
    commands = _pair(Command.SPECIAL_ATTACK, Command.STANCE_A)
    rng = ScriptedRandom([0.9, 0.0])

    _, result = process_turn(state, quick, quick, commands, commands, rng)

    assert result.player2_damage.damage == 40
    assert not result.player2_damage.is_evaded
    assert result.player1_damage.damage == 0
    assert result.player1_damage.is_evaded
    assert rng.calls == 2


def test_evaded_special_still_spends_a_use() -> None:
    caster = make_combatant_def(special=40)
    dodger = make_combatant_def(speed=60)
    state = make_state(caster, dodger, distance=Distance.FAR)

    new_state, result = process_turn(
        state,
        caster,
        dodger,
        _pair(Command.SPECIAL_ATTACK, Command.STANCE_A),
        _pair(Command.STANCE_B, Command.STANCE_B),
        lambda: 0.0,
    )

    assert result.player2_damage.is_evaded
    assert result.player2_damage.damage == 0
    assert new_state.player1.remaining_special_count == caster.stats.special_attack_count - 1


def test_exceeded_special_deals_half_and_count_stays_at_zero() -> None:
    caster = make_combatant_def(special=40, special_attack_count=0)
    target = make_combatant_def()
    state = make_state(caster, target, distance=Distance.FAR)

    new_state, result = process_turn(
        state,
        caster,
        target,
        _pair(Command.SPECIAL_ATTACK, Command.STANCE_A),
        _pair(Command.STANCE_A, Command.STANCE_A),
        _never,
    )

    assert result.player2_damage.damage == 20
    assert new_state.player1.remaining_special_count == 0


def test_hp_never_drops_below_zero() -> None:
    fighter = make_combatant_def(strength=200)
    state = make_state(fighter, fighter, distance=Distance.NEAR, player2_hp=10)
    commands = _pair(Command.WEAPON_ATTACK, Command.REFLECT)

    new_state, _ = process_turn(state, fighter, fighter, commands, commands, _never)

    assert new_state.player2.current_hp == 0
    assert new_state.player1.current_hp > 0
