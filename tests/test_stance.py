from duel.domain.commands import ALL_COMMANDS, Command
from duel.domain.stance import Stance, next_stance


def test_stance_modifiers() -> None:
    assert (Stance.NORMAL.attack_modifier, Stance.NORMAL.defense_modifier) == (1.0, 1.0)
    assert (Stance.OFFENSIVE.attack_modifier, Stance.OFFENSIVE.defense_modifier) == (1.3, 0.7)
    assert (Stance.DEFENSIVE.attack_modifier, Stance.DEFENSIVE.defense_modifier) == (0.7, 1.3)


def test_stance_transition_table() -> None:
    assert next_stance(Stance.NORMAL, Command.STANCE_A) is Stance.OFFENSIVE
    assert next_stance(Stance.NORMAL, Command.STANCE_B) is Stance.DEFENSIVE
    assert next_stance(Stance.OFFENSIVE, Command.STANCE_A) is Stance.NORMAL
    assert next_stance(Stance.OFFENSIVE, Command.STANCE_B) is Stance.DEFENSIVE
    assert next_stance(Stance.DEFENSIVE, Command.STANCE_A) is Stance.NORMAL
    assert next_stance(Stance.DEFENSIVE, Command.STANCE_B) is Stance.OFFENSIVE


def test_non_stance_commands_keep_the_stance() -> None:
    for stance in Stance:
        for command in ALL_COMMANDS:
            if command not in (Command.STANCE_A, Command.STANCE_B):
                assert next_stance(stance, command) is stance
