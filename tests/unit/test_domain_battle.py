"""Unit tests for duel resolution."""

from __future__ import annotations

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from arena.domain import battle
from arena.domain import models as dm
from arena.domain.enums import CharacterStatus, Job
from arena.utils.rng import QueuedRandomSource, SystemRandomSource


def _character(
    name: str,
    job: Job,
    *,
    hp: int,
    attack: int,
    speed: int,
    character_id: str | None = None,
) -> dm.Character:
    return dm.Character(
        id=dm.CharacterID(character_id or name.lower()),
        name=name,
        job=job,
        status=CharacterStatus.ALIVE,
        max_health_points=hp,
        current_health_points=hp,
        strength=5,
        dexterity=5,
        intelligence=5,
        attack_modifier=attack,
        speed_modifier=speed,
    )


def _hero() -> dm.Character:
    return _character("Hero", Job.WARRIOR, hp=20, attack=9, speed=4)


def _mage() -> dm.Character:
    return _character("Mage", Job.MAGE, hp=12, attack=14, speed=3)


def test_speed_ties_are_rerolled_until_they_differ():
    hero = _character("Hero", Job.WARRIOR, hp=5, attack=10, speed=10)
    mage = _character("Mage", Job.MAGE, hp=5, attack=10, speed=10)
    rng = QueuedRandomSource([5, 5, 5, 5, 3, 7, 5])

    result = battle.resolve_battle(hero, mage, rng=rng)

    first_round = result.rounds[0]
    assert first_round.first_player.name == "Mage"
    assert first_round.first_player_speed == 7
    assert first_round.second_player.name == "Hero"
    assert first_round.second_player_speed == 3
    assert rng.remaining == 0
    assert result.winner.name == "Mage"


def test_first_attacker_can_end_battle_before_counterattack():
    rng = QueuedRandomSource([4, 1, 12])

    result = battle.resolve_battle(_hero(), _mage(), rng=rng)

    assert result.total_rounds == 1
    assert len(result.rounds[0].turns) == 1
    assert result.rounds[0].round_ended is True
    assert result.winner.name == "Hero"
    assert result.winner.current_health_points == 20
    assert result.loser.current_health_points == 0


def test_exact_battle_log():
    rng = QueuedRandomSource([4, 1, 12])

    result = battle.resolve_battle(_hero(), _mage(), rng=rng)

    assert result.battle_log == [
        "Battle between Hero (Warrior) - 20 HP and Mage (Mage) - 12 HP begins!",
        "Hero 4 speed was faster than Mage 1 speed and will begin this round.",
        "Hero attacks Mage for 12, Mage has 0 HP remaining.",
        "Hero wins the battle! Hero still has 20 HP remaining!",
    ]


def test_opening_line_keeps_call_order_when_second_side_is_faster():
    rng = QueuedRandomSource([1, 3, 20])

    result = battle.resolve_battle(_hero(), _mage(), rng=rng)

    assert result.battle_log[0] == (
        "Battle between Hero (Warrior) - 20 HP and Mage (Mage) - 12 HP begins!"
    )
    assert result.battle_log[1] == (
        "Mage 3 speed was faster than Hero 1 speed and will begin this round."
    )
    assert result.battle_log[-1] == "Mage wins the battle! Mage still has 12 HP remaining!"


def test_zero_damage_turn_is_recorded():
    rng = QueuedRandomSource([4, 1, 0, 3, 4, 1, 12])

    result = battle.resolve_battle(_hero(), _mage(), rng=rng)

    opening = result.rounds[0].turns[0]
    assert opening.damage == 0
    assert opening.defender_remaining_hp == 12
    counter = result.rounds[0].turns[1]
    assert counter.attacker.name == "Mage"
    assert counter.defender_remaining_hp == 17
    assert result.total_rounds == 2
    assert result.winner.current_health_points == 17
    assert "Hero attacks Mage for 0, Mage has 12 HP remaining." in result.battle_log


def test_second_attacker_wins_on_counterattack():
    hero = _character("Hero", Job.WARRIOR, hp=3, attack=9, speed=4)
    rng = QueuedRandomSource([4, 1, 2, 5])

    result = battle.resolve_battle(hero, _mage(), rng=rng)

    assert result.total_rounds == 1
    assert len(result.rounds[0].turns) == 2
    assert result.winner.name == "Mage"
    assert result.winner.current_health_points == 10
    assert result.loser.name == "Hero"
    assert result.loser.current_health_points == 0


def test_damage_is_floored_at_zero():
    rng = QueuedRandomSource([4, 1, 14])
    mage = _character("Mage", Job.MAGE, hp=5, attack=14, speed=3)

    result = battle.resolve_battle(_hero(), mage, rng=rng)

    turn = result.rounds[0].turns[0]
    assert turn.damage == 14
    assert turn.defender_remaining_hp == 0


def test_round_limit_raises_instead_of_returning():
    rng = QueuedRandomSource([1, 0, 0, 0])

    with pytest.raises(battle.RoundLimitExceeded) as excinfo:
        battle.resolve_battle(_hero(), _mage(), max_rounds=1, rng=rng)

    assert excinfo.value.limit == 1
    assert isinstance(excinfo.value, battle.BattleError)
    assert "maximum rounds (1)" in str(excinfo.value)


def test_battle_finishing_in_last_allowed_round_succeeds():
    rng = QueuedRandomSource([4, 1, 0, 0, 4, 1, 12])

    result = battle.resolve_battle(_hero(), _mage(), max_rounds=2, rng=rng)

    assert result.total_rounds == 2
    assert result.winner.name == "Hero"


def test_invalid_max_rounds():
    with pytest.raises(ValueError, match="max_rounds must be positive"):
        battle.resolve_battle(_hero(), _mage(), max_rounds=0)


def test_combatants_without_speed_are_rejected():
    slow_a = _character("Slow", Job.WARRIOR, hp=5, attack=3, speed=0)
    slow_b = _character("Slower", Job.WARRIOR, hp=5, attack=3, speed=0)
    with pytest.raises(ValueError, match="positive speed_modifier"):
        battle.resolve_battle(slow_a, slow_b)


def test_defeated_participant_loses_without_rounds():
    fallen = _hero()
    fallen.current_health_points = 0

    result = battle.resolve_battle(fallen, _mage(), rng=QueuedRandomSource())

    assert result.total_rounds == 0
    assert result.winner.name == "Mage"
    assert len(result.battle_log) == 2


def test_participant_requires_starting_health():
    with pytest.raises(TypeError):
        battle.BattleParticipant(character=_hero(), current_health_points=20)

    participant = battle.BattleParticipant.from_character(_mage())
    assert participant.starting_health_points == 12


def test_snapshots_are_not_mutated():
    hero, mage = _hero(), _mage()

    battle.resolve_battle(hero, mage, rng=QueuedRandomSource([4, 1, 12]))

    assert hero.current_health_points == 20
    assert mage.current_health_points == 12


def test_rounds_are_independent_of_previous_speed():
    rng = QueuedRandomSource([4, 1, 0, 0, 0, 3, 0, 0, 4, 1, 12])

    result = battle.resolve_battle(_hero(), _mage(), rng=rng)

    assert [r.first_player.name for r in result.rounds] == ["Hero", "Mage", "Hero"]
    assert [r.round_number for r in result.rounds] == [1, 2, 3]


@settings(max_examples=60, deadline=None)
@given(
    seed=st.integers(min_value=0, max_value=2**32),
    hp1=st.integers(min_value=1, max_value=40),
    hp2=st.integers(min_value=1, max_value=40),
    attack1=st.integers(min_value=1, max_value=15),
    attack2=st.integers(min_value=1, max_value=15),
    speed1=st.integers(min_value=1, max_value=10),
    speed2=st.integers(min_value=0, max_value=10),
)
def test_battle_properties(seed, hp1, hp2, attack1, attack2, speed1, speed2):
    first = _character("Alpha", Job.WARRIOR, hp=hp1, attack=attack1, speed=speed1)
    second = _character("Beta", Job.THIEF, hp=hp2, attack=attack2, speed=speed2)

    result = battle.resolve_battle(first, second, rng=SystemRandomSource(seed=seed))

    assert result.winner.current_health_points > 0
    assert result.loser.current_health_points == 0
    assert {result.winner.name, result.loser.name} == {"Alpha", "Beta"}
    assert result.total_rounds == len(result.rounds)

    for index, battle_round in enumerate(result.rounds):
        assert battle_round.round_number == index + 1
        assert 1 <= len(battle_round.turns) <= 2
        assert battle_round.first_player_speed > battle_round.second_player_speed
        assert battle_round.round_ended
    # Only the final round may be cut short.
    assert all(len(r.turns) == 2 for r in result.rounds[:-1])

    total_turns = sum(len(r.turns) for r in result.rounds)
    attack_lines = [line for line in result.battle_log if " attacks " in line]
    assert len(attack_lines) == total_turns
    assert len(result.battle_log) == total_turns + result.total_rounds + 2

    closing = re.fullmatch(
        r"(\w+) wins the battle! (\w+) still has (\d+) HP remaining!", result.battle_log[-1]
    )
    assert closing is not None
    assert closing.group(1) == closing.group(2) == result.winner.name
    assert int(closing.group(3)) == result.winner.current_health_points
