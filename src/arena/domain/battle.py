"""Turn-based duel resolution.

A battle is a sequence of rounds. Each round both sides roll initiative in
``[0, speed_modifier]`` (re-rolling ties), the faster side attacks first for
``[0, attack_modifier]`` damage, and the slower side strikes back only if it
survived. The first side brought to 0 health loses.

Battles are pure apart from the injected random source: every object below is
created fresh per call and nothing is shared between battles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from arena.domain.models import Character
from arena.utils.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 1000


class BattleError(RuntimeError):
    """Raised when a battle cannot be fought or concluded."""


class RoundLimitExceeded(BattleError):
    """Raised when neither side is defeated within the configured rounds."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Battle exceeded maximum rounds ({limit})")
        self.limit = limit


@dataclass(slots=True)
class BattleParticipant:
    """A character plus the health it has left in the current battle."""

    character: Character
    current_health_points: int
    starting_health_points: int

    @classmethod
    def from_character(cls, character: Character) -> BattleParticipant:
        health = character.current_health_points
        return cls(character=character, current_health_points=health, starting_health_points=health)

    @property
    def name(self) -> str:
        return self.character.name

    @property
    def is_defeated(self) -> bool:
        return self.current_health_points == 0


@dataclass(frozen=True, slots=True)
class BattleTurn:
    """A single attack."""

    attacker: BattleParticipant
    defender: BattleParticipant
    damage: int
    defender_remaining_hp: int


@dataclass(slots=True)
class BattleRound:
    """One speed contest and the one or two attacks that follow it."""

    round_number: int
    first_player: BattleParticipant
    second_player: BattleParticipant
    first_player_speed: int
    second_player_speed: int
    turns: list[BattleTurn] = field(default_factory=list)
    round_ended: bool = False


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Outcome of a concluded battle."""

    winner: BattleParticipant
    loser: BattleParticipant
    rounds: list[BattleRound]
    battle_log: list[str]
    total_rounds: int


@dataclass(frozen=True, slots=True)
class RoundOrder:
    first: BattleParticipant
    second: BattleParticipant
    first_speed: int
    second_speed: int


def determine_round_order(
    participant1: BattleParticipant, participant2: BattleParticipant, rng: RandomSource
) -> RoundOrder:
    """Roll initiative for both sides until the rolls differ."""

    while True:
        speed1 = rng.next_int(participant1.character.speed_modifier)
        speed2 = rng.next_int(participant2.character.speed_modifier)
        if speed1 != speed2:
            break

    if speed1 > speed2:
        return RoundOrder(participant1, participant2, speed1, speed2)
    return RoundOrder(participant2, participant1, speed2, speed1)


def execute_attack(
    attacker: BattleParticipant, defender: BattleParticipant, rng: RandomSource
) -> BattleTurn:
    """Apply one damage roll from ``attacker`` to ``defender``."""

    damage = rng.next_int(attacker.character.attack_modifier)
    defender.current_health_points = max(0, defender.current_health_points - damage)
    return BattleTurn(
        attacker=attacker,
        defender=defender,
        damage=damage,
        defender_remaining_hp=defender.current_health_points,
    )


def _play_round(
    round_number: int,
    participant1: BattleParticipant,
    participant2: BattleParticipant,
    rng: RandomSource,
) -> BattleRound:
    order = determine_round_order(participant1, participant2, rng)
    battle_round = BattleRound(
        round_number=round_number,
        first_player=order.first,
        second_player=order.second,
        first_player_speed=order.first_speed,
        second_player_speed=order.second_speed,
    )

    battle_round.turns.append(execute_attack(order.first, order.second, rng))
    if not order.second.is_defeated:
        battle_round.turns.append(execute_attack(order.second, order.first, rng))

    battle_round.round_ended = True
    return battle_round


def build_battle_log(
    rounds: list[BattleRound],
    winner: BattleParticipant,
    participant1: BattleParticipant,
    participant2: BattleParticipant,
) -> list[str]:
    """Render the human-readable account of a concluded battle."""

    p1, p2 = participant1, participant2
    log = [
        f"Battle between {p1.name} ({p1.character.job}) - {p1.starting_health_points} HP "
        f"and {p2.name} ({p2.character.job}) - {p2.starting_health_points} HP begins!"
    ]

    for battle_round in rounds:
        log.append(
            f"{battle_round.first_player.name} {battle_round.first_player_speed} speed was faster "
            f"than {battle_round.second_player.name} {battle_round.second_player_speed} speed "
            "and will begin this round."
        )
        for turn in battle_round.turns:
            log.append(
                f"{turn.attacker.name} attacks {turn.defender.name} for {turn.damage}, "
                f"{turn.defender.name} has {turn.defender_remaining_hp} HP remaining."
            )

    log.append(
        f"{winner.name} wins the battle! "
        f"{winner.name} still has {winner.current_health_points} HP remaining!"
    )
    return log


def resolve_battle(
    character1: Character,
    character2: Character,
    *,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    rng: RandomSource | None = None,
) -> BattleResult:
    """Fight a duel between two living characters.

    Args:
        character1: First combatant; rolls first in every speed contest
        character2: Second combatant
        max_rounds: Rounds allowed before the battle is declared inconclusive
        rng: Source of all initiative and damage rolls

    Returns:
        BattleResult with winner, loser, every round, and the battle log

    Raises:
        ValueError: If ``max_rounds`` is not positive or neither side has speed
        RoundLimitExceeded: If nobody is defeated within ``max_rounds``
    """
    if max_rounds <= 0:
        raise ValueError(f"max_rounds must be positive, got {max_rounds}")
    if character1.speed_modifier == 0 and character2.speed_modifier == 0:
        # Both sides would always roll 0.
        raise ValueError("at least one combatant needs a positive speed_modifier")

    if rng is None:
        rng = SystemRandomSource()
    participant1 = BattleParticipant.from_character(character1)
    participant2 = BattleParticipant.from_character(character2)
    rounds: list[BattleRound] = []

    while not (participant1.is_defeated or participant2.is_defeated):
        if len(rounds) == max_rounds:
            logger.warning(
                "battle between %s and %s did not conclude within %d rounds",
                character1.name,
                character2.name,
                max_rounds,
            )
            raise RoundLimitExceeded(max_rounds)
        rounds.append(_play_round(len(rounds) + 1, participant1, participant2, rng))

    if participant1.is_defeated:
        winner, loser = participant2, participant1
    else:
        winner, loser = participant1, participant2

    return BattleResult(
        winner=winner,
        loser=loser,
        rounds=rounds,
        battle_log=build_battle_log(rounds, winner, participant1, participant2),
        total_rounds=len(rounds),
    )
