"""Battle orchestration service.

Looks up both combatants, refuses matchups the engine must never see, runs
:func:`arena.domain.battle.resolve_battle`, and writes the outcome back to the
character store.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

from arena.domain.battle import DEFAULT_MAX_ROUNDS, BattleResult, resolve_battle
from arena.domain.enums import CharacterStatus
from arena.domain.models import Character
from arena.services.character_service import CharacterService
from arena.services.errors import BattleRequestError
from arena.utils.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class BattleService:
    """Service for starting battles between stored characters.

    Args:
        characters: Character service used for lookups and write-back
        max_rounds: Round limit passed to the engine
        rng_factory: Called once per battle to obtain a fresh random source
    """

    def __init__(
        self,
        characters: CharacterService,
        *,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        rng_factory: Callable[[], RandomSource] = SystemRandomSource,
    ) -> None:
        self._characters = characters
        self._max_rounds = max_rounds
        self._rng_factory = rng_factory

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    def _lookup(self, character_id: str) -> Character:
        character = self._characters.find_character(character_id)
        if character is None:
            raise BattleRequestError(f"Character with id {character_id} not found")
        return character

    def start_battle(self, character1_id: str | None, character2_id: str | None) -> BattleResult:
        """Fight two stored characters and persist the outcome.

        The loser is marked dead and both characters keep the health they
        finished with. Nothing is written if the battle fails to conclude.

        Raises:
            BattleRequestError: If an id is missing, repeated, unknown, or dead
            RoundLimitExceeded: If the engine hits the round limit
        """
        if not character1_id or not character2_id:
            raise BattleRequestError("Both character1_id and character2_id are required")
        if character1_id == character2_id:
            raise BattleRequestError("A character cannot battle against itself")

        character1 = self._lookup(character1_id)
        character2 = self._lookup(character2_id)
        for character in (character1, character2):
            if not character.is_alive:
                raise BattleRequestError(f"{character.name} is dead and cannot battle")

        # The engine gets copies so the result keeps the pre-battle snapshots.
        result = resolve_battle(
            dataclasses.replace(character1),
            dataclasses.replace(character2),
            max_rounds=self._max_rounds,
            rng=self._rng_factory(),
        )

        winner, loser = result.winner, result.loser
        self._characters.update_status(loser.character.id, CharacterStatus.DEAD)
        self._characters.update_health(loser.character.id, loser.current_health_points)
        self._characters.update_health(winner.character.id, winner.current_health_points)

        logger.info(
            "%s defeated %s in %d rounds with %d HP left",
            winner.name,
            loser.name,
            result.total_rounds,
            winner.current_health_points,
        )
        return result
