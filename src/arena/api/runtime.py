"""Runtime primitives backing the Arena HTTP API."""

from __future__ import annotations

import logging
from collections.abc import Callable

from arena.config import Settings, get_settings
from arena.domain import jobs
from arena.domain.battle import BattleParticipant, BattleResult, BattleRound, BattleTurn
from arena.domain.models import Character, CharacterListItem
from arena.domain.pagination import Page, PageRequest, parse_page_request
from arena.interfaces import ICharacterRepository
from arena.repository import InMemoryCharacterRepository, JsonCharacterRepository
from arena.services import BattleService, CharacterService
from arena.utils.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> ICharacterRepository:
    """Pick the character store configured for this process."""

    if settings.data_dir is None:
        return InMemoryCharacterRepository()
    logger.info("storing characters under %s", settings.data_dir)
    return JsonCharacterRepository(settings.data_dir)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        repository: ICharacterRepository | None = None,
        rng_factory: Callable[[], RandomSource] = SystemRandomSource,
    ) -> None:
        self.settings = settings or get_settings()
        self.repository = repository or build_repository(self.settings)
        self.characters = CharacterService(self.repository)
        self.battles = BattleService(
            self.characters,
            max_rounds=self.settings.max_battle_rounds,
            rng_factory=rng_factory,
        )

    def page_request(self, page: str | None, limit: str | None) -> PageRequest:
        return parse_page_request(
            page,
            limit,
            default_limit=self.settings.default_pagination_limit,
            max_limit=self.settings.max_pagination_limit,
        )

    @staticmethod
    def to_character_dict(character: Character) -> dict[str, object]:
        return {
            "id": character.id,
            "name": character.name,
            "job": character.job.value,
            "status": character.status.value,
            "max_health_points": character.max_health_points,
            "current_health_points": character.current_health_points,
            "strength": character.strength,
            "dexterity": character.dexterity,
            "intelligence": character.intelligence,
            "attack_modifier": character.attack_modifier,
            "speed_modifier": character.speed_modifier,
        }

    @staticmethod
    def to_page_dict(page: Page[CharacterListItem]) -> dict[str, object]:
        return {
            "data": [
                {
                    "id": item.id,
                    "name": item.name,
                    "job": item.job.value,
                    "status": item.status.value,
                }
                for item in page.data
            ],
            "pagination": {
                "current_page": page.current_page,
                "total_pages": page.total_pages,
                "total_items": page.total_items,
                "items_per_page": page.items_per_page,
                "has_next_page": page.has_next_page,
                "has_previous_page": page.has_previous_page,
            },
        }

    @staticmethod
    def to_job_dicts() -> list[dict[str, object]]:
        return [
            {
                "name": definition.job.value,
                "health_points": definition.stats.health_points,
                "strength": definition.stats.strength,
                "dexterity": definition.stats.dexterity,
                "intelligence": definition.stats.intelligence,
                "attack_formula": definition.attack_formula,
                "speed_formula": definition.speed_formula,
            }
            for definition in jobs.list_jobs()
        ]

    @classmethod
    def to_battle_dict(cls, result: BattleResult) -> dict[str, object]:
        def participant(p: BattleParticipant) -> dict[str, object]:
            return {
                "character": cls.to_character_dict(p.character),
                "current_health_points": p.current_health_points,
            }

        def turn(t: BattleTurn) -> dict[str, object]:
            return {
                "attacker_id": t.attacker.character.id,
                "attacker_name": t.attacker.name,
                "defender_id": t.defender.character.id,
                "defender_name": t.defender.name,
                "damage": t.damage,
                "defender_remaining_hp": t.defender_remaining_hp,
            }

        def battle_round(r: BattleRound) -> dict[str, object]:
            return {
                "round_number": r.round_number,
                "first_player_id": r.first_player.character.id,
                "first_player_name": r.first_player.name,
                "second_player_id": r.second_player.character.id,
                "second_player_name": r.second_player.name,
                "first_player_speed": r.first_player_speed,
                "second_player_speed": r.second_player_speed,
                "turns": [turn(t) for t in r.turns],
                "round_ended": r.round_ended,
            }

        return {
            "winner": participant(result.winner),
            "loser": participant(result.loser),
            "rounds": [battle_round(r) for r in result.rounds],
            "battle_log": list(result.battle_log),
            "total_rounds": result.total_rounds,
        }


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
