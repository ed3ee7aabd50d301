"""Character lifecycle service.

Creation derives every stat from the job table, so callers only pick a name
and a job. All storage goes through the injected repository.
"""

from __future__ import annotations

import logging
import re
import uuid

from arena.domain import jobs
from arena.domain.enums import CharacterStatus, Job
from arena.domain.models import Character, CharacterID, CharacterListItem
from arena.domain.pagination import Page, PageRequest, paginate
from arena.interfaces import ICharacterRepository
from arena.services.errors import (
    CharacterConflictError,
    CharacterNotFoundError,
    CharacterValidationError,
)

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 15
_NAME_PATTERN = re.compile(r"^[a-zA-Z_]+$")


def validate_character_name(name: object) -> list[str]:
    if not name or not isinstance(name, str):
        return ["Name is required"]

    errors: list[str] = []
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        errors.append(
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters inclusive"
        )
    if not _NAME_PATTERN.match(name):
        errors.append("Name must contain only letters (a-z, A-Z) or underscore (_) characters")
    return errors


def validate_job(job: object) -> list[str]:
    if not job or not isinstance(job, str):
        return ["Job is required"]
    if job not in {j.value for j in Job}:
        return [f"Job must be one of: {', '.join(j.value for j in Job)}"]
    return []


class CharacterService:
    """Create, look up, and update characters."""

    def __init__(self, repository: ICharacterRepository) -> None:
        self._repository = repository

    def create_character(self, name: object, job: object) -> Character:
        """Validate input and persist a new, full-health character.

        Raises:
            CharacterValidationError: If the name or job is invalid
            CharacterConflictError: If the name is already taken (case-insensitive)
        """
        errors = validate_character_name(name) + validate_job(job)
        if errors:
            raise CharacterValidationError(errors)

        if self._repository.exists_by_name(name):
            raise CharacterConflictError(f"Character with name '{name}' already exists")

        job_type = Job(job)
        stats = jobs.get_job(job_type).stats
        character = Character(
            id=CharacterID(uuid.uuid4().hex),
            name=name,
            job=job_type,
            status=CharacterStatus.ALIVE,
            max_health_points=stats.health_points,
            current_health_points=stats.health_points,
            strength=stats.strength,
            dexterity=stats.dexterity,
            intelligence=stats.intelligence,
            attack_modifier=jobs.calculate_attack_modifier(
                job_type, stats.strength, stats.dexterity, stats.intelligence
            ),
            speed_modifier=jobs.calculate_speed_modifier(
                job_type, stats.strength, stats.dexterity, stats.intelligence
            ),
        )
        self._repository.save(character)
        logger.info("created %s %s (%s)", job_type, name, character.id)
        return character

    def find_character(self, character_id: str) -> Character | None:
        return self._repository.find_by_id(CharacterID(character_id))

    def get_character(self, character_id: str) -> Character:
        """Return a character or raise ``CharacterNotFoundError``."""

        character = self.find_character(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return character

    def list_characters(self) -> list[Character]:
        return self._repository.list()

    def list_characters_page(self, request: PageRequest) -> Page[CharacterListItem]:
        items = [CharacterListItem.from_character(c) for c in self._repository.list()]
        return paginate(items, request)

    def delete_character(self, character_id: str) -> bool:
        deleted = self._repository.delete(CharacterID(character_id))
        if deleted:
            logger.info("deleted character %s", character_id)
        return deleted

    def update_status(self, character_id: str, status: CharacterStatus) -> Character | None:
        character = self.find_character(character_id)
        if character is None:
            return None
        character.status = status
        return self._repository.save(character)

    def update_health(self, character_id: str, current_health_points: int) -> Character | None:
        """Set current health, clamped to ``[0, max_health_points]``."""

        character = self.find_character(character_id)
        if character is None:
            return None
        character.current_health_points = max(
            0, min(current_health_points, character.max_health_points)
        )
        return self._repository.save(character)
