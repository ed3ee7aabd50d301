"""Dataclasses describing Arena characters.

These are the in-memory records the rules layer works with. Repositories
translate them to and from storage; the battle engine reads them as
snapshots and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import NewType

from .enums import CharacterStatus, Job

CharacterID = NewType("CharacterID", str)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Character:
    """A playable character and its derived battle modifiers."""

    id: CharacterID
    name: str
    job: Job
    status: CharacterStatus
    max_health_points: int
    current_health_points: int
    strength: int
    dexterity: int
    intelligence: int
    attack_modifier: int
    speed_modifier: int
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def is_alive(self) -> bool:
        return self.status is CharacterStatus.ALIVE


@dataclass(frozen=True, slots=True)
class CharacterListItem:
    """Lightweight projection used by paginated listings."""

    id: CharacterID
    name: str
    job: Job
    status: CharacterStatus

    @classmethod
    def from_character(cls, character: Character) -> CharacterListItem:
        return cls(
            id=character.id,
            name=character.name,
            job=character.job,
            status=character.status,
        )
