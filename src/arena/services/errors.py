"""Exceptions raised by the Arena service layer."""

from __future__ import annotations

from arena.domain.battle import BattleError


class ArenaError(Exception):
    """Base class for service-level failures."""


class CharacterValidationError(ArenaError):
    """Raised when character input fails validation; carries every problem found."""

    def __init__(self, details: list[str], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.details = details


class CharacterNotFoundError(ArenaError):
    def __init__(self, character_id: str) -> None:
        super().__init__(f"Character with id {character_id} not found")
        self.character_id = character_id


class CharacterConflictError(ArenaError):
    """Raised when a character name is already taken."""


class BattleRequestError(BattleError):
    """Raised when two characters cannot be matched up for a battle."""
