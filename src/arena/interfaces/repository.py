"""Character Repository Protocol Interface.

This module defines the storage contract services depend on. One repository
instance is built per process and handed to the services that need it.
"""

from typing import Protocol

from arena.domain.models import Character, CharacterID


class ICharacterRepository(Protocol):
    """Protocol defining key-value storage for characters."""

    def find_by_id(self, character_id: CharacterID) -> Character | None:
        """Return the character stored under ``character_id``, if any."""
        ...

    def save(self, character: Character) -> Character:
        """Insert or replace a character and return it."""
        ...

    def list(self) -> list[Character]:
        """Return every stored character, oldest first."""
        ...

    def delete(self, character_id: CharacterID) -> bool:
        """Remove a character; return whether anything was deleted."""
        ...

    def exists_by_name(self, name: str) -> bool:
        """Case-insensitive check for an existing character name."""
        ...
