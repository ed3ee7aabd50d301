"""In-memory character repository."""

from __future__ import annotations

from arena.domain.models import Character, CharacterID


class InMemoryCharacterRepository:
    """Keep characters in a dict keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._characters: dict[CharacterID, Character] = {}

    def find_by_id(self, character_id: CharacterID) -> Character | None:
        return self._characters.get(character_id)

    def save(self, character: Character) -> Character:
        self._characters[character.id] = character
        return character

    def list(self) -> list[Character]:
        return list(self._characters.values())

    def delete(self, character_id: CharacterID) -> bool:
        return self._characters.pop(character_id, None) is not None

    def exists_by_name(self, name: str) -> bool:
        lowered = name.lower()
        return any(c.name.lower() == lowered for c in self._characters.values())

    def clear(self) -> None:
        """Drop every stored character."""

        self._characters.clear()
