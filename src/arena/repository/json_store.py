"""JSON-based repository for Arena characters."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import TypeAdapter

from arena.domain.models import Character, CharacterID

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]+$")


class JsonCharacterRepository:
    """Persist characters as one JSON snapshot per file on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[Character] = TypeAdapter(Character)

    def _path_for(self, character_id: CharacterID) -> Path | None:
        if not _SAFE_ID.match(character_id):
            return None
        return self.base_path / f"character_{character_id}.json"

    def save(self, character: Character) -> Character:
        """Serialize a character to disk, replacing any previous snapshot."""

        path = self._path_for(character.id)
        if path is None:
            raise ValueError(f"character id {character.id!r} is not storable")
        path.write_bytes(self._adapter.dump_json(character, indent=2))
        return character

    def find_by_id(self, character_id: CharacterID) -> Character | None:
        """Load a previously saved character, or None if there is none."""

        path = self._path_for(character_id)
        if path is None or not path.exists():
            return None
        return self._adapter.validate_json(path.read_bytes())

    def list(self) -> list[Character]:
        """Return all stored characters ordered by creation time."""

        characters = [
            self._adapter.validate_json(path.read_bytes())
            for path in self.base_path.glob("character_*.json")
        ]
        return sorted(characters, key=lambda c: (c.created_at, c.id))

    def delete(self, character_id: CharacterID) -> bool:
        """Remove a character snapshot if it exists."""

        path = self._path_for(character_id)
        if path is None or not path.exists():
            return False
        path.unlink()
        return True

    def exists_by_name(self, name: str) -> bool:
        lowered = name.lower()
        return any(c.name.lower() == lowered for c in self.list())
