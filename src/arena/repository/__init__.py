"""Character storage backends."""

from arena.repository.json_store import JsonCharacterRepository
from arena.repository.memory_store import InMemoryCharacterRepository

__all__ = [
    "InMemoryCharacterRepository",
    "JsonCharacterRepository",
]
