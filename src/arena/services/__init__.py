"""Service layer for Arena.

Services depend on protocol interfaces (``ICharacterRepository``,
``RandomSource``) handed to them at construction time:

- CharacterService: character creation, lookup, listing, and updates
- BattleService: matchup checks, battle resolution, and result write-back

Production wiring lives in :mod:`arena.api.runtime`. Tests build services
directly around an ``InMemoryCharacterRepository`` and a
``QueuedRandomSource``:

    repo = InMemoryCharacterRepository()
    characters = CharacterService(repo)
    battles = BattleService(characters, rng_factory=lambda: QueuedRandomSource([3, 1, 9]))
"""

from arena.services.battle_service import BattleService
from arena.services.character_service import CharacterService
from arena.services.errors import (
    ArenaError,
    BattleRequestError,
    CharacterConflictError,
    CharacterNotFoundError,
    CharacterValidationError,
)

__all__ = [
    "ArenaError",
    "BattleRequestError",
    "BattleService",
    "CharacterConflictError",
    "CharacterNotFoundError",
    "CharacterService",
    "CharacterValidationError",
]
