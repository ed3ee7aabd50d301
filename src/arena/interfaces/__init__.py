"""Protocol-based interfaces for Arena services.

Services depend on these protocols rather than concrete stores, so tests and
alternative backends can be swapped in through constructor injection.
"""

from arena.interfaces.repository import ICharacterRepository
from arena.utils.rng import RandomSource

__all__ = [
    "ICharacterRepository",
    "RandomSource",
]
