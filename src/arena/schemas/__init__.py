from .battle import (
    BattleCreate,
    BattleParticipantRead,
    BattleResultRead,
    BattleRoundRead,
    BattleTurnRead,
)
from .character import (
    CharacterCreate,
    CharacterListItemRead,
    CharacterPageRead,
    CharacterRead,
    JobRead,
    PaginationRead,
)

__all__ = [
    "BattleCreate",
    "BattleParticipantRead",
    "BattleResultRead",
    "BattleRoundRead",
    "BattleTurnRead",
    "CharacterCreate",
    "CharacterListItemRead",
    "CharacterPageRead",
    "CharacterRead",
    "JobRead",
    "PaginationRead",
]
