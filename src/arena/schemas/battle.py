from pydantic import BaseModel, Field

from .character import CharacterRead


class BattleCreate(BaseModel):
    character1_id: str | None = Field(None, description="First combatant; rolls first on ties")
    character2_id: str | None = Field(None, description="Second combatant")


class BattleParticipantRead(BaseModel):
    character: CharacterRead
    current_health_points: int = Field(..., ge=0, description="Health when the battle ended")


class BattleTurnRead(BaseModel):
    attacker_id: str
    attacker_name: str
    defender_id: str
    defender_name: str
    damage: int = Field(..., ge=0)
    defender_remaining_hp: int = Field(..., ge=0)


class BattleRoundRead(BaseModel):
    round_number: int = Field(..., ge=1)
    first_player_id: str
    first_player_name: str
    second_player_id: str
    second_player_name: str
    first_player_speed: int
    second_player_speed: int
    turns: list[BattleTurnRead]
    round_ended: bool


class BattleResultRead(BaseModel):
    winner: BattleParticipantRead
    loser: BattleParticipantRead
    rounds: list[BattleRoundRead]
    battle_log: list[str]
    total_rounds: int
