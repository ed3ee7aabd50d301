from pydantic import BaseModel, ConfigDict, Field


class CharacterCreate(BaseModel):
    # Left loose on purpose: the service reports every rule violation at once.
    name: str | None = Field(None, description="4-15 letters or underscores")
    job: str | None = Field(None, description="Warrior, Thief, or Mage")


class CharacterRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Primary key")
    name: str
    job: str
    status: str = Field(..., description="Alive or Dead")
    max_health_points: int = Field(..., ge=0)
    current_health_points: int = Field(..., ge=0)
    strength: int
    dexterity: int
    intelligence: int
    attack_modifier: int = Field(..., ge=0, description="Upper bound of damage rolls")
    speed_modifier: int = Field(..., ge=0, description="Upper bound of initiative rolls")


class CharacterListItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    job: str
    status: str


class PaginationRead(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool


class CharacterPageRead(BaseModel):
    data: list[CharacterListItemRead]
    pagination: PaginationRead


class JobRead(BaseModel):
    name: str
    health_points: int
    strength: int
    dexterity: int
    intelligence: int
    attack_formula: str
    speed_formula: str
