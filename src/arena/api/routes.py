"""HTTP routes for the Arena API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status

from arena.api.runtime import ApiState
from arena.schemas import (
    BattleCreate,
    BattleResultRead,
    CharacterCreate,
    CharacterPageRead,
    CharacterRead,
    JobRead,
)
from arena.services import CharacterNotFoundError

router = APIRouter(prefix="/api")


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {"status": "ok", "max_battle_rounds": state.settings.max_battle_rounds}


@router.get("/jobs", response_model=list[JobRead])
async def list_jobs() -> list[JobRead]:
    return [JobRead.model_validate(job) for job in ApiState.to_job_dicts()]


@router.get("/characters", response_model=CharacterPageRead)
async def list_characters_page(
    state: ApiStateDep,
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
) -> CharacterPageRead:
    # Raw strings so unparsable values fall back to defaults instead of 422.
    request = state.page_request(page, limit)
    result = state.characters.list_characters_page(request)
    return CharacterPageRead.model_validate(ApiState.to_page_dict(result))


@router.get("/characters/all", response_model=list[CharacterRead])
async def list_all_characters(state: ApiStateDep) -> list[CharacterRead]:
    return [
        CharacterRead.model_validate(ApiState.to_character_dict(c))
        for c in state.characters.list_characters()
    ]


@router.get("/characters/{character_id}", response_model=CharacterRead)
async def get_character(character_id: str, state: ApiStateDep) -> CharacterRead:
    character = state.characters.get_character(character_id)
    return CharacterRead.model_validate(ApiState.to_character_dict(character))


@router.post(
    "/characters",
    response_model=CharacterRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_character(request: CharacterCreate, state: ApiStateDep) -> CharacterRead:
    character = state.characters.create_character(request.name, request.job)
    return CharacterRead.model_validate(ApiState.to_character_dict(character))


@router.delete("/characters/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_character(character_id: str, state: ApiStateDep) -> Response:
    if not state.characters.delete_character(character_id):
        raise CharacterNotFoundError(character_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/battle", response_model=BattleResultRead)
async def start_battle(request: BattleCreate, state: ApiStateDep) -> BattleResultRead:
    result = state.battles.start_battle(request.character1_id, request.character2_id)
    return BattleResultRead.model_validate(ApiState.to_battle_dict(result))
