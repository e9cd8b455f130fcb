"""Character roster endpoints."""

from fastapi import APIRouter, HTTPException, status

from storyworld.core.errors import RosterLimitError

from ..dependencies import CurrentSession
from ..models.requests import AddTraitRequest, UpdateCharacterRequest, UpdateRosterRequest
from ..models.responses import CharacterResponse, WizardStateResponse

router = APIRouter()


def _not_found(character_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Character {character_id} not found",
    )


def _limit(error: RosterLimitError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error))


@router.get("/", response_model=list[CharacterResponse], summary="List characters")
async def list_characters(session: CurrentSession):
    return [CharacterResponse.from_character(c) for c in session.wizard.details.characters]


@router.put("/", response_model=WizardStateResponse, summary="Replace the roster")
async def replace_roster(request: UpdateRosterRequest, session: CurrentSession):
    try:
        session.wizard.update_roster([c.to_character() for c in request.characters])
    except RosterLimitError as e:
        raise _limit(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return WizardStateResponse.from_session(session)


@router.post(
    "/",
    response_model=CharacterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an empty character",
)
async def add_character(session: CurrentSession):
    try:
        character = session.wizard.details.roster.add_character()
    except RosterLimitError as e:
        raise _limit(e)
    return CharacterResponse.from_character(character)


@router.patch("/{character_id}", response_model=CharacterResponse, summary="Edit a character")
async def update_character(character_id: str, request: UpdateCharacterRequest, session: CurrentSession):
    try:
        character = session.wizard.details.roster.update_character(
            character_id, name=request.name, personality=request.personality
        )
    except KeyError:
        raise _not_found(character_id)
    return CharacterResponse.from_character(character)


@router.delete("/{character_id}", response_model=WizardStateResponse, summary="Remove a character")
async def remove_character(character_id: str, session: CurrentSession):
    try:
        session.wizard.details.roster.remove_character(character_id)
    except KeyError:
        raise _not_found(character_id)
    except RosterLimitError as e:
        raise _limit(e)
    return WizardStateResponse.from_session(session)


@router.post("/{character_id}/traits", response_model=CharacterResponse, summary="Add a trait")
async def add_trait(character_id: str, request: AddTraitRequest, session: CurrentSession):
    try:
        character = session.wizard.details.roster.add_trait(character_id, request.trait)
    except KeyError:
        raise _not_found(character_id)
    except RosterLimitError as e:
        raise _limit(e)
    return CharacterResponse.from_character(character)


@router.delete("/{character_id}/traits/{trait:path}", response_model=CharacterResponse, summary="Remove a trait")
async def remove_trait(character_id: str, trait: str, session: CurrentSession):
    try:
        character = session.wizard.details.roster.remove_trait(character_id, trait)
    except KeyError:
        raise _not_found(character_id)
    return CharacterResponse.from_character(character)
