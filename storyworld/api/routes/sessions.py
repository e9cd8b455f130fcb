"""Session lifecycle and wizard navigation endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from storyworld.core.errors import UnknownCatalogEntry

from ..dependencies import CurrentSession, Store
from ..logging import session_logger
from ..models.requests import CredentialRequest, SelectRequest
from ..models.responses import WizardStateResponse

router = APIRouter()


def _state(session) -> WizardStateResponse:
    return WizardStateResponse.from_session(session)


@router.post(
    "/",
    response_model=WizardStateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a session",
    description="Create a new in-memory session. Use the returned session_id in all other calls.",
)
async def create_session(store: Store):
    return _state(store.create())


@router.get("/{session_id}", response_model=WizardStateResponse, summary="Get wizard state")
async def get_session(session: CurrentSession):
    return _state(session)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="End a session",
    description="Discard the session, its access token and its story.",
)
async def delete_session(session: CurrentSession, store: Store):
    store.delete(session.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/select", response_model=WizardStateResponse, summary="Choose a setting or theme")
async def select(request: SelectRequest, session: CurrentSession):
    try:
        session.wizard.select(request.kind, request.id)
    except UnknownCatalogEntry as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _state(session)


@router.post(
    "/{session_id}/next",
    response_model=WizardStateResponse,
    summary="Continue to the next step",
    description="Returns 409 if the current step is incomplete. May open the credential overlay instead of advancing.",
)
async def go_next(session: CurrentSession):
    wizard = session.wizard
    if not wizard.go_next() and not wizard.awaiting_credential:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot continue from step '{wizard.current_step.value}' yet",
        )
    session_logger.step_changed(session.id, wizard.current_view)
    return _state(session)


@router.post("/{session_id}/back", response_model=WizardStateResponse, summary="Go back one step")
async def go_back(session: CurrentSession):
    wizard = session.wizard
    if not wizard.go_back():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot go back from step '{wizard.current_step.value}'",
        )
    session_logger.step_changed(session.id, wizard.current_view)
    return _state(session)


@router.post("/{session_id}/confirm", response_model=WizardStateResponse, summary="Finish the story")
async def confirm(session: CurrentSession):
    if not session.wizard.confirm():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A story can only be finished from the preview step",
        )
    session_logger.step_changed(session.id, session.wizard.current_view)
    return _state(session)


@router.post("/{session_id}/reset", response_model=WizardStateResponse, summary="Start a new story")
async def reset(session: CurrentSession):
    session.wizard.reset()
    session_logger.step_changed(session.id, session.wizard.current_view)
    return _state(session)


@router.put(
    "/{session_id}/credential",
    response_model=WizardStateResponse,
    summary="Enter the image provider access token",
    description="The token is kept in memory for this session only and is never checked against the provider.",
)
async def set_credential(request: CredentialRequest, session: CurrentSession):
    try:
        session.wizard.submit_credential(request.token)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _state(session)


@router.delete(
    "/{session_id}/credential/prompt",
    response_model=WizardStateResponse,
    summary="Dismiss the credential overlay",
)
async def cancel_credential_entry(session: CurrentSession):
    session.wizard.cancel_credential_entry()
    return _state(session)
