"""Story preview endpoints: scene navigation, regeneration, illustrations, download."""

import time

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from storyworld.core.errors import IllustrationInProgress, MissingCredential, ProviderError
from storyworld.core.export import export_filename, export_story_text
from storyworld.core.preview import StoryPreview
from storyworld.core.session import StorySession

from ..dependencies import CurrentSession
from ..logging import session_logger
from ..models.requests import IllustrationRequest
from ..models.responses import IllustrationResponse, StoryResponse

router = APIRouter()


def _require_preview(session: StorySession) -> StoryPreview:
    preview = session.wizard.preview
    if preview is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No story yet. Finish the character step first.",
        )
    return preview


@router.get("/", response_model=StoryResponse, summary="Get the synthesized story")
async def get_story(session: CurrentSession):
    return StoryResponse.from_preview(_require_preview(session))


@router.post(
    "/regenerate",
    response_model=StoryResponse,
    summary="Regenerate the story",
    description="Synthesize the story again from the same selections. Attached illustrations are dropped.",
)
async def regenerate_story(session: CurrentSession):
    preview = _require_preview(session)
    preview.regenerate()
    return StoryResponse.from_preview(preview)


@router.post("/scenes/next", response_model=StoryResponse, summary="Show the next scene")
async def next_scene(session: CurrentSession):
    preview = _require_preview(session)
    preview.next_scene()
    return StoryResponse.from_preview(preview)


@router.post("/scenes/previous", response_model=StoryResponse, summary="Show the previous scene")
async def previous_scene(session: CurrentSession):
    preview = _require_preview(session)
    preview.previous_scene()
    return StoryResponse.from_preview(preview)


@router.post(
    "/illustration",
    response_model=IllustrationResponse,
    summary="Illustrate the current scene",
    description="""
Calls the image provider once for the displayed scene. Not retried on failure;
call again to try again.

- 401: no access token (the credential overlay is opened)
- 409: this scene already has a request in flight
- 502: the image provider failed or returned no image
    """,
)
async def illustrate_scene(session: CurrentSession, request: IllustrationRequest = IllustrationRequest()):
    preview = _require_preview(session)
    scene_number = preview.current_scene + 1
    session_logger.illustration_requested(session.id, scene_number)
    started = time.monotonic()

    try:
        image_url = await preview.illustrate_current_scene(
            session.provider, session.credential.value, size=request.size
        )
    except MissingCredential as e:
        session.wizard.request_credential()
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except IllustrationInProgress as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ProviderError as e:
        session_logger.illustration_failed(session.id, scene_number, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    session_logger.illustration_completed(session.id, scene_number, time.monotonic() - started)
    return IllustrationResponse(
        scene_number=scene_number,
        image_url=image_url,
        discarded=image_url is None,
    )


@router.delete("/error", response_model=StoryResponse, summary="Dismiss the last illustration error")
async def dismiss_error(session: CurrentSession):
    preview = _require_preview(session)
    preview.dismiss_error()
    return StoryResponse.from_preview(preview)


@router.get(
    "/download",
    response_class=PlainTextResponse,
    summary="Download the story as text",
    responses={200: {"content": {"text/plain": {}}}},
)
async def download_story(session: CurrentSession):
    preview = _require_preview(session)
    filename = export_filename(preview.content)
    return PlainTextResponse(
        export_story_text(preview.content),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
