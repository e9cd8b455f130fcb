"""FastAPI dependency injection for sessions and the illustration provider."""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, status

from storyworld.core.session import StorySession

from .session_store import SessionStore, session_store


def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    return session_store


Store = Annotated[SessionStore, Depends(get_session_store)]


def get_story_session(
    store: Store,
    session_id: Annotated[str, Path(description="Session id returned by POST /sessions")],
) -> StorySession:
    """Resolve the session named in the path, or 404."""
    session = store.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return session


# Type aliases for cleaner route signatures
CurrentSession = Annotated[StorySession, Depends(get_story_session)]
