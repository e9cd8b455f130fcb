"""In-memory table of live story sessions."""

import logging
from collections import OrderedDict
from typing import Optional

from storyworld.core.session import StorySession

from .config import MAX_SESSIONS
from .logging import session_logger

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds StorySession objects by id, evicting the oldest when full.

    Sessions are never written anywhere; a restart forgets all of them.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, StorySession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> StorySession:
        while len(self._sessions) >= self.max_sessions:
            _, oldest = self._sessions.popitem(last=False)
            oldest.close()
            logger.info("Evicted session to stay under limit", extra={"session_id": oldest.id})
        session = StorySession()
        self._sessions[session.id] = session
        session_logger.session_started(session.id)
        return session

    def get(self, session_id: str) -> Optional[StorySession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        session_logger.session_ended(session_id)
        return True

    def clear(self) -> None:
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()


# Process-wide store, cleared on application shutdown
session_store = SessionStore()
