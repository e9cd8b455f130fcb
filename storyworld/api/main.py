"""FastAPI application for StoryWorld."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_JSON, LOG_LEVEL
from .logging import configure_logging
from .routes import catalog, characters, sessions, story
from .session_store import session_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=LOG_JSON, level=getattr(logging, LOG_LEVEL, logging.INFO))
    logger.info("StoryWorld API started")

    yield

    # Shutdown: forget every session and token
    session_store.clear()


app = FastAPI(
    title="StoryWorld API",
    description="""
Build a children's story step by step, then illustrate it scene by scene.

## Workflow
1. POST `/sessions` to start; keep the returned `session_id`
2. Pick a setting and a theme with POST `/sessions/{id}/select`
3. Edit characters under `/sessions/{id}/characters`
4. POST `/sessions/{id}/next` to move through the steps. Before the preview
   you will be asked for an image provider access token (PUT `/sessions/{id}/credential`)
5. Read the story at `/sessions/{id}/story` and illustrate scenes on demand

Sessions live in memory only. Nothing is stored.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
app.include_router(sessions.router, prefix="/sessions", tags=["Sessions"])
app.include_router(characters.router, prefix="/sessions/{session_id}/characters", tags=["Characters"])
app.include_router(story.router, prefix="/sessions/{session_id}/story", tags=["Story"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "sessions": len(session_store)}
