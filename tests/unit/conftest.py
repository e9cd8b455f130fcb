"""Shared fixtures for unit tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from storyworld.api.dependencies import get_session_store
from storyworld.api.main import app
from storyworld.api.session_store import SessionStore
from storyworld.core.catalog import get_setting, get_theme
from storyworld.core.credential import CredentialHolder
from storyworld.core.types import Character

TEST_TOKEN = "sk-test-token-123"


@pytest.fixture
def forest():
    return get_setting("forest")


@pytest.fixture
def courage():
    return get_theme("courage")


@pytest.fixture
def mira():
    """A complete character."""
    return Character(id="mira", name="Mira", personality="bold", traits=["brave", "curious"])


@pytest.fixture
def otto():
    """A second complete character."""
    return Character(id="otto", name="Otto", personality="gentle", traits=["kind"])


@pytest.fixture
def credential():
    return CredentialHolder()


@pytest.fixture
def credential_with_token():
    holder = CredentialHolder()
    holder.set(TEST_TOKEN)
    return holder


@pytest.fixture
def fake_provider():
    """Illustration provider that returns a fixed URL."""
    provider = MagicMock()
    provider.request_illustration = AsyncMock(return_value="https://images.example/scene.png")
    return provider


@pytest.fixture
def store():
    """A fresh session store for each test."""
    return SessionStore(max_sessions=10)


@pytest.fixture
def client(store):
    """TestClient with an isolated session store."""
    app.dependency_overrides[get_session_store] = lambda: store

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client):
    """Id of a freshly created session."""
    response = client.post("/sessions/")
    assert response.status_code == 201
    return response.json()["session_id"]


@pytest.fixture
def session_at_characters(client, session_id):
    """Session with setting and theme chosen and one complete character, on the Characters step."""
    client.post(f"/sessions/{session_id}/select", json={"kind": "setting", "id": "forest"})
    client.post(f"/sessions/{session_id}/next")
    client.post(f"/sessions/{session_id}/select", json={"kind": "theme", "id": "courage"})
    client.post(f"/sessions/{session_id}/next")
    response = client.put(
        f"/sessions/{session_id}/characters/",
        json={"characters": [{"name": "Mira", "personality": "bold", "traits": ["brave", "curious"]}]},
    )
    assert response.status_code == 200
    return session_id


@pytest.fixture
def session_at_preview(client, session_at_characters):
    """Session on the Preview step with a token set."""
    sid = session_at_characters
    client.put(f"/sessions/{sid}/credential", json={"token": TEST_TOKEN})
    response = client.post(f"/sessions/{sid}/next")
    assert response.json()["current_step"] == "preview"
    return sid
