"""
Integration tests for illustration requests with real API calls.

Run with: OPENAI_API_KEY=sk-... pytest tests/integration -v
"""

import os

import pytest

from storyworld.core.catalog import get_setting, get_theme
from storyworld.core.errors import ProviderError
from storyworld.core.illustration import OpenAIImageProvider
from storyworld.core.preview import StoryPreview
from storyworld.core.types import Character


@pytest.mark.requires_openai_api
@pytest.mark.slow
class TestOpenAIImageProviderReal:
    """Exercises the provider contract against the live Images API."""

    @pytest.mark.asyncio
    async def test_returns_image_url(self):
        provider = OpenAIImageProvider()
        url = await provider.request_illustration(
            "A smiling red fox sitting in a sunny meadow",
            os.environ["OPENAI_API_KEY"],
        )
        assert url.startswith(("https://", "data:image/"))

    @pytest.mark.asyncio
    async def test_bad_token_is_provider_error(self):
        provider = OpenAIImageProvider()
        with pytest.raises(ProviderError) as exc_info:
            await provider.request_illustration("A red circle", "sk-invalid-token")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_illustrates_first_scene(self):
        preview = StoryPreview(
            get_setting("underwater"),
            get_theme("friendship"),
            [Character(name="Pip", personality="playful", traits=["cheerful"])],
        )
        url = await preview.illustrate_current_scene(OpenAIImageProvider(), os.environ["OPENAI_API_KEY"])

        assert url
        assert preview.content.scenes[0].image_url == url
