"""
Image generation configuration for StoryWorld.

Uses the OpenAI Images API (DALL-E 3) for scene illustrations. The access
token is supplied by the user per session, so only the endpoint, model and
timeout come from the environment.
"""

import os
from enum import Enum
from typing import Union

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

IMAGE_CONSTANTS = {
    "provider": "openai",
    "api_url": "https://api.openai.com/v1/images/generations",
    "model": "dall-e-3",
    "images_per_request": 1,  # We only ever show the first image
    "credential_prefix": "sk-",  # Expected, not enforced
    "timeout": 60.0,  # seconds
}


class ImageSize(str, Enum):
    """Output sizes accepted by the image provider."""

    SQUARE = "1024x1024"
    LANDSCAPE = "1792x1024"
    PORTRAIT = "1024x1792"


DEFAULT_IMAGE_SIZE = ImageSize.SQUARE


def get_image_api_url() -> str:
    """Get the image generation endpoint (IMAGE_API_URL overrides the default)."""
    return os.getenv("IMAGE_API_URL", IMAGE_CONSTANTS["api_url"])


def get_image_model() -> str:
    """Get the image model ID."""
    return os.getenv("IMAGE_MODEL", IMAGE_CONSTANTS["model"])


def get_image_timeout() -> float:
    """Get the HTTP timeout for image requests in seconds."""
    raw = os.getenv("IMAGE_REQUEST_TIMEOUT")
    if not raw:
        return IMAGE_CONSTANTS["timeout"]
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"IMAGE_REQUEST_TIMEOUT must be a number, got {raw!r}")


def parse_image_size(size: Union[str, ImageSize, None]) -> ImageSize:
    """
    Normalize a size hint to a supported ImageSize.

    Args:
        size: "WxH" string, ImageSize member, or None for the default

    Returns:
        The matching ImageSize

    Raises:
        ValueError: If the size is not supported by the provider
    """
    if size is None:
        return DEFAULT_IMAGE_SIZE
    if isinstance(size, ImageSize):
        return size
    try:
        return ImageSize(size.strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in ImageSize)
        raise ValueError(f"Unsupported image size {size!r}. Choose one of: {allowed}")
