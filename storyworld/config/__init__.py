"""
Configuration module for StoryWorld.

Re-exports all configuration for convenient access.
"""

from .story import STORY_CONSTANTS
from .image import (
    IMAGE_CONSTANTS,
    ImageSize,
    get_image_api_url,
    get_image_model,
    get_image_timeout,
    parse_image_size,
)

__all__ = [
    # Story
    "STORY_CONSTANTS",
    # Image
    "IMAGE_CONSTANTS",
    "ImageSize",
    "get_image_api_url",
    "get_image_model",
    "get_image_timeout",
    "parse_image_size",
]
