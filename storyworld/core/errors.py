"""Exceptions raised by the StoryWorld core."""

from typing import Optional


class StoryWorldError(Exception):
    """Base class for all StoryWorld errors."""


class RosterLimitError(StoryWorldError, ValueError):
    """Roster size or trait count would leave its allowed range."""


class UnknownCatalogEntry(StoryWorldError, KeyError):
    """A setting or theme id that is not in the catalog."""

    def __init__(self, kind: str, entry_id: str):
        self.kind = kind
        self.entry_id = entry_id
        super().__init__(f"Unknown {kind}: {entry_id}")

    def __str__(self) -> str:
        return self.args[0]


class IllustrationError(StoryWorldError):
    """Base class for illustration request failures."""


class MissingCredential(IllustrationError):
    """Illustration requested without an access token."""

    def __init__(self, message: str = "An access token is required to generate illustrations"):
        super().__init__(message)


class ProviderError(IllustrationError):
    """The image provider rejected the request or answered with garbage."""

    GENERIC_MESSAGE = "Failed to generate image"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.GENERIC_MESSAGE
        self.status_code = status_code
        super().__init__(self.message)


class EmptyResult(ProviderError):
    """The provider reported success but returned no image."""

    def __init__(self, message: str = "The image service returned no image"):
        super().__init__(message)


class IllustrationInProgress(IllustrationError):
    """A request for this scene is still running."""

    def __init__(self, scene_index: int):
        self.scene_index = scene_index
        super().__init__(f"An illustration for scene {scene_index + 1} is already being generated")
