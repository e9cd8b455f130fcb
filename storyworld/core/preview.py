"""
The story preview: a synthesized story plus the user's position in it.

Illustrations are requested one scene at a time. A scene with a request in
flight refuses a second one until the first resolves. Requests are never
cancelled; if the user has moved to another scene, regenerated the story or
left the preview by the time a result arrives, that result is dropped.
"""

import logging
import time
from typing import Optional

from .errors import IllustrationError, IllustrationInProgress, MissingCredential
from .illustration import IllustrationProvider
from .narrative import synthesize
from .types import Character, Setting, StoryContent, Theme

logger = logging.getLogger(__name__)


class StoryPreview:
    """Holds the current StoryContent, the scene cursor and illustration state."""

    def __init__(self, setting: Setting, theme: Theme, characters: list[Character]):
        self.setting = setting
        self.theme = theme
        self.characters = characters
        self.content: StoryContent = StoryContent.empty()
        self.current_scene = 0
        self.generation = 0
        self.busy_scenes: set[int] = set()
        self.last_error: Optional[str] = None
        self.closed = False
        self.regenerate()

    def regenerate(self) -> StoryContent:
        """Synthesize a fresh story and go back to the first scene."""
        self.content = synthesize(self.setting, self.theme, self.characters)
        self.generation += 1
        self.current_scene = 0
        self.busy_scenes = set()
        self.last_error = None
        return self.content

    # === Navigation ===

    @property
    def is_first_scene(self) -> bool:
        return self.current_scene == 0

    @property
    def is_last_scene(self) -> bool:
        return self.current_scene >= self.content.scene_count - 1

    def next_scene(self) -> int:
        if not self.is_last_scene:
            self.current_scene += 1
        return self.current_scene

    def previous_scene(self) -> int:
        if self.current_scene > 0:
            self.current_scene -= 1
        return self.current_scene

    def dismiss_error(self) -> None:
        self.last_error = None

    def close(self) -> None:
        """Stop showing this story. Illustrations still in flight will be dropped."""
        self.closed = True
        self.generation += 1
        self.busy_scenes = set()

    # === Illustrations ===

    def is_busy(self, scene_index: int) -> bool:
        return scene_index in self.busy_scenes

    async def illustrate_current_scene(
        self,
        provider: IllustrationProvider,
        credential: str,
        size=None,
    ) -> Optional[str]:
        """
        Request an illustration for the displayed scene.

        Args:
            provider: The illustration provider to call
            credential: The session's access token
            size: Optional "WxH" size hint

        Returns:
            The image reference, or None if the result arrived for a scene
            that is no longer displayed

        Raises:
            IndexError: If the story has no scenes
            IllustrationInProgress: If this scene already has a request running
            MissingCredential: If credential is blank (the provider is not called)
            IllustrationError: Whatever the provider raised; other scenes are unaffected
        """
        index = self.current_scene
        if index >= self.content.scene_count:
            raise IndexError("There is no scene to illustrate")
        if index in self.busy_scenes:
            raise IllustrationInProgress(index)
        if not (credential or "").strip():
            error = MissingCredential()
            self.last_error = str(error)
            raise error

        generation = self.generation
        prompt = self.content.scenes[index].image_prompt
        self.busy_scenes.add(index)
        self.last_error = None
        started = time.monotonic()

        try:
            image_url = await provider.request_illustration(prompt, credential, size)
        except IllustrationError as e:
            if generation == self.generation:
                self.last_error = str(e)
            raise
        finally:
            if generation == self.generation:
                self.busy_scenes.discard(index)

        if generation != self.generation or index != self.current_scene:
            logger.info(
                "Discarding illustration for scene %d: no longer displayed", index + 1,
                extra={"scene": index + 1},
            )
            return None

        self.content.scenes[index].image_url = image_url
        logger.info(
            "Illustration attached to scene %d", index + 1,
            extra={"scene": index + 1, "duration": round(time.monotonic() - started, 2)},
        )
        return image_url
