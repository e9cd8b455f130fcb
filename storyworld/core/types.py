"""
Centralized domain types for StoryWorld.

All dataclasses that are shared across the wizard, the narrative
synthesizer and the illustration requester live here to keep data flow
explicit and avoid circular imports.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(frozen=True)
class Setting:
    """Where the story takes place (labelled "environment" in some UIs)."""

    id: str
    name: str
    description: str
    icon: str
    color: str


@dataclass(frozen=True)
class Theme:
    """The lesson the story is about."""

    id: str
    name: str
    description: str
    icon: str


class CatalogKind(str, Enum):
    """Which catalog a selection belongs to."""

    SETTING = "setting"
    THEME = "theme"


# =============================================================================
# Character Types
# =============================================================================


def new_character_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class Character:
    """A user-defined story character."""

    id: str = field(default_factory=new_character_id)
    name: str = ""
    personality: str = ""
    traits: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """
        A character can appear in a story once it has a name, a personality and a trait.

        Name and personality are judged after trimming, so whitespace alone
        does not count.
        """
        return bool(self.name.strip() and self.personality.strip() and self.traits)

    @property
    def traits_phrase(self) -> str:
        """Traits joined for prose, e.g. "brave and curious"."""
        return " and ".join(self.traits)


# =============================================================================
# Wizard State Types
# =============================================================================


class WizardStep(str, Enum):
    """Steps of the story wizard, in order."""

    SETTING = "setting"
    THEME = "theme"
    CHARACTERS = "characters"
    PREVIEW = "preview"
    COMPLETE = "complete"


# =============================================================================
# Story Content Types
# =============================================================================


@dataclass
class Scene:
    """One scene of a synthesized story."""

    description: str
    dialogue: list[str]
    image_prompt: str
    image_url: Optional[str] = None  # Attached after a successful illustration request


@dataclass
class StoryContent:
    """A synthesized story. Derived from StoryDetails, never edited in place."""

    title: str
    introduction: str
    scenes: list[Scene]
    conclusion: str

    @classmethod
    def empty(cls) -> "StoryContent":
        return cls(title="", introduction="", scenes=[], conclusion="")

    @property
    def is_empty(self) -> bool:
        return not self.scenes

    @property
    def scene_count(self) -> int:
        return len(self.scenes)

    @property
    def illustrated_count(self) -> int:
        return sum(1 for scene in self.scenes if scene.image_url)
