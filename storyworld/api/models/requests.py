"""Pydantic models for API requests."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from storyworld.config import ImageSize
from storyworld.core.catalog import find_banned_words
from storyworld.core.types import CatalogKind, Character


def _check_safe(value: Optional[str]) -> Optional[str]:
    if value:
        banned = find_banned_words(value)
        if banned:
            raise ValueError(f"Please keep it kid-friendly (not allowed: {', '.join(banned)})")
    return value


class SelectRequest(BaseModel):
    """Choose a setting or a theme by catalog id."""

    kind: CatalogKind
    id: str = Field(..., min_length=1, examples=["forest", "courage"])


class CharacterInput(BaseModel):
    """A character as sent by the client when replacing the roster."""

    id: Optional[str] = Field(default=None, description="Keep an existing id; omit for a new character")
    name: str = Field(default="", max_length=60)
    personality: str = Field(default="", max_length=500)
    traits: list[str] = Field(default_factory=list)

    @field_validator("name", "personality")
    @classmethod
    def text_is_safe(cls, value: str) -> str:
        return _check_safe(value)

    @field_validator("traits")
    @classmethod
    def traits_are_clean(cls, value: list[str]) -> list[str]:
        cleaned = []
        for trait in value:
            trait = _check_safe(trait.strip())
            if trait and trait not in cleaned:
                cleaned.append(trait)
        return cleaned

    def to_character(self) -> Character:
        character = Character(name=self.name, personality=self.personality, traits=list(self.traits))
        if self.id:
            character.id = self.id
        return character


class UpdateRosterRequest(BaseModel):
    """Replace the whole character roster."""

    characters: list[CharacterInput]


class UpdateCharacterRequest(BaseModel):
    """Change a character's name and/or personality. Omitted fields are kept."""

    name: Optional[str] = Field(default=None, max_length=60)
    personality: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name", "personality")
    @classmethod
    def text_is_safe(cls, value: Optional[str]) -> Optional[str]:
        return _check_safe(value)


class AddTraitRequest(BaseModel):
    """Add one trait tag to a character."""

    trait: str = Field(..., min_length=1, max_length=40, examples=["brave"])

    @field_validator("trait")
    @classmethod
    def trait_is_safe(cls, value: str) -> str:
        return _check_safe(value)


class CredentialRequest(BaseModel):
    """Access token for the image provider. Held in memory for this session only."""

    token: str = Field(..., min_length=1)


class IllustrationRequest(BaseModel):
    """Options for a scene illustration."""

    size: ImageSize = ImageSize.SQUARE
