"""Pydantic models for the StoryWorld API."""

from .requests import (
    AddTraitRequest,
    CharacterInput,
    CredentialRequest,
    IllustrationRequest,
    SelectRequest,
    UpdateCharacterRequest,
    UpdateRosterRequest,
)
from .responses import (
    CatalogResponse,
    CharacterResponse,
    IllustrationResponse,
    SceneResponse,
    SettingResponse,
    StoryResponse,
    ThemeResponse,
    WizardStateResponse,
)

__all__ = [
    "AddTraitRequest",
    "CharacterInput",
    "CredentialRequest",
    "IllustrationRequest",
    "SelectRequest",
    "UpdateCharacterRequest",
    "UpdateRosterRequest",
    "CatalogResponse",
    "CharacterResponse",
    "IllustrationResponse",
    "SceneResponse",
    "SettingResponse",
    "StoryResponse",
    "ThemeResponse",
    "WizardStateResponse",
]
