"""Pydantic models for API responses."""

from typing import Optional

from pydantic import BaseModel

from storyworld.core.preview import StoryPreview
from storyworld.core.session import StorySession
from storyworld.core.types import Character, Setting, Theme


class SettingResponse(BaseModel):
    """A story setting from the catalog."""

    id: str
    name: str
    description: str
    icon: str
    color: str

    @classmethod
    def from_setting(cls, setting: Setting) -> "SettingResponse":
        return cls(
            id=setting.id,
            name=setting.name,
            description=setting.description,
            icon=setting.icon,
            color=setting.color,
        )


class ThemeResponse(BaseModel):
    """A story theme from the catalog."""

    id: str
    name: str
    description: str
    icon: str

    @classmethod
    def from_theme(cls, theme: Theme) -> "ThemeResponse":
        return cls(id=theme.id, name=theme.name, description=theme.description, icon=theme.icon)


class CatalogResponse(BaseModel):
    settings: list[SettingResponse]
    themes: list[ThemeResponse]


class CharacterResponse(BaseModel):
    """A character in the roster."""

    id: str
    name: str
    personality: str
    traits: list[str]
    is_complete: bool

    @classmethod
    def from_character(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            personality=character.personality,
            traits=list(character.traits),
            is_complete=character.is_complete,
        )


class SceneResponse(BaseModel):
    """One scene of the synthesized story."""

    number: int  # 1-based
    description: str
    dialogue: list[str]
    image_prompt: str
    image_url: Optional[str] = None
    is_generating: bool = False


class StoryResponse(BaseModel):
    """The synthesized story with the viewer's position."""

    title: str
    introduction: str
    scenes: list[SceneResponse]
    conclusion: str
    current_scene: int  # 1-based
    is_first_scene: bool
    is_last_scene: bool
    last_error: Optional[str] = None

    @classmethod
    def from_preview(cls, preview: StoryPreview) -> "StoryResponse":
        content = preview.content
        return cls(
            title=content.title,
            introduction=content.introduction,
            scenes=[
                SceneResponse(
                    number=i + 1,
                    description=scene.description,
                    dialogue=list(scene.dialogue),
                    image_prompt=scene.image_prompt,
                    image_url=scene.image_url,
                    is_generating=preview.is_busy(i),
                )
                for i, scene in enumerate(content.scenes)
            ],
            conclusion=content.conclusion,
            current_scene=preview.current_scene + 1,
            is_first_scene=preview.is_first_scene,
            is_last_scene=preview.is_last_scene,
            last_error=preview.last_error,
        )


class WizardStateResponse(BaseModel):
    """Full state of a session's wizard, enough for a client to render it."""

    session_id: str
    current_step: str
    current_view: str  # Step name, or "credential_entry" when the overlay is open
    step_number: int
    can_continue: bool
    can_go_back: bool
    awaiting_credential: bool
    credential_set: bool
    setting: Optional[SettingResponse] = None
    theme: Optional[ThemeResponse] = None
    characters: list[CharacterResponse]
    story: Optional[StoryResponse] = None

    @classmethod
    def from_session(cls, session: StorySession) -> "WizardStateResponse":
        wizard = session.wizard
        details = wizard.details
        return cls(
            session_id=session.id,
            current_step=wizard.current_step.value,
            current_view=wizard.current_view,
            step_number=wizard.step_number,
            can_continue=wizard.can_continue,
            can_go_back=wizard.can_go_back,
            awaiting_credential=wizard.awaiting_credential,
            credential_set=session.credential.is_set,
            setting=SettingResponse.from_setting(details.setting) if details.setting else None,
            theme=ThemeResponse.from_theme(details.theme) if details.theme else None,
            characters=[CharacterResponse.from_character(c) for c in details.characters],
            story=StoryResponse.from_preview(wizard.preview) if wizard.preview else None,
        )


class IllustrationResponse(BaseModel):
    """Result of an illustration request."""

    scene_number: int
    image_url: Optional[str] = None
    discarded: bool = False  # True if the user moved on before the image arrived
