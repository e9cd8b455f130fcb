"""
Core story wizard logic for StoryWorld.

Framework-free: the wizard state machine, roster editing, templated
narrative synthesis and the illustration provider client.
"""

from .catalog import SETTINGS, THEMES, get_setting, get_theme, is_content_safe
from .credential import CredentialHolder
from .errors import (
    EmptyResult,
    IllustrationError,
    IllustrationInProgress,
    MissingCredential,
    ProviderError,
    RosterLimitError,
    StoryWorldError,
    UnknownCatalogEntry,
)
from .export import export_filename, export_story_text
from .illustration import (
    STYLE_PREAMBLE,
    IllustrationProvider,
    OpenAIImageProvider,
    apply_style_preamble,
)
from .narrative import synthesize
from .preview import StoryPreview
from .roster import Roster
from .session import StorySession
from .types import CatalogKind, Character, Scene, Setting, StoryContent, Theme, WizardStep
from .wizard import StoryDetails, WizardController

__all__ = [
    "SETTINGS",
    "THEMES",
    "get_setting",
    "get_theme",
    "is_content_safe",
    "CredentialHolder",
    "EmptyResult",
    "IllustrationError",
    "IllustrationInProgress",
    "MissingCredential",
    "ProviderError",
    "RosterLimitError",
    "StoryWorldError",
    "UnknownCatalogEntry",
    "export_filename",
    "export_story_text",
    "STYLE_PREAMBLE",
    "IllustrationProvider",
    "OpenAIImageProvider",
    "apply_style_preamble",
    "synthesize",
    "StoryPreview",
    "Roster",
    "StorySession",
    "CatalogKind",
    "Character",
    "Scene",
    "Setting",
    "StoryContent",
    "Theme",
    "WizardStep",
    "StoryDetails",
    "WizardController",
]
