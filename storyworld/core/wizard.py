"""
The story wizard state machine.

Steps run Setting -> Theme -> Characters -> Preview, and Preview moves to
Complete only on explicit confirmation. Each step gates "continue" on its
own validity check. Leaving Characters for Preview needs an access token
for illustrations; if none is held the wizard opens a credential entry
overlay instead and returns to Characters once a token has been entered.

All state belongs to one WizardController instance. Nothing here touches
the network or disk.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from . import catalog
from .credential import CredentialHolder
from .preview import StoryPreview
from .roster import Roster
from .types import CatalogKind, Character, Setting, Theme, WizardStep

logger = logging.getLogger(__name__)

# Steps reachable with go_next/go_back. COMPLETE is reached only via confirm().
STEP_ORDER: tuple[WizardStep, ...] = (
    WizardStep.SETTING,
    WizardStep.THEME,
    WizardStep.CHARACTERS,
    WizardStep.PREVIEW,
)

# Continuing from these steps requires an access token.
CREDENTIAL_GATED_STEPS = frozenset({WizardStep.CHARACTERS})

CREDENTIAL_ENTRY_VIEW = "credential_entry"


@dataclass
class StoryDetails:
    """Selections accumulated by the wizard."""

    setting: Optional[Setting] = None
    theme: Optional[Theme] = None
    roster: Roster = field(default_factory=Roster)

    @property
    def characters(self) -> list[Character]:
        return self.roster.characters

    def complete_characters(self) -> list[Character]:
        return self.roster.complete_characters()

    @property
    def is_ready(self) -> bool:
        return self.setting is not None and self.theme is not None and self.roster.has_complete_character


class WizardController:
    """
    Drives the story wizard for a single session.

    Args:
        credential: The session's credential holder
    """

    def __init__(self, credential: CredentialHolder):
        self.credential = credential
        self.details = StoryDetails()
        self.current_step = WizardStep.SETTING
        self.credential_return_step: Optional[WizardStep] = None
        self.preview: Optional[StoryPreview] = None

    # === State ===

    @property
    def awaiting_credential(self) -> bool:
        return self.credential_return_step is not None

    @property
    def current_view(self) -> str:
        """What should be shown: a step name or the credential overlay."""
        if self.awaiting_credential:
            return CREDENTIAL_ENTRY_VIEW
        return self.current_step.value

    @property
    def step_number(self) -> int:
        """1-based position of the current step."""
        if self.current_step is WizardStep.COMPLETE:
            return len(STEP_ORDER) + 1
        return STEP_ORDER.index(self.current_step) + 1

    @property
    def can_continue(self) -> bool:
        """Whether the active step's requirements are met."""
        step = self.current_step
        if step is WizardStep.SETTING:
            return self.details.setting is not None
        if step is WizardStep.THEME:
            return self.details.theme is not None
        if step is WizardStep.CHARACTERS:
            return self.details.roster.has_complete_character
        return False

    @property
    def can_go_back(self) -> bool:
        return self.current_step not in (WizardStep.SETTING, WizardStep.COMPLETE)

    # === Selections ===

    def select(self, kind: Union[CatalogKind, str], value: Union[Setting, Theme, str]) -> Union[Setting, Theme]:
        """
        Store the chosen setting or theme. Does not change the step.

        Args:
            kind: "setting" or "theme"
            value: A catalog entry or its id

        Raises:
            UnknownCatalogEntry: If value is an id not in the catalog
            TypeError: If value is an entry of the other kind
        """
        kind = CatalogKind(kind)
        entry = catalog.get_entry(kind, value) if isinstance(value, str) else value

        if kind is CatalogKind.SETTING:
            if not isinstance(entry, Setting):
                raise TypeError(f"Expected a Setting, got {type(entry).__name__}")
            self.details.setting = entry
        else:
            if not isinstance(entry, Theme):
                raise TypeError(f"Expected a Theme, got {type(entry).__name__}")
            self.details.theme = entry

        logger.debug("Selected %s %s", kind.value, entry.id)
        return entry

    def update_roster(self, characters: list[Character]) -> None:
        """Replace the roster wholesale. Raises RosterLimitError if out of bounds."""
        self.details.roster.replace(characters)

    # === Navigation ===

    def go_next(self) -> bool:
        """
        Advance one step if the current step is valid.

        Returns:
            True if the step changed. False if the step is invalid, has no
            forward transition, or a credential is needed first (in which case
            the credential entry overlay is now open).
        """
        if self.awaiting_credential:
            return False
        if not self.can_continue:
            logger.debug("Continue rejected at step %s", self.current_step.value)
            return False
        if self.current_step in CREDENTIAL_GATED_STEPS and not self.credential.is_set:
            self.request_credential()
            return False

        next_step = STEP_ORDER[STEP_ORDER.index(self.current_step) + 1]
        if next_step is WizardStep.PREVIEW:
            self.preview = StoryPreview(
                setting=self.details.setting,
                theme=self.details.theme,
                characters=self.details.roster.snapshot(),
            )
        self._move_to(next_step)
        return True

    def go_back(self) -> bool:
        """
        Go back one step. With the credential overlay open, closes it instead.

        Returns:
            True if the view changed
        """
        if self.awaiting_credential:
            self.cancel_credential_entry()
            return True
        if not self.can_go_back:
            return False

        if self.current_step is WizardStep.PREVIEW:
            self._close_preview()
        self._move_to(STEP_ORDER[STEP_ORDER.index(self.current_step) - 1])
        return True

    def confirm(self) -> bool:
        """Finish the story from Preview. Complete is left only via reset()."""
        if self.awaiting_credential or self.current_step is not WizardStep.PREVIEW:
            return False
        self._move_to(WizardStep.COMPLETE)
        return True

    def reset(self) -> None:
        """Start a new story: clear all selections and return to the first step."""
        self.details = StoryDetails()
        self._close_preview()
        self.credential_return_step = None
        self._move_to(WizardStep.SETTING)

    # === Credential overlay ===

    def request_credential(self) -> None:
        """Open the credential entry overlay, returning to the current step afterwards."""
        self.credential_return_step = self.current_step
        logger.info(
            "Access token required at step %s", self.current_step.value,
            extra={"step": CREDENTIAL_ENTRY_VIEW},
        )

    def submit_credential(self, token: str) -> WizardStep:
        """
        Store the token and close the overlay.

        Raises:
            ValueError: If the token is blank or not printable ASCII (overlay stays open)
        """
        self.credential.set(token)
        return_step = self.credential_return_step or self.current_step
        self.credential_return_step = None
        self._move_to(return_step)
        return return_step

    def cancel_credential_entry(self) -> None:
        self.credential_return_step = None

    def _close_preview(self) -> None:
        if self.preview is not None:
            self.preview.close()
        self.preview = None

    def _move_to(self, step: WizardStep) -> None:
        if step is not self.current_step:
            logger.info(
                "Wizard step %s -> %s", self.current_step.value, step.value,
                extra={"step": step.value},
            )
        self.current_step = step
