"""A single user's story-building session."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .credential import CredentialHolder
from .illustration import IllustrationProvider, OpenAIImageProvider
from .wizard import WizardController


@dataclass
class StorySession:
    """
    Everything one user is working on: their access token and wizard.

    Created when the user arrives, discarded when they leave. Nothing in a
    session outlives it.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    credential: CredentialHolder = field(default_factory=CredentialHolder)
    provider: IllustrationProvider = field(default_factory=OpenAIImageProvider)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    wizard: WizardController = field(init=False)

    def __post_init__(self):
        self.wizard = WizardController(self.credential)

    def close(self) -> None:
        """Forget the token and all story state."""
        self.credential.clear()
        self.wizard.reset()
