"""In-memory holder for the session's image provider access token."""

import logging

from storyworld.config import IMAGE_CONSTANTS

logger = logging.getLogger(__name__)


class CredentialHolder:
    """
    Holds a single access token for one session.

    The token lives only as long as this object; it is never persisted and
    never logged.
    """

    def __init__(self, expected_prefix: str = IMAGE_CONSTANTS["credential_prefix"]):
        self._value = ""
        self.expected_prefix = expected_prefix

    @property
    def value(self) -> str:
        return self._value

    @property
    def is_set(self) -> bool:
        return bool(self._value.strip())

    def set(self, raw: str) -> None:
        """
        Store a token entered by the user.

        Only superficial checks are made: the token must be non-blank and must fit
        in an HTTP header (printable ASCII). A token without the expected prefix
        is accepted with a warning.

        Raises:
            ValueError: If the token is blank or contains characters a header
                cannot carry
        """
        token = (raw or "").strip()
        if not token:
            raise ValueError("Access token must not be empty")
        if not (token.isascii() and token.isprintable()):
            raise ValueError("Access token may only contain printable ASCII characters")
        if self.expected_prefix and not token.startswith(self.expected_prefix):
            logger.warning(
                "Access token does not start with the expected prefix %r", self.expected_prefix
            )
        self._value = token

    def clear(self) -> None:
        self._value = ""

    def __repr__(self) -> str:
        return f"CredentialHolder(is_set={self.is_set})"
