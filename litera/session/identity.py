"""
Session Identity - Generates and holds the learner's session identifier.

LIFECYCLE:
1. Page/app load -> an identifier is generated locally (nothing is sent)
2. Learner may edit it, e.g. to resume a known session
3. Start/Resume -> the identifier is sent to the scoring service
4. Identifiers are never deleted client-side

No network access, no persistence, no failure modes.
"""

from __future__ import annotations
import secrets
import string
import time

SESSION_PREFIX = "sess_"

_ALPHABET = string.digits + string.ascii_lowercase  # base 36
_RANDOM_LENGTH = 6
_TIME_DIGITS = 4


def generate_identifier() -> str:
    """
    Create a new session identifier.

    Format: "sess_" + 6 random base-36 chars + last 4 digits of the
    millisecond clock, e.g. "sess_k3x9qa1042".
    """
    random_part = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
    time_part = str(time.time_ns() // 1_000_000)[-_TIME_DIGITS:]
    return f"{SESSION_PREFIX}{random_part}{time_part}"


class SessionIdentity:
    """
    Holds the current session identifier.

    The held value is stored verbatim: whatever the learner typed is what
    gets sent. An empty string means "no session".
    """

    def __init__(self, identifier: str = ""):
        self._identifier = identifier

    def generate_identifier(self) -> str:
        """Produce a fresh identifier without changing the held one."""
        return generate_identifier()

    def current_identifier(self) -> str:
        """The held identifier, possibly empty."""
        return self._identifier

    def set_identifier(self, value: str) -> None:
        """Replace the held identifier verbatim."""
        self._identifier = value

    def ensure_identifier(self) -> str:
        """Return the held identifier, generating one first if it is empty."""
        if not self._identifier:
            self._identifier = self.generate_identifier()
        return self._identifier

    def has_identifier(self) -> bool:
        return bool(self._identifier)

    def __repr__(self) -> str:
        return f"SessionIdentity({self._identifier!r})"
