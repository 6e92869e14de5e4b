"""
Scoring Errors - Failures raised by the scoring client.

Error taxonomy:
- TransportFailure: the request did not complete, or the response could not
  be read as the expected JSON. Recoverable by retrying.
- ServiceRejection: the scoring service answered with a non-2xx status.
  Carries the service's `detail` message when it sent one.

A missing session identifier is not an error here; the sync engine refuses
that case before any request is built.
"""

from __future__ import annotations
from enum import Enum


class FailureKind(str, Enum):
    """Why a transport failure happened."""
    UNREACHABLE = "unreachable"  # Could not connect / connection dropped
    TIMEOUT = "timeout"  # No response within the configured timeout
    BAD_RESPONSE = "bad_response"  # Non-JSON, wrong shape, or unexpected status


class ScoringError(Exception):
    """Base class for scoring client failures."""


class TransportFailure(ScoringError):
    """The request could not be completed or its response was unusable."""

    def __init__(self, kind: FailureKind, reason: str):
        super().__init__(reason)
        self.kind = kind
        self.reason = reason

    def __repr__(self) -> str:
        return f"TransportFailure(kind={self.kind.value!r}, reason={self.reason!r})"


class ServiceRejection(ScoringError):
    """The scoring service returned a well-formed error response."""

    def __init__(self, status_code: int, detail: str | None = None):
        super().__init__(detail or f"HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail

    def __repr__(self) -> str:
        return f"ServiceRejection(status_code={self.status_code}, detail={self.detail!r})"
