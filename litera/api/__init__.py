"""
API Module - Client side of the scoring service contract.

The scoring service is the system of record for progress. This module:
1. Defines the request/response schemas (pydantic)
2. Sends requests over HTTP (httpx)
3. Reports failures as typed exceptions

All learner state lives in the sync engine, not here.
"""

from .errors import (
    FailureKind,
    ScoringError,
    TransportFailure,
    ServiceRejection,
)
from .schemas import (
    # Requests
    StartSessionRequest,
    ChoiceRequest,
    # Responses
    ProgressResponse,
    ChoiceResponse,
    Outcome,
    ErrorBody,
)
from .client import ScoringClient

__all__ = [
    # Errors
    "FailureKind",
    "ScoringError",
    "TransportFailure",
    "ServiceRejection",
    # Requests
    "StartSessionRequest",
    "ChoiceRequest",
    # Responses
    "ProgressResponse",
    "ChoiceResponse",
    "Outcome",
    "ErrorBody",
    # Client
    "ScoringClient",
]
