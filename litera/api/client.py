"""
Scoring Client - Async HTTP binding to the scoring service.

The client:
1. Serializes requests with the pydantic schemas
2. Sends them with httpx (non-blocking, one event loop)
3. Validates the response body before returning it
4. Raises TransportFailure / ServiceRejection on every failure path

It holds no learner state. Deciding what a failure means for the UI is the
sync engine's job.
"""

from __future__ import annotations
from typing import Any
import json
import logging

import httpx
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_BACKEND_URL, DEFAULT_REQUEST_TIMEOUT
from .errors import FailureKind, ServiceRejection, TransportFailure
from .schemas import (
    ChoiceRequest,
    ChoiceResponse,
    ErrorBody,
    ProgressResponse,
    StartSessionRequest,
)

logger = logging.getLogger(__name__)

START_PATH = "/api/start"
CHOICE_PATH = "/api/choice"


class ScoringClient:
    """
    Thin async client for the scoring service.

    Usage:
        async with ScoringClient(base_url="http://localhost:8000") as client:
            snapshot = await client.start_session("sess_abc123")
            result = await client.submit_choice(ChoiceRequest(...))

    Pass `transport` to route requests somewhere other than the network
    (httpx.ASGITransport, httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> ScoringClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    # =========================================================================
    # Operations
    # =========================================================================

    async def start_session(self, session_id: str) -> ProgressResponse:
        """
        Start or resume a session.

        Any non-2xx status is a transport failure here: the start endpoint
        has no documented error body.
        """
        response = await self._post(START_PATH, StartSessionRequest(session_id=session_id))
        if not response.is_success:
            raise TransportFailure(
                FailureKind.BAD_RESPONSE,
                f"scoring service returned HTTP {response.status_code}",
            )
        return self._parse(response, ProgressResponse)

    async def submit_choice(self, request: ChoiceRequest) -> ChoiceResponse:
        """
        Submit one learner decision.

        Raises:
            ServiceRejection: non-2xx status with a JSON body (detail, if any)
            TransportFailure: request failed, or the body was not JSON,
                or a 2xx body had the wrong shape
        """
        response = await self._post(CHOICE_PATH, request)
        if not response.is_success:
            # A non-JSON error body is not a well-formed rejection.
            body = self._json(response)
            raise ServiceRejection(response.status_code, self._error_detail(body))
        return self._parse(response, ChoiceResponse)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _post(self, path: str, body: BaseModel) -> httpx.Response:
        logger.debug(f"POST {path}")
        try:
            response = await self._http.post(path, json=body.model_dump())
        except httpx.TimeoutException as e:
            raise TransportFailure(
                FailureKind.TIMEOUT,
                f"no response within {self.timeout:g}s",
            ) from e
        except httpx.DecodingError as e:
            raise TransportFailure(
                FailureKind.BAD_RESPONSE,
                f"could not decode response body: {e}",
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportFailure(
                FailureKind.UNREACHABLE,
                f"could not reach {self.base_url}: {e}",
            ) from e
        logger.debug(f"POST {path} -> {response.status_code}")
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportFailure(
                FailureKind.BAD_RESPONSE,
                "response body is not valid JSON",
            ) from e

    @classmethod
    def _parse(cls, response: httpx.Response, model: type[BaseModel]) -> Any:
        data = cls._json(response)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TransportFailure(
                FailureKind.BAD_RESPONSE,
                f"unexpected response shape: {e.error_count()} validation error(s)",
            ) from e

    @staticmethod
    def _error_detail(data: Any) -> str | None:
        """`detail` from a decoded error body; None if absent or not a string."""
        try:
            body = ErrorBody.model_validate(data)
        except ValidationError:
            return None
        return body.detail_message
