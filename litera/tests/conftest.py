"""
Pytest fixtures for Litera tests.

The scoring service is faked with a small FastAPI app, served in-process
through httpx.ASGITransport. Replies are scripted per test.
"""

from __future__ import annotations
import asyncio
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ..api.client import ScoringClient
from ..config import LiteraConfig
from ..session import ScoringSyncEngine, SessionIdentity

BASE_URL = "http://scoring.test"

START_BODY = {
    "public_trust": 50,
    "personal_clout": 50,
    "professional_skill": 0,
    "relationships": {},
}

CHOICE_BODY = {
    "public_trust": 55,
    "personal_clout": 52,
    "professional_skill": 0,
    "relationships": {},
    "outcome": {"message": "Correct! That post is a hoax."},
}


class FakeScoringService:
    """
    Scripted stand-in for the scoring service.

    - `start_reply` is returned for every POST /api/start
    - `choice_replies` are returned in order for POST /api/choice, then
      `default_choice_reply` once the queue is empty
    - A reply whose content is a str is sent as text/plain
    - If `gate` is set, every request waits on it before replying
    """

    def __init__(self):
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.start_reply: tuple[int, Any] = (200, dict(START_BODY))
        self.choice_replies: list[tuple[int, Any]] = []
        self.default_choice_reply: tuple[int, Any] = (200, dict(CHOICE_BODY))
        self.gate: asyncio.Event | None = None
        self.app = self._build_app()

    def calls_to(self, path: str) -> list[dict[str, Any]]:
        return [body for call_path, body in self.calls if call_path == path]

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.post("/api/start")
        async def start(request: Request):
            self.calls.append(("/api/start", await request.json()))
            if self.gate is not None:
                await self.gate.wait()
            return self._respond(*self.start_reply)

        @app.post("/api/choice")
        async def choice(request: Request):
            self.calls.append(("/api/choice", await request.json()))
            if self.gate is not None:
                await self.gate.wait()
            if self.choice_replies:
                return self._respond(*self.choice_replies.pop(0))
            return self._respond(*self.default_choice_reply)

        return app

    @staticmethod
    def _respond(status_code: int, content: Any):
        if isinstance(content, str):
            return PlainTextResponse(content, status_code=status_code)
        return JSONResponse(content=content, status_code=status_code)


def raising_transport(exc_type: type[Exception]) -> httpx.MockTransport:
    """Transport whose every request fails with `exc_type`."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated failure", request=request)
    return httpx.MockTransport(handler)


def corrupt_gzip_transport() -> httpx.MockTransport:
    """Transport replying 200 with a gzip header over a body that is not gzip."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"Content-Encoding": "gzip", "Content-Type": "application/json"},
            stream=httpx.ByteStream(b"definitely not gzip"),
        )
    return httpx.MockTransport(handler)


@pytest.fixture
def fake_service() -> FakeScoringService:
    """A fresh scripted scoring service."""
    return FakeScoringService()


@pytest.fixture
def asgi_transport(fake_service: FakeScoringService) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=fake_service.app)


@pytest.fixture
def make_client():
    """
    Factory for scoring clients on a given transport.

    Every client it hands out is closed at teardown.
    """
    clients: list[ScoringClient] = []

    def factory(
        transport: httpx.AsyncBaseTransport,
        base_url: str = BASE_URL,
    ) -> ScoringClient:
        client = ScoringClient(base_url=base_url, timeout=5.0, transport=transport)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def make_engine(make_client):
    """Factory for engines with default (env-independent) config."""
    def factory(
        transport: httpx.AsyncBaseTransport,
        identifier: str = "",
    ) -> ScoringSyncEngine:
        return ScoringSyncEngine(
            client=make_client(transport),
            identity=SessionIdentity(identifier),
            config=LiteraConfig(backend_url=BASE_URL),
        )
    return factory


@pytest.fixture
def engine(make_engine, asgi_transport: httpx.ASGITransport) -> ScoringSyncEngine:
    """Engine talking to the fake service, no session identifier yet."""
    return make_engine(asgi_transport)
