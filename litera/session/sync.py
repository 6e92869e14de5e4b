"""
Scoring Sync Engine - Keeps local progress in step with the scoring service.

The loop for every operation:
1. Refuse locally if another call is in flight or no session exists
2. Mark busy, show an in-flight status
3. Send the request
4. Success -> replace ProgressState with the returned snapshot
   Failure -> keep ProgressState exactly as it was
5. Set the status message, clear busy

State machine (per call):
    IDLE -> IN_FLIGHT -> APPLIED | REJECTED | TRANSPORT_FAILED -> IDLE

Calls refused before step 2 end in REFUSED (no session) or BUSY (another
call in flight) and never touch the network.

Snapshot replacement means there is nothing to merge: a failed call simply
leaves the learner where they were, and a retry is a plain re-submit.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

from ..config import LiteraConfig
from ..engine_core.state import ProgressState, INITIAL_PROGRESS
from ..engine_core.action import ActionRequest
from ..api.client import ScoringClient
from ..api.errors import FailureKind, ServiceRejection, TransportFailure
from ..api.schemas import ChoiceRequest
from .identity import SessionIdentity

logger = logging.getLogger(__name__)

# Status messages shown to the learner
STATUS_CONNECTING = "Connecting..."
STATUS_SUBMITTING = "Submitting..."
STATUS_READY = "Session ready"
STATUS_START_UNREACHABLE = "Failed to start. Check backend URL."
STATUS_START_FAILED = "Failed to start: {reason}"
STATUS_NO_SESSION = "Start a session first"
STATUS_UPDATED = "Updated"
STATUS_ERROR = "Error"
STATUS_NETWORK_ERROR = "Network error"


class SyncPhase(Enum):
    """Where a call is in its lifecycle."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    APPLIED = "applied"  # Snapshot replaced local state
    REJECTED = "rejected"  # Service returned an error response
    TRANSPORT_FAILED = "transport_failed"  # No usable response
    REFUSED = "refused"  # Local precondition failed, nothing sent
    BUSY = "busy"  # Another call in flight, nothing sent


@dataclass(frozen=True)
class SyncResult:
    """
    Outcome of one engine operation.

    `progress` is the applied snapshot for APPLIED results and None
    otherwise. `status` is the message the learner sees.
    """
    phase: SyncPhase
    status: str
    progress: ProgressState | None = None

    @property
    def applied(self) -> bool:
        return self.phase == SyncPhase.APPLIED


@dataclass(frozen=True)
class EngineView:
    """Read-only snapshot of everything the presentation layer renders."""
    identifier: str
    progress: ProgressState
    status: str
    busy: bool


class ScoringSyncEngine:
    """
    Owns the learner's session identifier, progress and status.

    Usage:
        engine = ScoringSyncEngine()

        result = await engine.start_session()
        result = await engine.submit_action(ActionRequest.chat_decision("report"))

        view = engine.view()  # render meters, status, busy flag

    One instance lives for one presentation session. All mutation happens
    on the event loop thread; the busy flag is checked and set before the
    first await, so overlapping calls cannot both get through.
    """

    def __init__(
        self,
        client: ScoringClient | None = None,
        identity: SessionIdentity | None = None,
        config: LiteraConfig | None = None,
    ):
        self.config = config or LiteraConfig.from_env()
        self._owns_client = client is None
        self.client = client or ScoringClient(
            base_url=self.config.backend_url,
            timeout=self.config.request_timeout,
        )
        self.identity = identity or SessionIdentity()

        self._progress: ProgressState = INITIAL_PROGRESS
        self._status: str = ""
        self._phase: SyncPhase = SyncPhase.IDLE
        self.last_result: SyncResult | None = None

    async def __aenter__(self) -> ScoringSyncEngine:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the scoring client if this engine created it."""
        if self._owns_client:
            await self.client.aclose()

    # =========================================================================
    # Presentation-facing state
    # =========================================================================

    @property
    def identifier(self) -> str:
        return self.identity.current_identifier()

    @property
    def progress(self) -> ProgressState:
        return self._progress

    @property
    def status(self) -> str:
        return self._status

    @property
    def phase(self) -> SyncPhase:
        return self._phase

    @property
    def busy(self) -> bool:
        return self._phase == SyncPhase.IN_FLIGHT

    def view(self) -> EngineView:
        return EngineView(
            identifier=self.identifier,
            progress=self._progress,
            status=self._status,
            busy=self.busy,
        )

    def set_identifier(self, value: str) -> None:
        """Replace the held identifier (e.g. to resume a known session)."""
        self.identity.set_identifier(value)

    # =========================================================================
    # Operations
    # =========================================================================

    async def start_session(self, identifier: str | None = None) -> SyncResult:
        """
        Start or resume a session.

        Uses `identifier` if given, else the held identifier, else a fresh
        one. The chosen identifier becomes the held one before the request
        goes out. Repeated calls are not deduplicated; the service decides
        what a second start means.
        """
        if self.busy:
            return self._refuse_busy("start_session")

        if identifier:
            self.identity.set_identifier(identifier)
        session_id = self.identity.ensure_identifier()

        self._begin(STATUS_CONNECTING)
        try:
            result = await self._start(session_id)
        finally:
            self._phase = SyncPhase.IDLE
        return self._finish(result)

    async def submit_action(self, action: ActionRequest) -> SyncResult:
        """
        Submit one learner decision for the held session.

        Refused locally (no request) when no identifier is held.
        """
        if self.busy:
            return self._refuse_busy(f"submit_action({action})")

        session_id = self.identity.current_identifier()
        if not session_id:
            logger.info(f"Refusing {action}: no session identifier")
            return self._finish(SyncResult(SyncPhase.REFUSED, STATUS_NO_SESSION))

        request = ChoiceRequest.from_action(session_id, action)
        self._begin(STATUS_SUBMITTING)
        try:
            result = await self._submit(request)
        finally:
            self._phase = SyncPhase.IDLE
        return self._finish(result)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _start(self, session_id: str) -> SyncResult:
        try:
            response = await self.client.start_session(session_id)
        except TransportFailure as e:
            logger.warning(f"Session {session_id} failed to start: {e.reason}")
            if e.kind == FailureKind.UNREACHABLE:
                status = STATUS_START_UNREACHABLE
            else:
                status = STATUS_START_FAILED.format(reason=e.reason)
            return SyncResult(SyncPhase.TRANSPORT_FAILED, status)

        progress = self._apply(response.to_progress())
        logger.info(f"Session {session_id} ready")
        return SyncResult(SyncPhase.APPLIED, STATUS_READY, progress)

    async def _submit(self, request: ChoiceRequest) -> SyncResult:
        label = f"{request.module}/{request.action_type}"
        try:
            response = await self.client.submit_choice(request)
        except ServiceRejection as e:
            logger.warning(f"{label} rejected with HTTP {e.status_code}: {e.detail}")
            return SyncResult(SyncPhase.REJECTED, e.detail or STATUS_ERROR)
        except TransportFailure as e:
            logger.warning(f"{label} failed ({e.kind.value}): {e.reason}")
            return SyncResult(SyncPhase.TRANSPORT_FAILED, STATUS_NETWORK_ERROR)

        progress = self._apply(response.to_progress())
        logger.info(f"{label} applied for session {request.session_id}")
        return SyncResult(
            SyncPhase.APPLIED,
            response.outcome_message or STATUS_UPDATED,
            progress,
        )

    def _apply(self, progress: ProgressState) -> ProgressState:
        """Replace local progress with an authoritative snapshot."""
        self._progress = progress
        logger.debug(f"Progress now {progress.to_dict()}")
        return progress

    def _begin(self, status: str) -> None:
        self._phase = SyncPhase.IN_FLIGHT
        self._status = status

    def _finish(self, result: SyncResult) -> SyncResult:
        self._status = result.status
        self.last_result = result
        return result

    def _refuse_busy(self, operation: str) -> SyncResult:
        # The in-flight status stays visible; nothing else changes.
        logger.info(f"Refusing {operation}: another request is in flight")
        return SyncResult(SyncPhase.BUSY, self._status)
