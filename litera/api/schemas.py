"""
Pydantic Schemas - Wire contract with the scoring service.

    POST /api/start    StartSessionRequest  -> ProgressResponse
    POST /api/choice   ChoiceRequest        -> ChoiceResponse | ErrorBody

Responses are validated before anything touches local state, so a
malformed body is reported as a failure instead of half-applied.
Unknown response fields are ignored.
"""

from typing import Optional, Any, Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt

from ..engine_core.state import ProgressState
from ..engine_core.action import ActionRequest

# No coercion: "55" and true are malformed meters, not 55 and 1.
WireMeter = Union[StrictInt, StrictFloat]


# =============================================================================
# Requests
# =============================================================================

class StartSessionRequest(BaseModel):
    """Body of POST /api/start."""
    session_id: str = Field(min_length=1)


class ChoiceRequest(BaseModel):
    """Body of POST /api/choice."""
    session_id: str = Field(min_length=1)
    module: str
    action_type: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_action(cls, session_id: str, action: ActionRequest) -> "ChoiceRequest":
        """Attach the held session identifier to a learner action."""
        return cls(
            session_id=session_id,
            module=action.module,
            action_type=action.action_type,
            payload=action.payload,
        )


# =============================================================================
# Responses
# =============================================================================

class ProgressResponse(BaseModel):
    """Authoritative progress snapshot returned on success."""
    public_trust: WireMeter
    personal_clout: WireMeter
    professional_skill: WireMeter
    relationships: Optional[dict[str, Any]] = None

    def to_progress(self) -> ProgressState:
        """Convert to the local snapshot type (missing map -> empty map)."""
        return ProgressState.from_snapshot(
            public_trust=self.public_trust,
            personal_clout=self.personal_clout,
            professional_skill=self.professional_skill,
            relationships=self.relationships,
        )


class Outcome(BaseModel):
    """Human-readable outcome attached to a scored choice."""
    message: Optional[str] = None

    model_config = {"extra": "allow"}


class ChoiceResponse(ProgressResponse):
    """Success body of POST /api/choice."""
    outcome: Optional[Outcome] = None

    @property
    def outcome_message(self) -> Optional[str]:
        """The outcome message, or None if absent or blank."""
        if self.outcome and self.outcome.message:
            return self.outcome.message
        return None


class ErrorBody(BaseModel):
    """Error body of a non-2xx response. `detail` may be any JSON value."""
    detail: Optional[Any] = None

    model_config = {"extra": "allow"}

    @property
    def detail_message(self) -> Optional[str]:
        """The detail if it is a non-empty string, else None."""
        if isinstance(self.detail, str) and self.detail:
            return self.detail
        return None
