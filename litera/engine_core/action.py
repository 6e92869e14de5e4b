"""
Action Requests - One learner decision, ready for the scoring service.

An action request is:
1. Which module the decision belongs to (prebunking, ethical, professional)
2. What kind of decision it is (label a post, answer a chat, attempt a task)
3. A JSON-serializable payload the scoring service interprets

Requests are built fresh for each submission and never retried.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ModuleId(Enum):
    """Instructional modules known to the client."""
    PREBUNKING = "prebunking"
    ETHICAL = "ethical"
    PROFESSIONAL = "professional"


class ActionType(Enum):
    """Decision kinds the modules submit."""
    LABEL_POST = "label_post"  # Prebunking: label a post
    CHAT_DECISION = "chat_decision"  # Ethical: respond in a group chat
    TASK_ATTEMPT = "task_attempt"  # Professional: attempt a workplace task


@dataclass(frozen=True)
class ActionRequest:
    """
    A single learner decision.

    Module and action type are plain strings on the wire. The enums above
    are accepted for convenience; unknown strings are passed through so the
    scoring service stays the judge of what is valid.
    """
    module: str
    action_type: str
    payload: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.module, ModuleId):
            object.__setattr__(self, "module", self.module.value)
        if isinstance(self.action_type, ActionType):
            object.__setattr__(self, "action_type", self.action_type.value)
        object.__setattr__(self, "payload", dict(self.payload))

    # Factory methods for the built-in modules

    @classmethod
    def label_post(cls, post_id: str, label: str, truth: str | None = None) -> ActionRequest:
        """Prebunking: label a post. `truth` annotates, it is never scored here."""
        payload: dict[str, Any] = {"post_id": post_id, "label": label}
        if truth is not None:
            payload["truth"] = truth
        return cls(ModuleId.PREBUNKING, ActionType.LABEL_POST, payload)

    @classmethod
    def chat_decision(cls, choice: str) -> ActionRequest:
        """Ethical dilemma: choose how to respond."""
        return cls(ModuleId.ETHICAL, ActionType.CHAT_DECISION, {"choice": choice})

    @classmethod
    def task_attempt(cls, task: str, success: bool) -> ActionRequest:
        """Professional communication: report a task attempt."""
        return cls(
            ModuleId.PROFESSIONAL,
            ActionType.TASK_ATTEMPT,
            {"task": task, "success": success},
        )

    def __str__(self) -> str:
        return f"{self.module}/{self.action_type}"
