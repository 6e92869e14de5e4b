"""
Engine Core - Local mirror of the learner's progress.

The core holds:
1. ProgressState - the last authoritative snapshot from the scoring service
2. ActionRequest - one learner decision, ready to be submitted

Nothing here computes scores. State only changes by wholesale replacement
with a snapshot the scoring service returned.
"""

from .state import ProgressState, METER_LABELS, INITIAL_PROGRESS
from .action import ActionRequest, ModuleId, ActionType

__all__ = [
    "ProgressState",
    "METER_LABELS",
    "INITIAL_PROGRESS",
    "ActionRequest",
    "ModuleId",
    "ActionType",
]
