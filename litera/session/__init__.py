"""
Session Module - The learner's session and its synchronization.

A session is one learner's progress on the scoring service:
- Identified by a client-generated (or re-entered) identifier
- Started/resumed with a start request
- Advanced one learner decision at a time
- Never deleted client-side; re-entering the identifier resumes it

All progress shown locally is a snapshot from the scoring service.
"""

from .identity import SessionIdentity, generate_identifier
from .sync import ScoringSyncEngine, SyncPhase, SyncResult, EngineView

__all__ = [
    "SessionIdentity",
    "generate_identifier",
    "ScoringSyncEngine",
    "SyncPhase",
    "SyncResult",
    "EngineView",
]
