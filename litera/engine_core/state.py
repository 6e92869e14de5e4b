"""
Progress State - Immutable snapshot of the learner's standing.

Design principles:
- Authoritative: always exactly what the scoring service last returned
- Immutable: a new snapshot replaces the old one, never patched in place
- Verbatim: meters are not clamped; the service may exceed [0, 100]
- Replace, don't merge: the relationship map is swapped out whole
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union

Meter = Union[int, float]

# Meter attribute -> display label
METER_LABELS: dict[str, str] = {
    "public_trust": "Public Trust",
    "personal_clout": "Personal Clout",
    "professional_skill": "Professional Skill",
}


@dataclass(frozen=True)
class ProgressState:
    """
    The three meters plus the relationship map.

    The defaults are the placeholder shown before any session has been
    started; after that every instance comes from a service response.
    """
    public_trust: Meter = 50
    personal_clout: Meter = 50
    professional_skill: Meter = 0

    # Relationship subject -> opaque value from the service
    relationships: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_snapshot(
        cls,
        public_trust: Meter,
        personal_clout: Meter,
        professional_skill: Meter,
        relationships: dict[str, Any] | None = None,
    ) -> ProgressState:
        """Build a state from service fields; a missing map becomes empty."""
        return cls(
            public_trust=public_trust,
            personal_clout=personal_clout,
            professional_skill=professional_skill,
            relationships=dict(relationships or {}),
        )

    def meters(self) -> dict[str, Meter]:
        """Meter values keyed by attribute name, in display order."""
        return {name: getattr(self, name) for name in METER_LABELS}

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the scoring service's field names."""
        data: dict[str, Any] = self.meters()
        data["relationships"] = dict(self.relationships)
        return data


INITIAL_PROGRESS = ProgressState()
