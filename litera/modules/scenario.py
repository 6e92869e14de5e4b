"""
Scenario - Static content for one decision point in a module.

A scenario has:
- Content the learner reads
- A fixed list of choice options
- Optionally a ground-truth label, copied into the payload as an
  annotation for the scoring service (never scored locally)

Each option knows the payload it submits, so the presentation layer only
needs (scenario_id, option_id) to build an ActionRequest.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from ..engine_core.action import ActionRequest, ActionType, ModuleId


@dataclass(frozen=True)
class ChoiceOption:
    """One button the learner can press."""
    option_id: str
    label: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Scenario:
    """A decision point with its canonical options."""
    scenario_id: str
    module: ModuleId
    action_type: ActionType
    title: str
    content: str
    options: tuple[ChoiceOption, ...]

    # Ground truth, for modules where correctness is known
    truth: str | None = None

    # Extra display info (source, technique, ...)
    metadata: dict[str, str] = field(default_factory=dict)

    def get_option(self, option_id: str) -> ChoiceOption:
        for option in self.options:
            if option.option_id == option_id:
                return option
        raise KeyError(f"Scenario {self.scenario_id} has no option {option_id!r}")

    @property
    def option_ids(self) -> list[str]:
        return [option.option_id for option in self.options]

    def action_for(self, option_id: str) -> ActionRequest:
        """Build the ActionRequest for choosing `option_id`."""
        option = self.get_option(option_id)
        return ActionRequest(self.module, self.action_type, option.payload)
