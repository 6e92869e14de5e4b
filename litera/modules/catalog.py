"""
Module Catalog - The built-in scenarios for the three modules.

Module 1 - Prebunking: spot the manipulation in a post
Module 2 - Ethical dilemma: respond to cyberbullying in a class chat
Module 3 - Professional communication: rescue an off-track meeting

Content only. What each choice is worth is decided by the scoring service.
"""

from __future__ import annotations

from ..engine_core.action import ActionType, ModuleId
from .scenario import ChoiceOption, Scenario

PREBUNK_LABELS = ("verified", "misleading", "hoax")


def _prebunk_post(
    post_id: str,
    content: str,
    source: str,
    technique: str,
    truth: str,
) -> Scenario:
    options = tuple(
        ChoiceOption(
            option_id=label,
            label=label.capitalize(),
            payload={"post_id": post_id, "label": label, "truth": truth},
        )
        for label in PREBUNK_LABELS
    )
    return Scenario(
        scenario_id=post_id,
        module=ModuleId.PREBUNKING,
        action_type=ActionType.LABEL_POST,
        title="Prebunking: Spot the Manipulation",
        content=content,
        options=options,
        truth=truth,
        metadata={"source": source, "technique": technique},
    )


PREBUNK_CHOCOLATE = _prebunk_post(
    post_id="p1",
    content=(
        "BREAKING: Famous doctor says chocolate cures all diseases! "
        "Share NOW before it gets deleted!"
    ),
    source="health-tips-now.biz",
    technique="emotion/urgency",
    truth="hoax",
)

ETHICAL_ACCENT_JOKES = Scenario(
    scenario_id="e1",
    module=ModuleId.ETHICAL,
    action_type=ActionType.CHAT_DECISION,
    title="Ethical Dilemma: Cyberbullying",
    content=(
        "Class group chat: A few classmates start making jokes about "
        "Alex's accent during a voice note."
    ),
    options=tuple(
        ChoiceOption(option_id=key, label=label, payload={"choice": key})
        for key, label in (
            ("intervene", "Step in and call it out respectfully"),
            ("report", "Privately report to the teacher/moderator"),
            ("stay_silent", "Stay silent and hope it stops"),
            ("participate", "Join in with a joke"),
        )
    ),
)

# Both options attempt the same task; only the reported success differs.
PROFESSIONAL_MEETING = Scenario(
    scenario_id="pro1",
    module=ModuleId.PROFESSIONAL,
    action_type=ActionType.TASK_ATTEMPT,
    title="Professional Communication",
    content=(
        "Virtual meeting is going off-track. Two teammates are arguing. "
        "You need a decision in 5 minutes."
    ),
    options=(
        ChoiceOption(
            option_id="refocus",
            label="Refocus with an agenda + action items",
            payload={"task": "meeting", "success": True},
        ),
        ChoiceOption(
            option_id="end_meeting",
            label="Ignore conflict and end meeting",
            payload={"task": "meeting", "success": False},
        ),
    ),
)

ALL_SCENARIOS: dict[str, Scenario] = {
    scenario.scenario_id: scenario
    for scenario in (PREBUNK_CHOCOLATE, ETHICAL_ACCENT_JOKES, PROFESSIONAL_MEETING)
}


def get_scenario(scenario_id: str) -> Scenario:
    """Look up a scenario by id. Raises KeyError if unknown."""
    try:
        return ALL_SCENARIOS[scenario_id]
    except KeyError:
        raise KeyError(f"Unknown scenario: {scenario_id!r}") from None


def scenarios_for_module(module: ModuleId | str) -> list[Scenario]:
    """All scenarios belonging to a module, in catalog order."""
    module_id = ModuleId(module)
    return [s for s in ALL_SCENARIOS.values() if s.module == module_id]
