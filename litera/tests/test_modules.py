"""
Tests for module content (scenarios and options).
"""

import pytest

from ..engine_core.action import ActionType, ModuleId
from ..modules import (
    ALL_SCENARIOS,
    PREBUNK_CHOCOLATE,
    ETHICAL_ACCENT_JOKES,
    PROFESSIONAL_MEETING,
    get_scenario,
    scenarios_for_module,
)


class TestCatalog:
    """Tests for the scenario catalog."""

    def test_one_scenario_per_module(self):
        modules = {scenario.module for scenario in ALL_SCENARIOS.values()}
        assert modules == set(ModuleId)

    def test_get_scenario(self):
        assert get_scenario("e1") is ETHICAL_ACCENT_JOKES

    def test_unknown_scenario(self):
        with pytest.raises(KeyError):
            get_scenario("zzz")

    def test_scenarios_for_module(self):
        assert scenarios_for_module("professional") == [PROFESSIONAL_MEETING]
        assert scenarios_for_module(ModuleId.PREBUNKING) == [PREBUNK_CHOCOLATE]


class TestPrebunking:
    """Tests for the prebunking scenario."""

    def test_options(self):
        assert PREBUNK_CHOCOLATE.option_ids == ["verified", "misleading", "hoax"]
        assert PREBUNK_CHOCOLATE.metadata["source"] == "health-tips-now.biz"

    @pytest.mark.parametrize("label", ["verified", "misleading", "hoax"])
    def test_truth_is_annotation_on_every_label(self, label):
        """Ground truth rides along with every label, right or wrong."""
        action = PREBUNK_CHOCOLATE.action_for(label)

        assert action.action_type == ActionType.LABEL_POST.value
        assert action.payload == {"post_id": "p1", "label": label, "truth": "hoax"}


class TestEthical:
    """Tests for the ethical dilemma scenario."""

    def test_choice_payload(self):
        action = ETHICAL_ACCENT_JOKES.action_for("stay_silent")

        assert action.module == "ethical"
        assert action.action_type == "chat_decision"
        assert action.payload == {"choice": "stay_silent"}

    def test_unknown_option(self):
        with pytest.raises(KeyError):
            ETHICAL_ACCENT_JOKES.action_for("shrug")


class TestProfessional:
    """Tests for the professional communication scenario."""

    def test_same_task_different_success(self):
        success = PROFESSIONAL_MEETING.action_for("refocus")
        failure = PROFESSIONAL_MEETING.action_for("end_meeting")

        assert success.payload == {"task": "meeting", "success": True}
        assert failure.payload == {"task": "meeting", "success": False}
