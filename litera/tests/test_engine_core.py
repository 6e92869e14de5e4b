"""
Tests for progress state and action requests.
"""

import pytest

from ..engine_core.state import ProgressState, INITIAL_PROGRESS, METER_LABELS
from ..engine_core.action import ActionRequest, ActionType, ModuleId


class TestProgressState:
    """Tests for ProgressState."""

    def test_initial_placeholder(self):
        assert INITIAL_PROGRESS.meters() == {
            "public_trust": 50,
            "personal_clout": 50,
            "professional_skill": 0,
        }
        assert INITIAL_PROGRESS.relationships == {}

    def test_meters_in_display_order(self):
        assert list(INITIAL_PROGRESS.meters()) == list(METER_LABELS)

    def test_snapshot_copies_relationships(self):
        """The state never aliases the map it was built from."""
        source = {"alex": 1}
        state = ProgressState.from_snapshot(50, 50, 0, source)
        source["moderator"] = 2

        assert state.relationships == {"alex": 1}

    def test_immutable(self):
        with pytest.raises(AttributeError):
            INITIAL_PROGRESS.public_trust = 99

    def test_to_dict_uses_wire_names(self):
        state = ProgressState(55, 50, 10, {"alex": 1})

        assert state.to_dict() == {
            "public_trust": 55,
            "personal_clout": 50,
            "professional_skill": 10,
            "relationships": {"alex": 1},
        }


class TestActionRequest:
    """Tests for ActionRequest."""

    def test_enums_become_strings(self):
        action = ActionRequest(ModuleId.ETHICAL, ActionType.CHAT_DECISION, {"choice": "report"})

        assert action.module == "ethical"
        assert action.action_type == "chat_decision"
        assert str(action) == "ethical/chat_decision"

    def test_unknown_strings_pass_through(self):
        action = ActionRequest("bogus", "whatever")

        assert action.module == "bogus"
        assert action.payload == {}

    def test_label_post(self):
        action = ActionRequest.label_post("p1", "hoax", truth="hoax")

        assert action.module == "prebunking"
        assert action.payload == {"post_id": "p1", "label": "hoax", "truth": "hoax"}

    def test_label_post_without_truth(self):
        assert "truth" not in ActionRequest.label_post("p9", "verified").payload

    def test_task_attempt(self):
        action = ActionRequest.task_attempt("meeting", False)

        assert action.module == "professional"
        assert action.action_type == "task_attempt"
        assert action.payload == {"task": "meeting", "success": False}

    def test_payload_is_copied(self):
        payload = {"choice": "intervene"}
        action = ActionRequest("ethical", "chat_decision", payload)
        payload["choice"] = "participate"

        assert action.payload == {"choice": "intervene"}
