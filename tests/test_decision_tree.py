"""Tests for DecisionTree"""

import pytest

from models import (
    ConditionAction,
    DecisionTree,
    EvaluationError,
    MalformedActionError,
    MalformedTreeError,
    SendSmsAction,
)
from tests.helpers import RecordingAction


class TestDecisionTree:
    @pytest.mark.asyncio
    async def test_execute_runs_root_with_context(self, recorder, info_logs):
        tree = DecisionTree(root_action=recorder, context={"temperature": 35})

        await tree.execute()

        assert recorder.calls == [{"temperature": 35}]
        assert "Starting Decision Tree Execution" in info_logs.messages
        assert "Decision Tree Execution Completed" in info_logs.messages
        assert "=" * 60 in info_logs.messages

    @pytest.mark.asyncio
    async def test_execute_propagates_errors_unchanged(self, info_logs):
        tree = DecisionTree(root_action=ConditionAction(expression="nope >"))

        with pytest.raises(EvaluationError):
            await tree.execute()

        assert "Decision Tree Execution Completed" not in info_logs.messages

    def test_validate_is_root_validation(self):
        assert DecisionTree(root_action=SendSmsAction(phone_number="+1")).validate() is True
        assert DecisionTree(root_action=SendSmsAction(phone_number="")).validate() is False

    def test_validate_is_shallow(self):
        root = ConditionAction(expression="True", true_action=SendSmsAction(phone_number=""))
        assert DecisionTree(root_action=root).validate() is True

    def test_context_defaults_to_empty(self):
        tree = DecisionTree(root_action=SendSmsAction(phone_number="+1"))
        assert tree.get_context() == {}

    def test_set_context_replaces_mapping(self):
        tree = DecisionTree(root_action=SendSmsAction(phone_number="+1"), context={"a": 1})
        tree.set_context({"b": 2})
        assert tree.get_context() == {"b": 2}

    def test_from_json(self, hot_weather_tree):
        tree = DecisionTree.from_json(hot_weather_tree)

        assert isinstance(tree.get_root_action(), ConditionAction)
        assert tree.get_context() == {"temperature": 35}

    def test_from_json_without_context(self, sms_payload):
        assert DecisionTree.from_json({"rootAction": sms_payload}).context == {}
        assert DecisionTree.from_json({"rootAction": sms_payload, "context": None}).context == {}

    @pytest.mark.parametrize("payload", [None, {}, {"context": {}}, {"rootAction": None}, []])
    def test_from_json_missing_root(self, payload):
        with pytest.raises(MalformedTreeError, match="missing rootAction"):
            DecisionTree.from_json(payload)

    def test_from_json_rejects_non_object_context(self, sms_payload):
        with pytest.raises(MalformedTreeError, match="context must be an object"):
            DecisionTree.from_json({"rootAction": sms_payload, "context": [1, 2]})

    @pytest.mark.parametrize("root", [{}, []])
    def test_from_json_empty_root_is_malformed(self, root):
        with pytest.raises(MalformedActionError, match="missing type"):
            DecisionTree.from_json({"rootAction": root})

    def test_from_json_propagates_action_errors(self):
        with pytest.raises(MalformedActionError):
            DecisionTree.from_json({"rootAction": {"type": "bogus"}})

    def test_round_trip(self, hot_weather_tree):
        tree = DecisionTree.from_json(hot_weather_tree)
        assert DecisionTree.from_json(tree.to_json()).to_json() == tree.to_json()
        assert tree.to_json()["rootAction"]["falseAction"] is None
