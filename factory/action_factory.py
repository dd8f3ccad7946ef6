from typing import Any, Mapping

from pydantic import ValidationError

from models import (
    Action,
    ActionType,
    ConditionAction,
    LoopAction,
    MalformedActionError,
    SendEmailAction,
    SendSmsAction,
)


def _is_missing(payload: Mapping[str, Any], key: str) -> bool:
    return payload.get(key) is None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ActionFactory:
    """
    Rebuilds an Action tree from its JSON form.

    Stateless: every method is a classmethod and children are parsed by
    recursing into from_json, so recursion depth equals tree depth.
    """

    @classmethod
    def from_json(cls, payload: Mapping[str, Any] | None) -> Action:
        """
        Raises MalformedActionError when the payload has no type, an unknown
        type, or is missing a field its type requires.
        """
        if not isinstance(payload, Mapping) or not payload.get("type"):
            raise MalformedActionError("Invalid action JSON: missing type")

        try:
            action_type = ActionType(payload["type"])
        except ValueError:
            raise MalformedActionError(f"Unknown action type: {payload['type']}") from None

        try:
            if action_type is ActionType.SEND_SMS:
                return cls._create_send_sms_action(payload)
            if action_type is ActionType.SEND_EMAIL:
                return cls._create_send_email_action(payload)
            if action_type is ActionType.CONDITION:
                return cls._create_condition_action(payload)
            if action_type is ActionType.LOOP:
                return cls._create_loop_action(payload)
        except ValidationError as e:
            raise MalformedActionError(f"Invalid {action_type.value} action: {e}") from e

        raise MalformedActionError(f"Unknown action type: {action_type.value}")  # pragma: no cover - exhaustive

    @classmethod
    def _create_send_sms_action(cls, payload: Mapping[str, Any]) -> SendSmsAction:
        if _is_missing(payload, "phoneNumber"):
            raise MalformedActionError("SendSmsAction requires phoneNumber")

        return SendSmsAction(
            phone_number=payload["phoneNumber"],
            message=payload.get("message"),
        )

    @classmethod
    def _create_send_email_action(cls, payload: Mapping[str, Any]) -> SendEmailAction:
        if _is_missing(payload, "sender") or _is_missing(payload, "receiver"):
            raise MalformedActionError("SendEmailAction requires sender and receiver")

        return SendEmailAction(
            sender=payload["sender"],
            receiver=payload["receiver"],
            subject=payload.get("subject"),
            body=payload.get("body"),
        )

    @classmethod
    def _create_condition_action(cls, payload: Mapping[str, Any]) -> ConditionAction:
        if _is_missing(payload, "expression"):
            raise MalformedActionError("ConditionAction requires expression")

        condition = ConditionAction(expression=payload["expression"])

        if payload.get("trueAction") is not None:
            condition.set_true_action(cls.from_json(payload["trueAction"]))

        if payload.get("falseAction") is not None:
            condition.set_false_action(cls.from_json(payload["falseAction"]))

        return condition

    @classmethod
    def _create_loop_action(cls, payload: Mapping[str, Any]) -> LoopAction:
        if not _is_number(payload.get("iterations")):
            raise MalformedActionError("LoopAction requires iterations as a number")

        loop = LoopAction(iterations=payload["iterations"])

        if payload.get("action") is not None:
            loop.set_action(cls.from_json(payload["action"]))

        return loop

    @classmethod
    def validate(cls, payload: Mapping[str, Any] | None) -> bool:
        """Parse then validate the root node; any parse failure counts as invalid."""
        try:
            action = cls.from_json(payload)
        except Exception:
            return False
        return action.validate()
