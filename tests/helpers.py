from typing import Any, Dict, List

from pydantic import Field

from models import Action, ActionType, Context


class RecordingAction(Action):
    """Test double that remembers every context it was executed with."""

    type: ActionType = ActionType.SEND_SMS
    calls: List[Dict[str, Any]] = Field(default_factory=list)
    received: List[Any] = Field(default_factory=list)
    fail_on_call: int | None = None
    mutate_context: bool = False

    async def execute(self, context: Context | None = None) -> None:
        self.received.append(context)
        self.calls.append(dict(context or {}))
        if self.mutate_context and context is not None:
            context["touched"] = True  # type: ignore[index]
        if self.fail_on_call is not None and len(self.calls) - 1 == self.fail_on_call:
            raise RuntimeError(f"failed on call {self.fail_on_call}")

    def validate(self) -> bool:
        return True

    def to_json(self) -> Dict[str, Any]:
        return {"type": "recording"}
