from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict


class ActionType(str, Enum):
    SEND_SMS = "send_sms"
    SEND_EMAIL = "send_email"
    CONDITION = "condition"
    LOOP = "loop"


Context = Mapping[str, Any]


class Action(BaseModel, ABC):
    """
    A single executable node of a decision tree.

    Concrete actions pin `type` to their own tag as a frozen field, so it cannot
    change after construction. Composite actions own their children directly.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: ActionType

    @abstractmethod
    async def execute(self, context: Context | None = None) -> None:
        """Run the action. Must not mutate the caller's context."""
        raise NotImplementedError

    @abstractmethod
    def validate(self) -> bool:
        """Structural check of this node only. Never raises."""
        raise NotImplementedError

    @abstractmethod
    def to_json(self) -> Dict[str, Any]:
        """Project back to the wire shape accepted by ActionFactory."""
        raise NotImplementedError
