import logging
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError

from .action import Action
from .errors import MalformedTreeError

logger = logging.getLogger(__name__)

_BANNER = "=" * 60


class DecisionTree(BaseModel):
    """A root action plus the context it runs against."""

    model_config = ConfigDict(populate_by_name=True)

    root_action: Action = Field(..., alias="rootAction")
    context: Dict[str, JsonValue] = Field(default_factory=dict, description="Variables visible to expressions")

    async def execute(self) -> None:
        logger.info(_BANNER)
        logger.info("Starting Decision Tree Execution")
        logger.info(_BANNER)

        await self.root_action.execute(self.context)

        logger.info(_BANNER)
        logger.info("Decision Tree Execution Completed")
        logger.info(_BANNER)

    def validate(self) -> bool:
        # Tree validity is root validity; children are not visited.
        return self.root_action.validate()

    def to_json(self) -> Dict[str, Any]:
        return {
            "rootAction": self.root_action.to_json(),
            "context": self.context,
        }

    @classmethod
    def from_json(cls, payload: Mapping[str, Any] | None) -> "DecisionTree":
        from factory import ActionFactory

        if not isinstance(payload, Mapping) or payload.get("rootAction") is None:
            raise MalformedTreeError("Invalid decision tree JSON: missing rootAction")

        context = payload.get("context") or {}
        if not isinstance(context, Mapping):
            raise MalformedTreeError("Invalid decision tree JSON: context must be an object")

        root_action = ActionFactory.from_json(payload["rootAction"])
        try:
            return cls(root_action=root_action, context=dict(context))
        except ValidationError as e:
            raise MalformedTreeError(f"Invalid decision tree JSON: {e}") from e

    def get_root_action(self) -> Action:
        return self.root_action

    def get_context(self) -> Dict[str, Any]:
        return self.context

    def set_context(self, context: Mapping[str, Any]) -> None:
        self.context = dict(context)
