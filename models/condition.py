import logging
from typing import Any, Dict, Literal

from pydantic import Field

from expressions import ExpressionError, ExpressionEvaluator

from .action import Action, ActionType, Context
from .errors import EvaluationError

logger = logging.getLogger(__name__)

_evaluator = ExpressionEvaluator()


class ConditionAction(Action):
    """
    Branches on a boolean expression evaluated against the context.

    Both branches receive the same context object; a branch with nothing
    attached is a successful no-op.
    """

    type: Literal[ActionType.CONDITION] = Field(default=ActionType.CONDITION, frozen=True)
    expression: str = Field(..., description="Boolean expression over context variable names")
    true_action: Action | None = Field(default=None, alias="trueAction")
    false_action: Action | None = Field(default=None, alias="falseAction")

    async def execute(self, context: Context | None = None) -> None:
        context = {} if context is None else context
        logger.info(f"[CONDITION] Evaluating expression: {self.expression}")

        try:
            result = _evaluator.evaluate(self.expression, context)
        except ExpressionError as e:
            logger.error(f"[CONDITION] Error evaluating expression: {e}")
            raise EvaluationError(f"Failed to evaluate condition: {e}") from e

        logger.info(f"[CONDITION] Result: {result}")

        if result:
            if self.true_action is not None:
                logger.info("[CONDITION] Executing TRUE branch")
                await self.true_action.execute(context)
        elif self.false_action is not None:
            logger.info("[CONDITION] Executing FALSE branch")
            await self.false_action.execute(context)

    def validate(self) -> bool:
        # Children are not checked here; see validations.validate_tree_deep.
        return bool(self.expression)

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "expression": self.expression,
            "trueAction": self.true_action.to_json() if self.true_action is not None else None,
            "falseAction": self.false_action.to_json() if self.false_action is not None else None,
        }

    def set_true_action(self, action: Action) -> None:
        self.true_action = action

    def set_false_action(self, action: Action) -> None:
        self.false_action = action
