import logging
from typing import Any, Dict, Literal

from pydantic import Field

from .action import Action, ActionType, Context

logger = logging.getLogger(__name__)


class LoopAction(Action):
    """
    Runs its inner action `iterations` times, one after another.

    Every iteration gets a fresh shallow copy of the context extended with
    `loopIndex` (0-based) and `loopIteration` (1-based). The first failing
    iteration stops the loop and its error propagates.
    """

    type: Literal[ActionType.LOOP] = Field(default=ActionType.LOOP, frozen=True)
    iterations: int | float = Field(..., description="Number of times to run the inner action")
    action: Action | None = None

    async def execute(self, context: Context | None = None) -> None:
        context = {} if context is None else context
        logger.info(f"[LOOP] Starting loop for {self.iterations} iterations")

        if self.action is None:
            logger.info("[LOOP] No action to execute")
            return

        total = int(self.iterations) if self.validate() else 0
        for index in range(total):
            logger.info(f"[LOOP] Iteration {index + 1}/{total}")
            loop_context = {
                **context,
                "loopIndex": index,
                "loopIteration": index + 1,
            }
            await self.action.execute(loop_context)

        logger.info(f"[LOOP] Completed {total} iterations")

    def validate(self) -> bool:
        iterations = self.iterations
        if isinstance(iterations, bool):
            return False
        if isinstance(iterations, float) and not iterations.is_integer():
            return False
        return iterations >= 1

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "iterations": self.iterations,
            "action": self.action.to_json() if self.action is not None else None,
        }

    def set_action(self, action: Action) -> None:
        self.action = action
