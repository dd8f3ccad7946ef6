import logging
import time
from typing import Any, Mapping

from factory import TreePayloadParser
from models import (
    DecisionTree,
    DecisionTreeError,
    ExecutionResult,
    InvalidTreeStructureError,
    ValidationResult,
)
from validations import validate_tree_deep

logger = logging.getLogger(__name__)

TreePayload = Mapping[str, Any] | str


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


def _load_tree(tree_json: TreePayload) -> DecisionTree:
    if isinstance(tree_json, str):
        tree_json = TreePayloadParser().parse(tree_json)
    return DecisionTree.from_json(tree_json)


def _describe(error: Exception, fallback: str) -> str:
    return str(error) or fallback


async def execute_decision_tree(tree_json: TreePayload) -> ExecutionResult:
    """
    Parse, validate and run a decision tree.

    Never raises: every failure becomes ExecutionResult(success=False). The
    elapsed time covers parsing through execution, or up to the failure.
    """
    start = time.perf_counter()

    try:
        tree = _load_tree(tree_json)

        if not tree.validate():
            raise InvalidTreeStructureError()

        await tree.execute()
    except DecisionTreeError as e:
        execution_time = _elapsed_ms(start)
        logger.warning(f"Decision tree execution failed after {execution_time}ms: {e}")
        return ExecutionResult(success=False, execution_time=execution_time, error=_describe(e, "Unknown error occurred"))
    except Exception as e:
        execution_time = _elapsed_ms(start)
        logger.exception(f"Unexpected error executing decision tree after {execution_time}ms")
        return ExecutionResult(success=False, execution_time=execution_time, error=_describe(e, "Unknown error occurred"))

    execution_time = _elapsed_ms(start)
    logger.info(f"Decision tree executed in {execution_time}ms")
    return ExecutionResult(success=True, execution_time=execution_time)


def validate_decision_tree(tree_json: TreePayload, deep: bool = False) -> ValidationResult:
    """
    Parse and validate without executing. Never raises.

    By default only the root action is checked. With deep=True every nested
    action must validate as well.
    """
    try:
        tree = _load_tree(tree_json)

        if deep:
            validate_tree_deep(tree)
        elif not tree.validate():
            return ValidationResult(valid=False, error="Invalid tree structure")
    except Exception as e:
        logger.warning(f"Decision tree validation failed: {e}")
        return ValidationResult(valid=False, error=_describe(e, "Failed to parse decision tree"))

    return ValidationResult(valid=True)


def serialize_decision_tree(tree: DecisionTree) -> dict[str, Any]:
    return tree.to_json()


def deserialize_decision_tree(tree_json: Mapping[str, Any]) -> DecisionTree:
    return DecisionTree.from_json(tree_json)
