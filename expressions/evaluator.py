"""Sandboxed evaluator for condition expressions.

Expressions are written in Python expression syntax against the names of the
context mapping, e.g. ``age >= 18 and country == "NL"``. Parsing is done with
``ast`` and the resulting tree is checked against a small grammar before
simpleeval evaluates it:

- boolean operators (``and``, ``or``, ``not``)
- comparisons, including ``in`` / ``is``
- arithmetic (``+ - * / // % **`` and unary ``+``/``-``)
- conditional expressions (``a if cond else b``)
- names, constants, list/tuple literals and subscripts into context values

Function calls, attribute access, comprehensions and lambdas are rejected.
"""

from __future__ import annotations

import ast
import logging
import time
from functools import lru_cache
from typing import Any, Mapping

from simpleeval import EvalWithCompoundTypes, InvalidExpression

logger = logging.getLogger(__name__)


_ALLOWED_NODES: tuple[type[ast.AST], ...] = (
    ast.Expression,
    # Logic
    ast.BoolOp,
    ast.And,
    ast.Or,
    ast.UnaryOp,
    ast.Not,
    ast.USub,
    ast.UAdd,
    # Comparison
    ast.Compare,
    ast.Eq,
    ast.NotEq,
    ast.Lt,
    ast.LtE,
    ast.Gt,
    ast.GtE,
    ast.In,
    ast.NotIn,
    ast.Is,
    ast.IsNot,
    # Arithmetic
    ast.BinOp,
    ast.Add,
    ast.Sub,
    ast.Mult,
    ast.Div,
    ast.FloorDiv,
    ast.Mod,
    ast.Pow,
    # Operands
    ast.IfExp,
    ast.Name,
    ast.Load,
    ast.Constant,
    ast.Subscript,
    ast.List,
    ast.Tuple,
)


class ExpressionError(ValueError):
    """Raised when an expression is rejected or fails to evaluate."""


@lru_cache(maxsize=256)
def _parse_expression(expression: str) -> ast.Expression:
    """Parse an expression string into an AST.

    Cached so a condition evaluated once per loop iteration is parsed once.

    Raises:
        SyntaxError: If expression has invalid syntax.
    """
    return ast.parse(expression, mode="eval")


def _check_grammar(tree: ast.Expression) -> None:
    for node in ast.walk(tree):
        if not isinstance(node, _ALLOWED_NODES):
            raise ExpressionError(f"Unsupported syntax in expression: {type(node).__name__}")


class ExpressionEvaluator:
    """Evaluates boolean expressions against a context mapping.

    Only the context's keys resolve as names; ``True``/``False``/``None`` are
    literals. No functions are exposed.
    """

    def __init__(self, enable_timing: bool = False) -> None:
        """
        Args:
            enable_timing: If True, log evaluation timing at DEBUG level.
        """
        self._enable_timing = enable_timing

    def check(self, expression: str) -> None:
        """Raise ExpressionError if the expression does not parse or leaves the grammar."""
        expression = expression.strip()
        if not expression:
            raise ExpressionError("Expression cannot be empty")

        try:
            tree = _parse_expression(expression)
        except (SyntaxError, ValueError) as e:
            # ValueError: source contains null bytes
            logger.warning(f"Invalid expression syntax: {expression[:50]!r}")
            raise ExpressionError(f"Invalid expression: {expression[:200]}") from e
        except (RecursionError, MemoryError) as e:
            logger.warning(f"Expression too deeply nested: {expression[:50]!r}")
            raise ExpressionError("Invalid expression: nested too deeply") from e

        try:
            _check_grammar(tree)
        except ExpressionError:
            logger.warning(f"Blocked unsupported construct in expression: {expression[:50]!r}")
            raise

    def evaluate(self, expression: str, context: Mapping[str, Any]) -> bool:
        """Evaluate an expression against the given context.

        Args:
            expression: The expression string to evaluate.
            context: Variables visible to the expression, by name.

        Returns:
            The result coerced with ``bool()``.

        Raises:
            ExpressionError: If expression is invalid or evaluation fails.
        """
        start_time = time.perf_counter() if self._enable_timing else None

        self.check(expression)
        expression = expression.strip()

        evaluator = EvalWithCompoundTypes()
        evaluator.functions = {}
        evaluator.names = dict(context)

        try:
            result = evaluator.eval(expression)
        except InvalidExpression as e:
            # NameNotDefined and FeatureNotAvailable both land here
            logger.warning(f"Invalid expression {expression!r}: {e}")
            raise ExpressionError(f"Invalid expression: {e}") from e
        except (TypeError, KeyError, IndexError) as e:
            logger.warning(f"Error evaluating expression {expression!r}: {e}")
            raise ExpressionError(f"Evaluation error: {e}") from e
        except ZeroDivisionError as e:
            logger.warning(f"Division by zero in expression {expression!r}")
            raise ExpressionError(f"Division by zero: {e}") from e
        except Exception as e:
            logger.warning(f"Unexpected error evaluating expression {expression!r}: {e}")
            raise ExpressionError(f"Evaluation error: {e}") from e

        bool_result = bool(result)

        if start_time is not None:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(f"Expression evaluation: {elapsed_ms:.3f}ms (expr: {expression[:50]}, result: {bool_result})")

        return bool_result


def clear_expression_parse_cache() -> None:
    """Clear the expression parse cache."""
    _parse_expression.cache_clear()


__all__ = [
    "ExpressionEvaluator",
    "ExpressionError",
    "clear_expression_parse_cache",
]
