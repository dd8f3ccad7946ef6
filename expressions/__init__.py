from .evaluator import ExpressionError, ExpressionEvaluator, clear_expression_parse_cache

__all__ = ["ExpressionEvaluator", "ExpressionError", "clear_expression_parse_cache"]
