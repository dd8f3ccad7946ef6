class DecisionTreeError(Exception):
    """Base class for errors raised while building or running a decision tree."""


class MalformedActionError(DecisionTreeError):
    """Raised when an action payload is missing its type, has an unknown type, or lacks a required field."""


class MalformedTreeError(DecisionTreeError):
    """Raised when a tree payload is not an object or lacks rootAction."""


class EvaluationError(DecisionTreeError):
    """Raised when a condition expression cannot be evaluated."""


class InvalidTreeStructureError(DecisionTreeError):
    """Raised when a parsed tree fails validation before execution."""

    def __init__(self, message: str = "Invalid decision tree structure") -> None:
        super().__init__(message)
