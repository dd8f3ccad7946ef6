from .action import Action, ActionType, Context
from .condition import ConditionAction
from .decision_tree import DecisionTree
from .errors import (
    DecisionTreeError,
    EvaluationError,
    InvalidTreeStructureError,
    MalformedActionError,
    MalformedTreeError,
)
from .loop import LoopAction
from .results import ExecutionResult, ValidationResult
from .send_email import SendEmailAction
from .send_sms import SendSmsAction

__all__ = [
    "Action",
    "ActionType",
    "Context",
    "SendSmsAction",
    "SendEmailAction",
    "ConditionAction",
    "LoopAction",
    "DecisionTree",
    "ExecutionResult",
    "ValidationResult",
    "DecisionTreeError",
    "MalformedActionError",
    "MalformedTreeError",
    "EvaluationError",
    "InvalidTreeStructureError",
]
