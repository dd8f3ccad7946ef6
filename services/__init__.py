from .decision_tree_service import (
    deserialize_decision_tree,
    execute_decision_tree,
    serialize_decision_tree,
    validate_decision_tree,
)

__all__ = [
    "execute_decision_tree",
    "validate_decision_tree",
    "serialize_decision_tree",
    "deserialize_decision_tree",
]
