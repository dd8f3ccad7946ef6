from .tree_validator import InvalidActionError, iter_actions, validate_tree_deep

__all__ = ["InvalidActionError", "iter_actions", "validate_tree_deep"]
