from typing import Iterator, Tuple

from models import Action, ConditionAction, DecisionTree, LoopAction


class InvalidActionError(ValueError):
    """Raised when an action anywhere in the tree fails its own validate()."""

    def __init__(self, path: str, action: Action) -> None:
        super().__init__(f"Invalid {action.type.value} action at {path}")
        self.path = path
        self.action = action


def iter_actions(action: Action, path: str = "rootAction") -> Iterator[Tuple[str, Action]]:
    """Yield (path, action) for the action and every descendant, depth first."""
    yield path, action

    if isinstance(action, ConditionAction):
        if action.true_action is not None:
            yield from iter_actions(action.true_action, f"{path}.trueAction")
        if action.false_action is not None:
            yield from iter_actions(action.false_action, f"{path}.falseAction")
    elif isinstance(action, LoopAction):
        if action.action is not None:
            yield from iter_actions(action.action, f"{path}.action")


def validate_tree_deep(tree: DecisionTree) -> DecisionTree:
    """
    Validate every node of the tree, not only the root.
    Raises InvalidActionError naming the first invalid node.
    """
    for path, action in iter_actions(tree.root_action):
        if not action.validate():
            raise InvalidActionError(path, action)
    return tree
