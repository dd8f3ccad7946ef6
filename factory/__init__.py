from .action_factory import ActionFactory
from .parser import TreePayloadParser

__all__ = ["ActionFactory", "TreePayloadParser"]
