from .defaults import create_default_catalog
from .registry import ExampleCatalog, ExampleTree

__all__ = ["ExampleCatalog", "ExampleTree", "create_default_catalog"]
