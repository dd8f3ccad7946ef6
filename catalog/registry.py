from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable


@dataclass
class ExampleTree:
    name: str
    description: str
    tree: Dict[str, Any]
    note: str | None = None

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "tree": deepcopy(self.tree),
        }
        if self.note:
            payload["note"] = self.note
        return payload


@dataclass
class ExampleCatalog:
    name: str
    items: Dict[str, ExampleTree] = field(default_factory=dict)

    def register(self, name: str, description: str, tree: Dict[str, Any], note: str | None = None) -> None:
        self.items[name] = ExampleTree(name=name, description=description, tree=tree, note=note)

    def get(self, name: str) -> ExampleTree | None:
        return self.items.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.items

    def all(self) -> Iterable[ExampleTree]:
        return self.items.values()
