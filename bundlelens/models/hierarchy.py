from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bundlelens.models.bundle import Module


@dataclass(slots=True)
class HierarchyNode:
    label: str
    size: int = 0
    module: Module | None = None
    children: list[HierarchyNode] | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.label, "size": self.size}
        if self.module is not None:
            payload["moduleId"] = self.module.id
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload
