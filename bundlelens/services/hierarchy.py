from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bundlelens.models.bundle import Module
from bundlelens.models.hierarchy import HierarchyNode

ROOT_LABEL = "root"


@dataclass(slots=True)
class _Draft:
    """Mutable grouping node used while folding modules in by path."""

    label: str
    module: Module | None = None
    children: dict[str, _Draft] = field(default_factory=dict)


def build_hierarchy(modules: Sequence[Module], root_label: str = ROOT_LABEL) -> HierarchyNode | None:
    """Group *modules* into a tree keyed by their path segments.

    Only leaves carry a size; summing them into parents is left to the layout
    consumer (see ``node_value``).  Two modules with the same full path
    collapse into one leaf and the later module wins.
    """
    if not modules:
        return None

    root = _Draft(root_label)
    for module in modules:
        current = root
        for part in module.path or (module.name,):
            child = current.children.get(part)
            if child is None:
                child = _Draft(part)
                current.children[part] = child
            current = child
        current.module = module

    return _convert(root)


def _convert(draft: _Draft) -> HierarchyNode:
    module = draft.module
    if not draft.children:
        return HierarchyNode(label=draft.label, size=module.size if module else 0, module=module)

    children: list[HierarchyNode] = []
    # A module whose path ends where other paths continue becomes the first
    # child leaf, so intermediate nodes never own a module.
    if module is not None:
        children.append(HierarchyNode(label=draft.label, size=module.size, module=module))
    children.extend(_convert(child) for child in draft.children.values())
    return HierarchyNode(label=draft.label, children=children)


def iter_leaves(root: HierarchyNode) -> Iterator[HierarchyNode]:
    """Yield the leaves under *root* depth-first, in child order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        stack.extend(reversed(node.children or []))


def node_value(node: HierarchyNode) -> int:
    """Sum of leaf sizes under *node*, the weight a treemap layout assigns it."""
    return sum(leaf.size for leaf in iter_leaves(node))
