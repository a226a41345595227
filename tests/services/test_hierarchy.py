from __future__ import annotations

from bundlelens.models.hierarchy import HierarchyNode
from bundlelens.services.hierarchy import build_hierarchy, iter_leaves, node_value
from tests.factories import make_module


def _iter_all(root: HierarchyNode) -> list[HierarchyNode]:
    nodes = [root]
    for child in root.children or []:
        nodes.extend(_iter_all(child))
    return nodes


class TestBuildHierarchy:
    def test_empty_returns_none(self) -> None:
        assert build_hierarchy([]) is None

    def test_groups_by_path(self) -> None:
        a = make_module("src/a.js", 10)
        b = make_module("src/lib/b.js", 20)
        c = make_module("node_modules/react/index.js", 30)
        root = build_hierarchy([a, b, c])
        assert root is not None
        assert root.label == "root"
        assert [child.label for child in root.children or []] == ["src", "node_modules"]

        src = (root.children or [])[0]
        assert src.module is None
        assert src.size == 0
        assert [child.label for child in src.children or []] == ["a.js", "lib"]

    def test_every_module_is_exactly_one_leaf(self) -> None:
        modules = [make_module(f"pkg{i % 3}/dir{i % 2}/file{i}.js", i * 10) for i in range(12)]
        root = build_hierarchy(modules)
        assert root is not None
        leaves = list(iter_leaves(root))
        assert sorted(leaf.module.id for leaf in leaves if leaf.module) == sorted(m.id for m in modules)
        assert all(leaf.module is not None and leaf.children is None for leaf in leaves)
        assert all(leaf.size == leaf.module.size for leaf in leaves if leaf.module)

    def test_intermediate_nodes_have_no_module(self) -> None:
        root = build_hierarchy([make_module("a/b/c.js", 1), make_module("a/d.js", 2)])
        assert root is not None
        for node in _iter_all(root):
            if node.children:
                assert node.module is None
            else:
                assert node.module is not None

    def test_same_path_last_write_wins(self) -> None:
        first = make_module("src/a.js", 10, module_id="first")
        second = make_module("src/a.js", 99, module_id="second")
        root = build_hierarchy([first, second])
        assert root is not None
        leaves = list(iter_leaves(root))
        assert len(leaves) == 1
        assert leaves[0].module is second
        assert leaves[0].size == 99

    def test_module_on_prefix_path_becomes_first_child_leaf(self) -> None:
        parent = make_module("src", 5)
        child = make_module("src/a.js", 7)
        root = build_hierarchy([parent, child])
        assert root is not None
        (src,) = root.children or []
        assert src.module is None
        assert [(n.label, n.module) for n in src.children or []] == [("src", parent), ("a.js", child)]

    def test_custom_root_label(self) -> None:
        root = build_hierarchy([make_module("x.js", 1)], root_label="bundle")
        assert root is not None
        assert root.label == "bundle"


class TestNodeValue:
    def test_sums_leaves(self) -> None:
        root = build_hierarchy([make_module("a/b.js", 10), make_module("a/c/d.js", 5), make_module("e.js", 1)])
        assert root is not None
        assert root.size == 0
        assert node_value(root) == 16
        assert node_value((root.children or [])[0]) == 15

    def test_to_dict_shape(self) -> None:
        root = build_hierarchy([make_module("a/b.js", 10)])
        assert root is not None
        assert root.to_dict() == {
            "name": "root",
            "size": 0,
            "children": [{"name": "a", "size": 0, "children": [{"name": "b.js", "size": 10, "moduleId": "a/b.js"}]}],
        }
