"""Tests for root-to-match path extraction."""

from __future__ import annotations

import sys

from capresolve.core.resolution import (
    ArtifactPattern,
    Coordinate,
    GraphNode,
    extract_paths,
)


def _node(name: str, *children: GraphNode, group: str = "g") -> GraphNode:
    """Convenience factory for GraphNode instances."""
    return GraphNode(Coordinate(group, name, "1.0"), list(children))


def _names(path) -> list[str]:
    return [node.name for node in path]


class TestExtractPaths:
    """Tests for depth-first path recording."""

    def test_no_match_returns_empty(self) -> None:
        root = _node("a", _node("b"), _node("c"))
        assert extract_paths(root, ArtifactPattern("g:zzz")) == []

    def test_single_chain(self) -> None:
        root = _node("a", _node("b", _node("target")))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert len(paths) == 1
        assert _names(paths[0]) == ["a", "b", "target"]

    def test_last_element_satisfies_predicate(self) -> None:
        root = _node("a", _node("x1", _node("leaf")), _node("x2"))
        pattern = ArtifactPattern("g:x*")
        for path in extract_paths(root, pattern):
            assert pattern.matches(path[-1].coordinate)

    def test_root_can_match(self) -> None:
        root = _node("target", _node("b"))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert [_names(p) for p in paths] == [["target"]]

    def test_shared_subgraph_yields_one_path_per_parent(self) -> None:
        """A diamond reaches the same node twice; both paths are kept."""
        shared = _node("target")
        root = _node("a", _node("b", shared), _node("c", shared))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert [_names(p) for p in paths] == [
            ["a", "b", "target"],
            ["a", "c", "target"],
        ]

    def test_equal_coordinates_at_different_positions(self) -> None:
        """Distinct nodes with equal coordinates are distinct matches."""
        root = _node("a", _node("b", _node("target")), _node("target"))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert len(paths) == 2
        assert paths[0][-1] is not paths[1][-1]
        assert paths[0][-1].coordinate == paths[1][-1].coordinate

    def test_descends_below_match(self) -> None:
        root = _node("a", _node("target", _node("target")))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert [_names(p) for p in paths] == [["a", "target"], ["a", "target", "target"]]

    def test_discovery_order_is_depth_first(self) -> None:
        root = _node(
            "r",
            _node("b1", _node("m1")),
            _node("m2"),
        )
        paths = extract_paths(root, ArtifactPattern("g:m*"))
        assert [p[-1].name for p in paths] == ["m1", "m2"]

    def test_cycle_terminates(self) -> None:
        a = _node("a")
        b = _node("target", a)
        a.add_child(b)
        paths = extract_paths(a, ArtifactPattern("g:target"))
        assert [_names(p) for p in paths] == [["a", "target"]]

    def test_plain_callable_predicate(self) -> None:
        root = _node("a", _node("b"))
        paths = extract_paths(root, lambda c: c.name == "b")
        assert len(paths) == 1

    def test_deep_chain_beyond_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() * 3
        root = node = _node("n0")
        for i in range(1, depth):
            node = node.add_child(_node(f"n{i}"))
        node.add_child(_node("target"))
        paths = extract_paths(root, ArtifactPattern("g:target"))
        assert len(paths) == 1
        assert len(paths[0]) == depth + 1
        assert paths[0][-1].name == "target"


class TestGraphNode:
    """Tests for the GraphNode helpers."""

    def test_walk_visits_shared_node_per_path(self) -> None:
        shared = _node("d")
        root = _node("a", _node("b", shared), _node("c", shared))
        assert [n.name for n in root.walk()] == ["a", "b", "d", "c", "d"]

    def test_walk_stops_at_cycle(self) -> None:
        a = _node("a")
        a.add_child(_node("b", a))
        assert [n.name for n in a.walk()] == ["a", "b"]

    def test_nodes_compare_by_identity(self) -> None:
        assert _node("x") != _node("x")
