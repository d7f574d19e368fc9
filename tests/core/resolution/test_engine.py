"""Tests for the single-pattern resolution entry point."""

from __future__ import annotations

import dataclasses

import pytest

from capresolve.core.resolution import (
    ArtifactPattern,
    Coordinate,
    GraphNode,
    ResolutionResult,
    UnversionedPolicy,
    resolve,
)
from capresolve.exceptions import CatalogError


def _node(name: str, *children: GraphNode) -> GraphNode:
    """Convenience factory for GraphNode instances."""
    return GraphNode(Coordinate("g", name, "1.0"), list(children))


PUBLIC = {"jsp-2.2", "jsp-2.3", "servlet-4.0", "el-3.0", "mpConfig"}


class TestResolve:
    def test_no_match(self) -> None:
        root = _node("jsp-2.3", _node("impl"))
        result = resolve("g:missing", [root], PUBLIC)
        assert result.resolved_unit is None
        assert result.occurrences is None
        assert result.conflicts is None
        assert result.query_pattern == "g:missing"

    def test_no_roots(self) -> None:
        result = resolve("g:impl", [], PUBLIC)
        assert result == ResolutionResult(query_pattern="g:impl")

    def test_match_without_public_ancestor(self) -> None:
        root = _node("private", _node("impl"))
        assert resolve("g:impl", [root], PUBLIC).resolved_unit is None

    def test_single_unit_has_no_occurrence_map(self) -> None:
        roots = [_node("jsp-2.3", _node("impl")), _node("jsp-2.3", _node("x", _node("impl")))]
        result = resolve("g:impl", roots, PUBLIC)
        assert result.resolved_unit == "jsp-2.3"
        assert result.occurrences is None
        assert result.conflicts is None

    def test_versions_merged_before_selection(self) -> None:
        """jsp-2.2 x2 and jsp-2.3 x1 merge to jsp-2.3 x3, beating servlet x2."""
        roots = [
            _node("jsp-2.2", _node("impl")),
            _node("jsp-2.2", _node("impl")),
            _node("jsp-2.3", _node("impl")),
            _node("servlet-4.0", _node("impl")),
            _node("servlet-4.0", _node("impl")),
        ]
        result = resolve("g:impl", roots, PUBLIC)
        assert result.resolved_unit == "jsp-2.3"
        assert dict(result.occurrences or {}) == {"jsp-2.3": 3, "servlet-4.0": 2}
        assert result.conflicts is None

    def test_conflict_reported(self) -> None:
        roots = [
            _node("servlet-4.0", _node("impl")),
            _node("jsp-2.3", _node("impl")),
        ]
        result = resolve("g:impl", roots, PUBLIC)
        assert set(result.conflicts or ()) == {"servlet-4.0", "jsp-2.3"}
        assert result.resolved_unit == "servlet-4.0"
        assert result.has_conflicts

    def test_paths_from_every_root_combined(self) -> None:
        shared = _node("impl")
        roots = [_node("el-3.0", shared), _node("el-3.0", _node("a", shared))]
        result = resolve("g:impl", roots, PUBLIC)
        assert result.resolved_unit == "el-3.0"

    def test_accepts_artifact_pattern(self) -> None:
        root = _node("jsp-2.3", _node("impl"))
        result = resolve(ArtifactPattern("g:impl"), [root], PUBLIC)
        assert result.query_pattern == "g:impl"
        assert result.resolved_unit == "jsp-2.3"

    def test_unversioned_unit_dropped_by_default(self) -> None:
        root = _node("mpConfig", _node("impl"))
        assert resolve("g:impl", [root], PUBLIC).resolved_unit is None

    def test_unversioned_unit_kept_on_request(self) -> None:
        root = _node("mpConfig", _node("impl"))
        result = resolve("g:impl", [root], PUBLIC, UnversionedPolicy.KEEP)
        assert result.resolved_unit == "mpConfig"

    @pytest.mark.parametrize("public_units", [set(), frozenset(), None])
    def test_missing_public_units_rejected(self, public_units) -> None:
        root = _node("jsp-2.3", _node("impl"))
        with pytest.raises(CatalogError, match="No public capability units"):
            resolve("g:impl", [root], public_units)


class TestResolutionResult:
    def test_immutable(self) -> None:
        result = ResolutionResult(query_pattern="g:a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.resolved_unit = "x"  # type: ignore[misc]

    def test_occurrences_read_only(self) -> None:
        roots = [_node("servlet-4.0", _node("impl")), _node("jsp-2.3", _node("impl"))]
        result = resolve("g:impl", roots, PUBLIC)
        with pytest.raises(TypeError):
            result.occurrences["jsp-2.3"] = 10  # type: ignore[index]

    def test_hashable_with_occurrences(self) -> None:
        roots = [_node("servlet-4.0", _node("impl")), _node("jsp-2.3", _node("impl"))]
        first = resolve("g:impl", roots, PUBLIC)
        second = resolve("g:impl", roots, PUBLIC)
        assert first.occurrences is not None
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_to_dict(self) -> None:
        roots = [_node("servlet-4.0", _node("impl")), _node("jsp-2.3", _node("impl"))]
        result = dataclasses.replace(
            resolve("g:impl", roots, PUBLIC), package_names=frozenset({"b.pkg", "a.pkg"})
        )
        assert result.to_dict() == {
            "query_pattern": "g:impl",
            "resolved_unit": "servlet-4.0",
            "occurrences": {"servlet-4.0": 1, "jsp-2.3": 1},
            "conflicts": ["servlet-4.0", "jsp-2.3"],
            "package_names": ["a.pkg", "b.pkg"],
        }

    def test_to_dict_unresolved(self) -> None:
        assert ResolutionResult(query_pattern="g:a").to_dict() == {
            "query_pattern": "g:a",
            "resolved_unit": None,
            "occurrences": None,
            "conflicts": None,
            "package_names": None,
        }
