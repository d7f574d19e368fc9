"""Dependency graphs exported as YAML or JSON documents.

Document shape::

    managed:                      # optional, defaults to every root
      - io.openliberty.features:jsp-2.3:21.0.0.3
    roots:
      - coordinate: io.openliberty.features:jsp-2.3:21.0.0.3
        type: pom                 # optional packaging type, default jar
        dependencies:
          - coordinate: com.ibm.websphere.appserver.features:com.ibm.websphere.appserver.jsp-2.3:21.0.0.3
            dependencies:
              - coordinate: com.ibm.ws:com.ibm.ws.jsp.2.3:1.0.57

JSON is accepted as well, since it is a subset of YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from capresolve.core.resolution.coordinate import Coordinate
from capresolve.core.resolution.graph import GraphNode
from capresolve.exceptions import (
    GraphCollectionError,
    GraphDocumentError,
    MalformedCoordinateError,
)
from capresolve.graphs.base import GraphSource


def load_graph_document(path: Path | str) -> dict[str, Any]:
    """Read and validate the top level of a graph document.

    Raises:
        GraphDocumentError: If the file cannot be read or parsed, or lacks a
            ``roots`` list.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphDocumentError(f"Cannot read graph document {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise GraphDocumentError(f"Invalid graph document {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("roots"), list):
        raise GraphDocumentError(
            f"Graph document {path} must be a mapping with a 'roots' list"
        )
    return data


def _node_coordinate(raw: Any) -> Coordinate:
    if not isinstance(raw, dict) or not isinstance(raw.get("coordinate"), str):
        raise MalformedCoordinateError(repr(raw))
    return Coordinate.parse(raw["coordinate"], extension=str(raw.get("type", "jar")))


def _build_node(raw: dict[str, Any]) -> GraphNode:
    node = GraphNode(_node_coordinate(raw))
    children = raw.get("dependencies") or []
    if not isinstance(children, list):
        raise MalformedCoordinateError(repr(children))
    for child in children:
        node.add_child(_build_node(child))
    return node


def managed_dependencies(document: dict[str, Any]) -> list[Coordinate]:
    """Coordinates of the project's managed dependencies.

    Uses the ``managed`` list when present, otherwise the coordinate of every
    root in document order.

    Raises:
        MalformedCoordinateError: If an entry is not ``group:name:version``.
    """
    managed = document.get("managed")
    if managed is None:
        return [_node_coordinate(raw) for raw in document["roots"]]
    return [Coordinate.parse(str(text)) for text in managed]


class DocumentGraphSource(GraphSource):
    """Serves graphs from a loaded graph document.

    Root subtrees are built on demand, so a malformed subtree only fails the
    collection of its own root.
    """

    def __init__(self, document: dict[str, Any]) -> None:
        self._document = document
        self._raw_roots: dict[Coordinate, dict[str, Any]] = {}
        for raw in document["roots"]:
            coordinate = _node_coordinate(raw)
            self._raw_roots.setdefault(coordinate, raw)

    @classmethod
    def from_path(cls, path: Path | str) -> DocumentGraphSource:
        return cls(load_graph_document(path))

    @property
    def managed(self) -> list[Coordinate]:
        return managed_dependencies(self._document)

    def collect(self, coordinate: Coordinate) -> GraphNode:
        raw = self._raw_roots.get(coordinate)
        if raw is None:
            raise GraphCollectionError(coordinate, "not present in graph document")
        try:
            return _build_node(raw)
        except MalformedCoordinateError as exc:
            raise GraphCollectionError(coordinate, str(exc)) from exc


def package_index(document: dict[str, Any]) -> dict[Coordinate, frozenset[str]]:
    """Code packages shipped by artifacts, from the optional ``packages`` map.

    The map is keyed by ``group:name:version`` with a list of package names
    per artifact.

    Raises:
        MalformedCoordinateError: If a key is not ``group:name:version``.
    """
    raw = document.get("packages") or {}
    if not isinstance(raw, dict):
        raise GraphDocumentError("'packages' must map coordinates to package lists")
    return {
        Coordinate.parse(str(key)): frozenset(str(p) for p in (value or []))
        for key, value in raw.items()
    }
