"""Graph Path Extractor: root-to-match paths through a dependency graph."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from capresolve.core.resolution.coordinate import Coordinate
from capresolve.core.resolution.graph import GraphNode, Path

logger = logging.getLogger(__name__)


def extract_paths(
    root: GraphNode, matches: Callable[[Coordinate], bool]
) -> list[Path]:
    """Record the path from *root* to every node whose coordinate matches.

    Performs a depth-first, pre-order traversal. Every reachable node is
    visited once per path that reaches it, so an artifact pulled in through
    several parents yields one path per parent chain; nothing is
    de-duplicated. Traversal continues below a matched node. A node already
    on the current path is not entered again, which keeps cyclic input
    finite. Traversal keeps an explicit stack, so chain depth is not bounded
    by the interpreter recursion limit.

    Args:
        root: The graph root (a declared dependency).
        matches: Predicate over a node's coordinate, typically an
            ``ArtifactPattern``.

    Returns:
        Paths in discovery order, each a tuple from root to matched node
        inclusive. Empty if nothing matches.
    """
    paths: list[Path] = []
    trail: list[GraphNode] = []
    on_trail: set[int] = set()
    pending: list[Iterator[GraphNode]] = []

    node: GraphNode | None = root
    while True:
        if node is not None:
            trail.append(node)
            on_trail.add(id(node))
            if matches(node.coordinate):
                paths.append(tuple(trail))
            pending.append(iter(node.children))
        if not pending:
            break
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            on_trail.discard(id(trail.pop()))
        elif id(node) in on_trail:
            node = None

    logger.debug("Extracted %d path(s) from %s", len(paths), root.coordinate)
    return paths
