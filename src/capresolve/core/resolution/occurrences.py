"""Nearest-Public-Ancestor Resolver.

For each root-to-match path, walks from the matched dependency back toward
the declared root and credits the first public capability unit it meets.
Public units further up the same path are ignored parents: they are logged
but never counted, so each path contributes at most one occurrence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Set

from capresolve.core.resolution.graph import GraphNode, Path

logger = logging.getLogger(__name__)


def nearest_public_ancestor(
    path: Path, public_units: Set[str]
) -> GraphNode | None:
    """Return the node nearest the matched end whose name is a public unit.

    Args:
        path: A root-to-match path.
        public_units: Names of publicly requestable capability units.

    Returns:
        The nearest public node, or None if the path holds none.
    """
    for node in reversed(path):
        if node.name in public_units:
            return node
    return None


def resolve_occurrences(
    paths: Iterable[Path], public_units: Set[str]
) -> dict[str, int]:
    """Tally one occurrence per path against its nearest public ancestor.

    Args:
        paths: Root-to-match paths, typically from ``extract_paths``.
        public_units: Names of publicly requestable capability units.

    Returns:
        Mapping of unit name to the number of paths that resolved to it, in
        first-seen order. Paths without any public unit contribute nothing.
    """
    tally: dict[str, int] = {}
    for index, path in enumerate(paths, start=1):
        node = nearest_public_ancestor(path, public_units)
        if node is None:
            logger.debug("Path %d: no public unit on path", index)
            continue
        tally[node.name] = tally.get(node.name, 0) + 1
        logger.debug("Path %d: found public unit %s", index, node.name)
        for parent in reversed(path[: path.index(node)]):
            if parent.name in public_units:
                logger.debug("Path %d: ignoring parent %s", index, parent.name)
    return tally
