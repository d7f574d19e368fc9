"""Graph source interface and fault-tolerant root collection."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from capresolve.core.resolution.coordinate import Coordinate
from capresolve.core.resolution.graph import GraphNode
from capresolve.exceptions import GraphCollectionError

logger = logging.getLogger(__name__)


class GraphSource(ABC):
    """Supplies the collected dependency graph of one root artifact."""

    @property
    def managed(self) -> list[Coordinate]:
        """Root artifacts this source knows to be managed by the project."""
        return []

    @abstractmethod
    def collect(self, coordinate: Coordinate) -> GraphNode:
        """Return the dependency graph rooted at *coordinate*.

        Raises:
            GraphCollectionError: If the graph cannot be collected.
        """


def collect_roots(
    source: GraphSource, coordinates: Iterable[Coordinate]
) -> list[GraphNode]:
    """Collect one graph per coordinate, skipping the ones that fail.

    A failure for one artifact is logged as a warning and the remaining
    artifacts are still collected, so a query degrades to fewer paths
    instead of aborting.

    Args:
        source: Where graphs come from.
        coordinates: Root artifacts, typically the managed dependencies.

    Returns:
        The collected roots, in the order of *coordinates*.
    """
    roots: list[GraphNode] = []
    for coordinate in coordinates:
        try:
            root = source.collect(coordinate)
        except GraphCollectionError as exc:
            logger.warning("%s", exc)
            continue
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Collected %s: %s",
                coordinate, " ".join(n.name for n in root.walk()),
            )
        roots.append(root)
    return roots
