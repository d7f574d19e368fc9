"""Resolution entry point: from a dependency pattern to one public unit.

Chains the four resolution stages for a single query::

    extract_paths -> resolve_occurrences -> aggregate_by_base_name -> select

Each call owns its own tally; the graph roots and the public-unit set are
only read, so independent patterns may be resolved concurrently against the
same inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from capresolve.core.resolution.coordinate import ArtifactPattern
from capresolve.core.resolution.graph import GraphNode, Path
from capresolve.core.resolution.occurrences import resolve_occurrences
from capresolve.core.resolution.paths import extract_paths
from capresolve.core.resolution.selector import select
from capresolve.core.resolution.versions import (
    UnversionedPolicy,
    aggregate_by_base_name,
)
from capresolve.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """The public capability unit inferred for one dependency pattern.

    Attributes:
        query_pattern: The dependency pattern that was resolved.
        resolved_unit: The unit with the most occurrences, or None when no
            path reached a public unit.
        occurrences: Aggregated counts per unit, present only when more than
            one distinct unit was observed.
        conflicts: Units tied at the highest count, present only when two or
            more tie.
        package_names: Optional enrichment filled in by the caller, such as
            the code packages shipped by the matched artifact.
    """

    query_pattern: str
    resolved_unit: str | None = None
    occurrences: Mapping[str, int] | None = field(default=None, hash=False)
    conflicts: tuple[str, ...] | None = None
    package_names: frozenset[str] | None = None

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "query_pattern": self.query_pattern,
            "resolved_unit": self.resolved_unit,
            "occurrences": dict(self.occurrences) if self.occurrences else None,
            "conflicts": list(self.conflicts) if self.conflicts else None,
            "package_names": (
                sorted(self.package_names) if self.package_names else None
            ),
        }


def _collect_paths(
    pattern: ArtifactPattern, roots: Iterable[GraphNode]
) -> list[Path]:
    paths: list[Path] = []
    for root in roots:
        found = extract_paths(root, pattern)
        if not found:
            logger.debug("No paths to %s under %s", pattern, root.coordinate)
        paths.extend(found)
    return paths


def resolve(
    pattern: str | ArtifactPattern,
    roots: Iterable[GraphNode],
    public_units: Set[str] | None,
    unversioned: UnversionedPolicy = UnversionedPolicy.DROP,
) -> ResolutionResult:
    """Infer the public capability unit implied by a dependency pattern.

    Args:
        pattern: Inclusion pattern selecting the dependency of interest
            (e.g. ``com.ibm.ws:com.ibm.ws.jsp.2.3::1.0.57``).
        roots: One graph root per managed artifact examined.
        public_units: Names of publicly requestable capability units.
        unversioned: Aggregation policy for units without a version suffix.

    Returns:
        A ``ResolutionResult``. A pattern that matches nothing, or whose
        paths hold no public unit, yields ``resolved_unit=None``.

    Raises:
        CatalogError: If *public_units* is None or empty, since no path
            could then be credited to any unit.
    """
    if not public_units:
        raise CatalogError("No public capability units to resolve against")
    if isinstance(pattern, str):
        pattern = ArtifactPattern(pattern)

    paths = _collect_paths(pattern, roots)
    tally = resolve_occurrences(paths, public_units)
    tally = aggregate_by_base_name(tally, unversioned)
    selection = select(tally)

    if len(tally) > 1:
        logger.info(
            "Dependency [%s] -> Unit [%s]. Occurrences: %s",
            pattern, selection.resolved_unit, tally,
        )
        return ResolutionResult(
            query_pattern=str(pattern),
            resolved_unit=selection.resolved_unit,
            occurrences=MappingProxyType(dict(tally)),
            conflicts=selection.conflicts,
        )

    logger.info("Dependency [%s] -> Unit [%s]", pattern, selection.resolved_unit)
    return ResolutionResult(
        query_pattern=str(pattern), resolved_unit=selection.resolved_unit
    )
