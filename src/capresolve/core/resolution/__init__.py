"""Public capability-unit resolution over dependency graphs.

Given the dependency graph of a project's managed artifacts and the set of
publicly requestable capability units, infers which public unit a build
should request for an internal implementation artifact.

Stages
------
- ``paths``: root-to-match path extraction.
- ``occurrences``: nearest public ancestor per path, one count per path.
- ``versions``: merge of same-named units across versions.
- ``selector``: most common unit and tie detection.
- ``membership``: declared units not yet active in the runtime.

All public names are re-exported here::

    from capresolve.core.resolution import resolve, GraphNode, Coordinate
"""

from capresolve.core.resolution.coordinate import ArtifactPattern, Coordinate
from capresolve.core.resolution.engine import ResolutionResult, resolve
from capresolve.core.resolution.graph import GraphNode, Path
from capresolve.core.resolution.membership import (
    DEFAULT_UNIT_GROUP,
    missing_active_units,
    units_from_dependencies,
    visible_units,
)
from capresolve.core.resolution.occurrences import (
    nearest_public_ancestor,
    resolve_occurrences,
)
from capresolve.core.resolution.paths import extract_paths
from capresolve.core.resolution.selector import Selection, select
from capresolve.core.resolution.versions import (
    UnversionedPolicy,
    aggregate_by_base_name,
    split_unit,
    version_key,
)

__all__ = [
    "ArtifactPattern",
    "Coordinate",
    "DEFAULT_UNIT_GROUP",
    "GraphNode",
    "Path",
    "ResolutionResult",
    "Selection",
    "UnversionedPolicy",
    "aggregate_by_base_name",
    "extract_paths",
    "missing_active_units",
    "nearest_public_ancestor",
    "resolve",
    "resolve_occurrences",
    "select",
    "split_unit",
    "units_from_dependencies",
    "version_key",
    "visible_units",
]
