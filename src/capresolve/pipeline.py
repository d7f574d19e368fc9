"""End-to-end resolution over a catalog and a graph source.

``ResolutionEngine`` threads an explicit ``ResolverConfig`` through the
resolution core: it loads the public-unit set once, collects the graph of
every managed dependency once, then resolves any number of patterns against
those read-only inputs.

Usage::

    config = load_config("capresolve.yaml")
    engine = ResolutionEngine(
        config,
        CheckoutCatalog(config.checkout_dir, config.visibility_path),
        DocumentGraphSource.from_path("graph.yaml"),
    )
    for result in engine.resolve_catalog():
        print(result.query_pattern, result.resolved_unit)
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from capresolve.catalog.base import UnitCatalog
from capresolve.config import ResolverConfig
from capresolve.core.resolution import (
    ArtifactPattern,
    Coordinate,
    GraphNode,
    ResolutionResult,
    resolve,
)
from capresolve.exceptions import CatalogError
from capresolve.graphs.base import GraphSource, collect_roots

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """Resolves dependency patterns to public capability units.

    Args:
        config: Run settings.
        catalog: Source of public unit names and unit definitions.
        source: Source of collected dependency graphs.
        managed: Root artifacts to examine. Defaults to ``source.managed``
            when the source provides it.
        packages: Optional code packages per artifact, attached to the
            results of ``resolve_catalog``.
    """

    def __init__(
        self,
        config: ResolverConfig,
        catalog: UnitCatalog,
        source: GraphSource,
        managed: Sequence[Coordinate] | None = None,
        packages: Mapping[Coordinate, frozenset[str]] | None = None,
    ) -> None:
        self._config = config
        self._catalog = catalog
        self._source = source
        if managed is None:
            managed = source.managed
        self._managed = list(managed)
        self._packages = dict(packages or {})
        self._public_units: frozenset[str] | None = None
        self._roots: list[GraphNode] | None = None

    @property
    def public_units(self) -> frozenset[str]:
        """The public-unit set, loaded on first use.

        Raises:
            CatalogError: If the catalog is missing or lists no public unit.
        """
        if self._public_units is None:
            names = self._catalog.list_public_unit_names()
            if not names:
                raise CatalogError("The catalog lists no public capability units")
            logger.info("Loaded %d public unit(s)", len(names))
            self._public_units = frozenset(names)
        return self._public_units

    @property
    def roots(self) -> list[GraphNode]:
        """Graph roots of the managed dependencies, collected on first use."""
        if self._roots is None:
            self._roots = collect_roots(self._source, self._managed)
            logger.info(
                "Collected %d of %d dependency graph(s)",
                len(self._roots), len(self._managed),
            )
        return self._roots

    def resolve_pattern(self, pattern: str | ArtifactPattern) -> ResolutionResult:
        """Resolve a single dependency pattern against every managed root."""
        return resolve(
            pattern, self.roots, self.public_units, self._config.unversioned
        )

    def _resolve_definition(self, definition: Coordinate) -> ResolutionResult:
        result = self.resolve_pattern(ArtifactPattern.for_coordinate(definition))
        packages = self._packages.get(definition)
        if packages is not None:
            result = dataclasses.replace(result, package_names=packages)
        return result

    def resolve_catalog(self) -> list[ResolutionResult]:
        """Resolve every artifact referenced by the catalog's unit definitions.

        Inputs are loaded before any worker starts, so a missing catalog
        fails the whole run up front. Results follow definition order.
        """
        definitions = self._catalog.list_unit_definitions()
        public_units = self.public_units
        roots = self.roots
        logger.info(
            "Resolving %d definition(s) against %d root(s) and %d public unit(s)",
            len(definitions), len(roots), len(public_units),
        )

        if self._config.workers == 1:
            return [self._resolve_definition(d) for d in definitions]
        with ThreadPoolExecutor(max_workers=self._config.workers) as pool:
            return list(pool.map(self._resolve_definition, definitions))
