"""Base class and in-memory implementation of a capability-unit catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from capresolve.core.resolution.coordinate import Coordinate


class UnitCatalog(ABC):
    """Source of public unit names and capability-unit definitions.

    Subclasses must implement ``list_public_unit_names`` and
    ``list_unit_definitions``.
    """

    @abstractmethod
    def list_public_unit_names(self) -> set[str]:
        """Return the names of all publicly requestable units.

        Raises:
            CatalogError: If the backing resource is missing.
        """

    @abstractmethod
    def list_unit_definitions(self) -> list[Coordinate]:
        """Return the artifacts referenced by unit definitions.

        Each artifact appears once (structural identity), sorted by its
        ``group:name:version`` string.

        Raises:
            CatalogError: If the backing resource is missing.
            MalformedCoordinateError: If a definition is malformed.
        """


class StaticCatalog(UnitCatalog):
    """A catalog held in memory, for tests and pre-computed inputs."""

    def __init__(
        self,
        public_units: Iterable[str],
        definitions: Iterable[Coordinate] = (),
    ) -> None:
        self._public_units = frozenset(public_units)
        self._definitions = sorted(set(definitions), key=str)

    def list_public_unit_names(self) -> set[str]:
        return set(self._public_units)

    def list_unit_definitions(self) -> list[Coordinate]:
        return list(self._definitions)
