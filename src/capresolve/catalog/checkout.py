"""Capability-unit catalog backed by a platform source checkout.

Layout expected under the checkout::

    <checkout>/<visibility_path>/
        public/<unitName>/...          one directory per public unit
        public/<unitName>/<x>.feature  unit descriptors
        private/..., protected/...     internal unit descriptors

Descriptor files reference implementation artifacts through
``mavenCoordinates="group:artifact:version"`` attributes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from capresolve.catalog.base import UnitCatalog
from capresolve.core.resolution.coordinate import Coordinate
from capresolve.exceptions import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY_PATH = "dev/com.ibm.websphere.appserver.features/visibility"
DESCRIPTOR_SUFFIX = ".feature"

_COORDINATES_RE = re.compile(r'mavenCoordinates\s*=\s*"([^"]*)"')


def parse_unit_definitions(content: str) -> list[Coordinate]:
    """Extract every ``mavenCoordinates`` value from descriptor text.

    Args:
        content: Full text of a descriptor file.

    Returns:
        Coordinates in order of appearance, duplicates included.

    Raises:
        MalformedCoordinateError: If a value is not ``group:name:version``.
    """
    return [Coordinate.parse(m.group(1)) for m in _COORDINATES_RE.finditer(content)]


class CheckoutCatalog(UnitCatalog):
    """Reads public unit names and unit definitions from a checkout.

    Args:
        checkout_dir: Root of the platform source checkout.
        visibility_path: Location of the unit visibility tree, relative to
            *checkout_dir*.
    """

    def __init__(
        self,
        checkout_dir: Path | str,
        visibility_path: str = DEFAULT_VISIBILITY_PATH,
    ) -> None:
        self._checkout_dir = Path(checkout_dir)
        self._visibility_path = visibility_path

    @property
    def visibility_dir(self) -> Path:
        return self._checkout_dir / self._visibility_path

    def _require_visibility_dir(self) -> Path:
        if not self._checkout_dir.is_dir():
            raise CatalogError(
                f"Platform checkout must exist at {self._checkout_dir.absolute()}"
            )
        visibility = self.visibility_dir
        if not visibility.is_dir():
            raise CatalogError(
                f"{visibility.absolute()} does not exist. Ensure the platform "
                f"repository is cloned to {self._checkout_dir.absolute()}"
            )
        return visibility

    def list_public_unit_names(self) -> set[str]:
        """Directory names under ``<visibility>/public``.

        Raises:
            CatalogError: If the checkout or the public directory is missing.
        """
        public_dir = self._require_visibility_dir() / "public"
        if not public_dir.is_dir():
            raise CatalogError(f"{public_dir.absolute()} does not exist")
        names = {entry.name for entry in public_dir.iterdir() if entry.is_dir()}
        logger.debug("Public units: %s", sorted(names))
        return names

    def _find_descriptors(self) -> list[Path]:
        visibility = self._require_visibility_dir()
        return sorted(
            p for p in visibility.rglob(f"*{DESCRIPTOR_SUFFIX}") if p.is_file()
        )

    def list_unit_definitions(self) -> list[Coordinate]:
        """Unique artifacts referenced by every descriptor in the tree.

        Unreadable descriptors are logged and skipped.

        Raises:
            CatalogError: If the checkout or visibility directory is missing.
            MalformedCoordinateError: If a descriptor holds a malformed value.
        """
        descriptors = self._find_descriptors()
        logger.info("Found %d unit descriptor(s)", len(descriptors))

        found: set[Coordinate] = set()
        for descriptor in descriptors:
            try:
                content = descriptor.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                logger.warning("Could not read file %s", descriptor, exc_info=True)
                continue
            for coordinate in parse_unit_definitions(content):
                logger.debug("File %s has coordinates %s", descriptor, coordinate)
                found.add(coordinate)
        return sorted(found, key=str)
