"""Capability-unit catalogs.

A catalog answers two questions for the resolution engine: which unit names
are public, and which artifacts are referenced by capability-unit
definitions. The engine never touches the filesystem itself.
"""

from capresolve.catalog.base import StaticCatalog, UnitCatalog
from capresolve.catalog.checkout import (
    DEFAULT_VISIBILITY_PATH,
    CheckoutCatalog,
    parse_unit_definitions,
)

__all__ = [
    "CheckoutCatalog",
    "DEFAULT_VISIBILITY_PATH",
    "StaticCatalog",
    "UnitCatalog",
    "parse_unit_definitions",
]
