"""Feature-Dependency Membership Filter.

Works out which capability units a project declares as direct dependencies
but has not yet activated in the target runtime's configuration. Runtime
configuration names are case-insensitive, so comparison always happens on
lower-cased names while the declared spelling is kept in the output.
"""

from __future__ import annotations

from collections.abc import Iterable, Set

from capresolve.core.resolution.coordinate import Coordinate

DEFAULT_UNIT_GROUP = "io.openliberty.features"


def units_from_dependencies(
    dependencies: Iterable[Coordinate], unit_group: str = DEFAULT_UNIT_GROUP
) -> set[str]:
    """Names of the direct dependencies that are capability-unit artifacts.

    A dependency is a capability unit when its group is *unit_group*.
    """
    return {dep.name for dep in dependencies if dep.group == unit_group}


def visible_units(declared: Set[str], visible: Set[str]) -> set[str]:
    """Keep only the declared units that the runtime exposes."""
    return {name for name in declared if name in visible}


def missing_active_units(
    declared: Set[str], active_lowercased: Set[str]
) -> set[str]:
    """Declared unit names that are not yet active, ignoring case.

    Args:
        declared: Capability-unit names the project declares, original case.
        active_lowercased: Unit names already active in the runtime
            configuration. Expected lower case; normalized regardless.

    Returns:
        The declared names, in their declared spelling, whose lower-case form
        is not among the active names.
    """
    active = {name.lower() for name in active_lowercased}
    return {name for name in declared if name.lower() not in active}
