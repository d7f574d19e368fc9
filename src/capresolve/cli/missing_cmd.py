"""``capresolve missing`` — Declared capability units not yet active.

Compares the capability units a project declares as direct dependencies
with the units already active in the runtime configuration, and lists the
ones that still need to be added. Names compare case-insensitively.

Exit Codes:
    0 — Always, unless an argument or the configuration is malformed (2).
"""

from __future__ import annotations

import json
import sys

import click

from capresolve.config import load_config
from capresolve.core.resolution import (
    DEFAULT_UNIT_GROUP,
    Coordinate,
    missing_active_units,
    units_from_dependencies,
    visible_units,
)
from capresolve.exceptions import CapResolveError


@click.command("missing")
@click.option(
    "--declared", "-d",
    multiple=True,
    help="Capability unit declared by the project (repeatable).",
)
@click.option(
    "--dependency",
    multiple=True,
    help="Direct dependency as group:name:version (repeatable). Only those "
    "in the unit group count as declared units.",
)
@click.option(
    "--unit-group",
    default=None,
    help=f"Group id marking capability-unit artifacts (default: {DEFAULT_UNIT_GROUP}).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file supplying unit_group.",
)
@click.option(
    "--active", "-a",
    multiple=True,
    help="Unit already active in the runtime configuration (repeatable).",
)
@click.option(
    "--visible",
    multiple=True,
    help="Restrict declared units to these runtime-visible units (repeatable).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def missing_command(
    declared: tuple[str, ...],
    dependency: tuple[str, ...],
    unit_group: str | None,
    config_path: str | None,
    active: tuple[str, ...],
    visible: tuple[str, ...],
    output_format: str,
) -> None:
    """List declared capability units missing from the runtime configuration."""
    try:
        config = load_config(config_path).with_overrides(unit_group=unit_group)
        coordinates = [Coordinate.parse(text) for text in dependency]
    except CapResolveError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)

    units = set(declared) | units_from_dependencies(coordinates, config.unit_group)
    if visible:
        units = visible_units(units, set(visible))
    missing = sorted(missing_active_units(units, {a.lower() for a in active}))

    if output_format == "json":
        click.echo(json.dumps({"missing": missing}, indent=2))
    else:
        from capresolve.cli.output import print_missing_units
        print_missing_units(missing)
    sys.exit(0)
