"""``capresolve resolve <graph>`` — Infer public units for dependencies.

Loads a dependency graph document exported by the build tool, reads the
public-unit catalog from a platform checkout, and resolves either a single
dependency pattern (``--pattern``) or every artifact referenced by the
catalog's unit definitions.

Exit Codes:
    0 — Resolution completed without conflicts.
    1 — At least one result has tied candidate units.
    2 — Missing catalog, unreadable configuration, or malformed input.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from capresolve.catalog import CheckoutCatalog
from capresolve.config import load_config
from capresolve.core.resolution import UnversionedPolicy
from capresolve.exceptions import CapResolveError
from capresolve.graphs import DocumentGraphSource, load_graph_document, package_index
from capresolve.pipeline import ResolutionEngine


@click.command("resolve")
@click.argument("graph", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--pattern", "-p",
    default=None,
    help="Resolve only this dependency pattern (group:name[:ext[:version]]).",
)
@click.option(
    "--checkout",
    type=click.Path(file_okay=False),
    default=None,
    help="Platform source checkout (default: ../open-liberty).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Resolve catalog definitions in parallel.",
)
@click.option(
    "--keep-unversioned",
    is_flag=True,
    default=False,
    help="Keep units without a version suffix instead of dropping them.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def resolve_command(
    graph: str,
    pattern: str | None,
    checkout: str | None,
    config_path: str | None,
    workers: int | None,
    keep_unversioned: bool,
    output_format: str,
) -> None:
    """Resolve dependencies in GRAPH to public capability units.

    Exit code 0 on success, 1 if any result has conflicts, 2 on error.
    """
    try:
        config = load_config(config_path).with_overrides(
            checkout_dir=checkout,
            workers=workers,
            unversioned=UnversionedPolicy.KEEP if keep_unversioned else None,
        )
        document = load_graph_document(Path(graph))
        engine = ResolutionEngine(
            config,
            CheckoutCatalog(config.checkout_dir, config.visibility_path),
            DocumentGraphSource(document),
            packages=package_index(document),
        )
        if pattern is not None:
            results = [engine.resolve_pattern(pattern)]
        else:
            results = engine.resolve_catalog()
    except CapResolveError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        from capresolve.cli.output import print_resolution_results
        print_resolution_results(results)

    sys.exit(1 if any(r.has_conflicts for r in results) else 0)
