"""capresolve CLI: infer public capability units for build dependencies.

Entry point for the ``capresolve`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    resolve  — Resolve one dependency pattern, or every catalog definition.
    missing  — List declared capability units not yet active in the runtime.

Usage::

    capresolve resolve graph.yaml --checkout ../open-liberty
    capresolve resolve graph.yaml --pattern "com.ibm.ws:com.ibm.ws.jsp.2.3"
    capresolve missing --declared servlet-4.0 --declared jsp-2.3 --active servlet-4.0
"""

from __future__ import annotations

import logging

import click

from capresolve import __version__
from capresolve.cli.missing_cmd import missing_command
from capresolve.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Log progress to stderr (-v for info, -vv for debug).",
)
def cli(verbose: int) -> None:
    """capresolve: Infer the public capability unit a dependency implies.

    Walks the dependency graph of a project's managed artifacts and, for
    each internal implementation artifact, reports the public capability
    unit that should be requested instead.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(resolve_command)
cli.add_command(missing_command)
