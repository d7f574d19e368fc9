"""Rich output formatting helpers for the capresolve CLI.

Resolved units print green, unresolved patterns dim, and conflicting results
yellow with the tied candidates listed underneath.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from capresolve.core.resolution import ResolutionResult

console = Console()


def _format_occurrences(result: ResolutionResult) -> str:
    if not result.occurrences:
        return "-"
    return ", ".join(f"{unit}={count}" for unit, count in result.occurrences.items())


def print_resolution_results(results: list[ResolutionResult]) -> None:
    """Print a table with one row per resolved dependency pattern.

    Args:
        results: Results in the order they were resolved.
    """
    if not results:
        console.print("[dim]No dependency patterns to resolve.[/dim]")
        return

    table = Table(title="Capability Unit Resolution", show_header=True, header_style="bold")
    table.add_column("Dependency", style="bold")
    table.add_column("Unit")
    table.add_column("Occurrences", style="dim")
    table.add_column("Packages", style="dim")

    for result in results:
        if result.resolved_unit is None:
            unit = Text("-", style="dim")
        elif result.has_conflicts:
            unit = Text(result.resolved_unit, style="yellow")
        else:
            unit = Text(result.resolved_unit, style="green")
        packages = ", ".join(sorted(result.package_names or ())) or "-"
        table.add_row(result.query_pattern, unit, _format_occurrences(result), packages)

    console.print(table)
    _print_conflicts(results)
    _print_summary(results)


def _print_conflicts(results: list[ResolutionResult]) -> None:
    conflicting = [r for r in results if r.has_conflicts]
    for result in conflicting:
        console.print(
            f"[yellow]Conflict[/yellow] for {result.query_pattern}: "
            + ", ".join(result.conflicts or ())
        )


def _print_summary(results: list[ResolutionResult]) -> None:
    total = len(results)
    resolved = sum(1 for r in results if r.resolved_unit is not None)
    conflicts = sum(1 for r in results if r.has_conflicts)
    parts = [f"[bold]{total}[/bold] patterns", f"[green]{resolved} resolved[/green]"]
    if conflicts:
        parts.append(f"[yellow]{conflicts} with conflicts[/yellow]")
    console.print(" | ".join(parts))


def print_missing_units(missing: list[str]) -> None:
    """Print the declared units that the runtime configuration lacks."""
    if not missing:
        console.print(
            Panel("[bold green]All declared units are active[/bold green]",
                  title="Capability Units")
        )
        return
    console.print(
        Panel(f"[bold]{len(missing)}[/bold] declared unit(s) missing",
              title="Capability Units")
    )
    for name in missing:
        console.print(f"  [cyan]- {name}[/cyan]")
