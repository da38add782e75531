"""
Command-line interface for the capability merging examples.

This module provides commands to run the inheritance example, build points
and inspect the example modules from the terminal.
"""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .context import ModuleContext, create_default_context
from .core import make_point
from .demo import build_inheritance_context, run_inheritance_demo

console = Console()


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def display_demo_results(results: dict) -> None:
    """
    Display inheritance example results in the console.

    Args:
        results: Dictionary mapping "Module.function" to call results
    """
    panel_lines = [f"[bold]{call}()[/bold] → {value}" for call, value in results.items()]
    console.print(Panel("\n".join(panel_lines), title="Inheritance", border_style="blue"))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
def main(log_level: str):
    """
    Capability merging between script-style modules.

    Examples:

        # Run the MainModule/SubModule example
        captain demo

        # Inspect which behaviors each module holds
        captain --log-level DEBUG describe
    """
    configure_logging(log_level)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def demo(as_json: bool):
    """Run the inheritance example."""
    try:
        results = run_inheritance_demo()
    except ValueError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(results, indent=2))
    else:
        display_demo_results(results)


@main.command()
@click.argument("x", type=float)
@click.argument("y", type=float)
def point(x: float, y: float):
    """Create a point from two coordinates."""
    click.echo(json.dumps(make_point(x, y).model_dump()))


def display_modules(context: ModuleContext, as_json: bool = False) -> None:
    """
    Display the members and ancestry of every module in a context.

    Args:
        context: Context whose modules are shown
        as_json: Print ModuleSummary JSON instead of a table
    """
    summaries = [context.describe(name) for name in context.list_modules()]

    if as_json:
        click.echo(json.dumps([s.model_dump() for s in summaries], indent=2))
        return

    table = Table(title="Modules")
    table.add_column("Module", style="cyan")
    table.add_column("Behaviors")
    table.add_column("Data")
    table.add_column("Lineage", style="magenta")

    for summary in summaries:
        table.add_row(
            summary.name,
            ", ".join(summary.behaviors) or "-",
            ", ".join(summary.data) or "-",
            " → ".join(summary.lineage),
        )

    console.print(table)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print summaries as JSON")
def describe(as_json: bool):
    """Show the members and ancestry of the example modules."""
    display_modules(build_inheritance_context(), as_json)


@main.command()
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Print summaries as JSON")
def load(directory: Path, as_json: bool):
    """Run every script in DIRECTORY and show the modules they define."""
    context = create_default_context()
    try:
        context.load_all_scripts(directory)
    except ValueError as e:
        raise click.ClickException(str(e))

    display_modules(context, as_json)


if __name__ == "__main__":
    main()
