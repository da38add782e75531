#!/usr/bin/env python3
"""
Test script for module inheritance through capability merging
"""

import click
from rich.console import Console

from captain.demo import build_inheritance_context, run_inheritance_demo

console = Console()


@click.command()
@click.option(
    "--show-lineage",
    is_flag=True,
    help="Also print each module's ancestor chain",
)
def main(show_lineage: bool):
    """Test SubModule extending MainModule."""

    console.print("[cyan]Testing module inheritance[/cyan]\n")

    context = build_inheritance_context()
    results = run_inheritance_demo(context)

    for call, value in results.items():
        console.print(f"[bold]{call}():[/bold] {value}")

    if show_lineage:
        console.print()
        for name in context.list_modules():
            lineage = " → ".join(context.resolve_lineage(name))
            console.print(f"[bold]{name}:[/bold] {lineage}")

    expected = "FooBar, undefined"
    actual = results["SubModule.doSomething"]
    if actual == expected:
        console.print(f"\n[green]✓ SubModule.doSomething() returned {actual!r}[/green]")
    else:
        console.print(f"\n[red]✗ Expected {expected!r}, got {actual!r}[/red]")


if __name__ == "__main__":
    main()
