"""PATTERNBOOK patterns CLI: list the catalog and run pattern examples."""

from __future__ import annotations

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from patternbook.catalog import (
    FRAMEWORK_POSTS,
    PATTERNS,
    UnknownPatternError,
    get_pattern,
    run_demo,
)


@click.group(cls=clickx.ExtraGroup)
def patterns() -> None:
    """Design pattern commands."""


@patterns.command(name="list")
@click.option("--category", type=click.Choice(["creational", "structural", "behavioural"]))
@click.pass_context
def list_patterns(ctx: click.Context, category: str | None) -> None:
    """List the patterns in the order the series covers them."""
    table = Table(
        title="Design patterns",
        caption="Framework tutorials: " + ", ".join(FRAMEWORK_POSTS),
    )
    table.add_column("#", justify="right")
    table.add_column("Name", no_wrap=True)
    table.add_column("Category")
    table.add_column("Post", no_wrap=True)
    for number, entry in enumerate(PATTERNS, start=1):
        if category is not None and entry.category != category:
            continue
        table.add_row(str(number), entry.name, entry.category, entry.post_slug)
    Console(color_system=None if ctx.color is False else "auto").print(table)


@patterns.command()
@click.argument("name", required=False)
@click.option("--all", "run_all", is_flag=True, help="Run every pattern's example.")
def demo(name: str | None, run_all: bool) -> None:
    """Run the example for pattern NAME and print its output."""
    if run_all == (name is not None):
        raise click.UsageError("Give exactly one of NAME or --all.")

    entries = PATTERNS if run_all else ()
    if name is not None:
        try:
            entries = (get_pattern(name),)
        except UnknownPatternError as e:
            raise click.BadParameter(str(e), param_hint="NAME") from e

    for index, entry in enumerate(entries):
        if run_all:
            if index:
                click.echo()
            click.secho(f"# {entry.title}", bold=True)
        for line in run_demo(entry.name):
            click.echo(line)
