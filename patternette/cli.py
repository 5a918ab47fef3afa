from __future__ import annotations

"""Patternette Command Line Interface."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.table import Table

from patternette.config import RenderOptions, load_options
from patternette.demos import DEMOS, build_demo_tree, get_demo
from patternette.io.sink import ConsoleSink
from patternette.utils import events
from patternette.utils.ids import snake_case
from patternette.utils.logging import console, get as get_logger, show_tree
from patternette.utils.validate import find_tree_issues

app = typer.Typer(
    name="patternette",
    help="CLI for Patternette: composite trees and visitor double dispatch.",
    add_completion=False,
)

_EVENT_TYPES = (
    events.NodeRendered,
    events.ChildAdded,
    events.ChildRemoved,
    events.ElementVisited,
)


def _load_opts(config: Optional[Path], **overrides) -> RenderOptions:
    try:
        opts = load_options(config) if config is not None else RenderOptions()
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return opts.model_copy(update=overrides) if overrides else opts
    except Exception as e:  # noqa: BLE001 – yaml or pydantic errors
        console.print(f"[bold red]Error: invalid render options: {e}[/]")
        raise typer.Exit(code=1)


def _print_event(evt: events.Event) -> None:
    payload = {"event": snake_case(type(evt).__name__), **asdict(evt)}
    typer.echo(json.dumps(payload, default=str))


@app.callback()
def main(
    log_level: str = typer.Option("warning", "--log-level", help="Log level: debug, info, warning, error."),
):
    """Configure logging before any command runs."""
    get_logger(log_level)


@app.command("list")
def list_demos():
    """List all registered demos."""
    if not DEMOS:
        console.print("[yellow]No demos registered.[/]")
        return

    table = Table(title="Registered Demos", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Summary", style="magenta")
    for name, demo in DEMOS.items():
        table.add_row(name, demo.summary)
    console.print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Demo name (see `patternette list`)."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with render options.", exists=True, dir_okay=False),
    indent: Optional[str] = typer.Option(None, "--indent", help="Prefix repeated once per tree depth."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Also emit one JSON line per event."),
):
    """Run a demo and print its output."""
    try:
        demo = get_demo(name)
    except KeyError as e:
        console.print(f"[bold red]Error: {e.args[0]}[/]")
        raise typer.Exit(code=1)

    opts = _load_opts(config, indent=indent)

    if json_logs:
        for event_type in _EVENT_TYPES:
            events.subscribe(event_type)(_print_event)
    try:
        demo.run(ConsoleSink(console), opts)
    finally:
        if json_logs:
            for event_type in _EVENT_TYPES:
                events.unsubscribe(event_type, _print_event)


@app.command()
def tree(
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with render options.", exists=True, dir_okay=False),
    max_children: Optional[int] = typer.Option(None, "--max-children", min=1, help="Collapse children past this count."),
    icons: Optional[bool] = typer.Option(None, "--icons/--no-icons", help="Show node icons (default from config)."),
):
    """Print the demo composite as a Rich tree and validate it."""
    opts = _load_opts(config, max_children=max_children, icons_on=icons)
    root = build_demo_tree()
    show_tree(root, opts=opts)

    issues = find_tree_issues(root)
    if issues:
        for kind, label in issues:
            console.print(f"[bold red]{kind}:[/] {label}")
        raise typer.Exit(code=1)
    console.print("[green]Tree is acyclic with no shared nodes.[/]")


if __name__ == "__main__":
    app()
