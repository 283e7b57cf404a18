"""objtasks CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys

import click

from objtasks import __version__
from objtasks.config import LOG_LEVELS, ObjTasksConfig
from objtasks.interchange import from_json, to_json
from objtasks.selector import Selector, SelectorError
from objtasks.shapes import Rectangle


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default from OBJTASKS_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """objtasks - rectangles, JSON interchange and CSS selector building."""
    try:
        config = ObjTasksConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(level=(log_level or config.log_level).upper())
    ctx.obj = config


@cli.command()
@click.option("--element", default=None, help="Element name, e.g. div")
@click.option("--id", "id_", default=None, help="Id without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element name")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Render a compound CSS selector from its parts."""
    sel = Selector()
    try:
        if element:
            sel.set_element(element)
        if id_:
            sel.set_id(id_)
        for name in classes:
            sel.add_class(name)
        for expr in attrs:
            sel.add_attribute(expr)
        for name in pseudo_classes:
            sel.add_pseudo_class(name)
        if pseudo_element:
            sel.set_pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rendered = sel.render()
    if not rendered:
        click.echo("Error: no selector parts given", err=True)
        sys.exit(1)
    click.echo(rendered)


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(config: ObjTasksConfig, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if as_json:
        click.echo(to_json(rect, indent=config.json_indent, sort_keys=config.sort_keys))
    else:
        click.echo(f"{rect.get_area():g}")


@cli.command("area-from-json")
@click.argument("text")
def area_from_json(text: str) -> None:
    """Rebuild a rectangle from JSON TEXT and print its area."""
    try:
        rect = from_json(Rectangle, text)
        line = f"{rect.get_area():g}"
    except (json.JSONDecodeError, TypeError, AttributeError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(line)
