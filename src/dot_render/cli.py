"""Click CLI entry point for dot-render."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dot_render import __version__
from dot_render.config import is_initialized, resolve_config, save_config
from dot_render.models import RenderConfig


@click.group()
@click.version_option(version=__version__, prog_name="dot-render")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dot-render: print values and graphs as Graphviz DOT."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.option("--width", type=int, default=None, help="Page width for wrapping")
@click.option("--strict", is_flag=True, default=False, help="Export strict graphs")
def init(width: int | None, strict: bool) -> None:
    """Write a dot-render config for the current directory."""
    project_root = Path.cwd()
    already = is_initialized(project_root)

    config = resolve_config(project_root)
    if width is not None:
        try:
            config = RenderConfig(
                width=width,
                ribbon=config.ribbon,
                indent=config.indent,
                strict=config.strict,
            )
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--width") from e
    if strict:
        config.strict = True

    path = save_config(config, project_root)
    if already:
        click.echo("Configuration updated.")
    else:
        click.echo("Initialized dot-render project.")
    click.echo(f"  Config:  {path}")


@cli.command()
@click.argument("value")
@click.option("--unquoted", is_flag=True, default=False, help="Print the unquoted form")
@click.option(
    "--as",
    "kind",
    type=click.Choice(["text", "int", "float", "bool"]),
    default="text",
    help="Interpret VALUE as this type",
)
def quote(value: str, unquoted: bool, kind: str) -> None:
    """Print VALUE as it would appear in a DOT file."""
    from dot_render.code import render_dot
    from dot_render.printing import to_dot, unqt_dot

    try:
        parsed = _parse_value(value, kind)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE") from e
    code = unqt_dot(parsed) if unquoted else to_dot(parsed)
    click.echo(render_dot(code, resolve_config(Path.cwd())))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", default=None, help="Graph name (defaults to the graph's own)")
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None
)
@click.pass_context
def export(ctx: click.Context, path: Path, name: str | None, output: Path | None) -> None:
    """Render a node-link JSON graph at PATH as DOT."""
    from dot_render.exporters.dot import export_dot
    from dot_render.exporters.node_link import ExportError, load_graph

    try:
        graph = load_graph(path)
        dot = export_dot(graph, name=name, config=resolve_config(Path.cwd()))
    except (ExportError, TypeError) as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)
        return

    if output is None:
        click.echo(dot)
    else:
        output.write_text(dot + "\n")
        click.echo(f"Wrote: {output}")


def _parse_value(value: str, kind: str) -> object:
    """Convert command-line text to the requested value type."""
    if kind == "int":
        return int(value)
    if kind == "float":
        return float(value)
    if kind == "bool":
        lowered = value.lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"Not a boolean: {value}")
        return lowered == "true"
    return value
