"""Command-line interface for faultline.

``faultline show`` renders a diagnostic for a line of a file, which is handy
for previewing themes and snippet settings against real sources.
"""

import logging
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from faultline import __version__
from faultline.core.config import config_manager, get_config
from faultline.core.error import Anchor, leaf, wrap
from faultline.core.errors import ConfigError, DiagnosticError
from faultline.core.report import print_error
from faultline.core.source_file import load_source_file
from faultline.core.theme import BUILTIN_THEMES, get_theme, list_themes
from faultline.utils.log import get_logger

console = Console()
logger = get_logger()


@click.group()
@click.version_option(version=__version__, prog_name="faultline")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Render error trees with source context."""
    if verbose:
        logger.set_console_level(logging.DEBUG)


@cli.command(name="show")
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("line", type=int)
@click.argument("message")
@click.option(
    "--context",
    "contexts",
    multiple=True,
    help="Wrap the error in a higher-level message. Repeat to nest; the first is innermost.",
)
@click.option("--color", type=click.Choice(["auto", "always", "never"]), default=None)
@click.option("--theme", type=click.Choice(list_themes()), default=None)
@click.option("--context-lines", type=click.IntRange(min=0), default=None)
def show_cmd(
    path: str,
    line: int,
    message: str,
    contexts: Tuple[str, ...],
    color: Optional[str],
    theme: Optional[str],
    context_lines: Optional[int],
) -> None:
    """Print MESSAGE as a diagnostic anchored at LINE of PATH."""
    overrides = {
        key: value
        for key, value in (("color", color), ("theme", theme), ("context_lines", context_lines))
        if value is not None
    }
    config = get_config().model_copy(update=overrides)
    stdout = sys.stdout

    logger.debug(
        "[cli] Rendering diagnostic",
        extra={"path": path, "line": line, "contexts": len(contexts)},
    )
    try:
        source = load_source_file(path)
    except DiagnosticError as exc:
        print_error(wrap(f"could not show {path}", [exc.error]), stdout, config=config)
        sys.exit(1)

    error = leaf(message, Anchor(source, line))
    for context in contexts:
        error = wrap(context, [error])

    print_error(error, stdout, config=config)
    sys.exit(1)


@cli.command(name="themes")
def themes_cmd() -> None:
    """List the built-in themes."""
    current = get_config().theme

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Marker", width=2)
    table.add_column("Name", width=12)
    table.add_column("Description")

    for name, theme in BUILTIN_THEMES.items():
        marker = f"[{theme.colors.cause_marker}]→[/]" if name == current else " "
        display = f"[bold]{theme.name}[/bold]" if name == current else theme.name
        table.add_row(marker, display, escape(theme.description))

    console.print(table)


@cli.command(name="config")
@click.option("--color", type=click.Choice(["auto", "always", "never"]), default=None)
@click.option("--theme", default=None, help="Name of a built-in theme.")
@click.option("--context-lines", type=int, default=None)
def config_cmd(color: Optional[str], theme: Optional[str], context_lines: Optional[int]) -> None:
    """Show the configuration, or update it when options are given."""
    manager = config_manager
    changes = {
        key: value
        for key, value in (("color", color), ("theme", theme), ("context_lines", context_lines))
        if value is not None
    }
    if changes:
        try:
            config = manager.update(**changes)
        except ConfigError as e:
            raise click.BadParameter(str(e)) from e
        console.print(f"[green]✓ Saved configuration to {escape(str(manager.config_path))}[/]")
    else:
        config = manager.get_config()

    console.print("\n[bold]Configuration[/bold]\n")
    console.print(f"Version: {__version__}")
    console.print(f"Color: {config.color}")
    console.print(f"Theme: {get_theme(config.theme).display_name}")
    console.print(f"Context Lines: {config.context_lines}")
    console.print(f"Show Tracebacks: {config.show_tracebacks}")
    console.print(f"Relative Paths: {config.relative_paths}")


def main() -> None:
    """Entry point for the ``faultline`` script."""
    cli()


if __name__ == "__main__":
    main()
