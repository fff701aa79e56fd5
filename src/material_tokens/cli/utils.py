"""
material-tokens CLI utilities.

Shared helpers used across CLI modules: version display, logging setup and
conversion of core errors into exit codes.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from material_tokens._version import get_version
from material_tokens.core.errors import TokenError

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"material-tokens version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging to stderr; DEBUG with --verbose, otherwise INFO."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def exit_on_error(label: str) -> Iterator[None]:
    """Print core errors in red on stderr and exit with code 1."""
    try:
        yield
    except TokenError as e:
        err_console.print(
            f"[red]{label} failed:[/red] {escape(str(e))}", highlight=False, soft_wrap=True
        )
        raise typer.Exit(code=1) from e
