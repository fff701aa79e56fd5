"""
Theme export command.

Writes a Material Theme Builder compatible JSON document for a seed color.
"""

from __future__ import annotations

from pathlib import Path

import typer

from material_tokens.cli.utils import console, exit_on_error
from material_tokens.core.ir import SchemeVariant
from material_tokens.core.theme_generator import generate_theme
from material_tokens.core.theme_json import export_theme_file, format_theme_json


def generate_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed color as hex, e.g. #769CDF"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (default: stdout)"
    ),
    scheme: SchemeVariant = typer.Option(
        SchemeVariant.TONAL_SPOT, "--scheme", help="Scheme variant"
    ),
) -> None:
    """Generate a Material Theme Builder JSON export from a seed color."""
    with exit_on_error("Theme generation"):
        theme = generate_theme(seed, scheme)

        if output is None:
            typer.echo(format_theme_json(theme))
            return

        path = export_theme_file(theme, output)

    console.print(f"[green]✓[/green] Theme written to {path}")
