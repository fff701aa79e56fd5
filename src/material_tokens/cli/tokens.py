"""
Design token commands.

``tokens`` fetches the Open Props primitives and writes the full three-tier
CSS token set; ``config`` writes a tokens.yaml holding the defaults.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from material_tokens.cli.utils import console, exit_on_error
from material_tokens.core.ir import DEFAULT_CONFIG, ColorFormat, ContrastLevel, SchemeVariant
from material_tokens.core.token_generator import generate_tokens
from material_tokens.core.tokenconfig_loader import (
    TOKENCONFIG_FILE,
    load_token_config,
    save_token_config,
    with_cli_overrides,
)


def tokens_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed color as hex, e.g. #769CDF"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output directory (default: config output.dir, ./tokens)"
    ),
    format: ColorFormat | None = typer.Option(
        None, "--format", "-f", help="Color format (default: config format, oklch)"
    ),
    scheme: SchemeVariant = typer.Option(
        SchemeVariant.TONAL_SPOT, "--scheme", help="Scheme variant"
    ),
    contrast: ContrastLevel = typer.Option(
        ContrastLevel.STANDARD, "--contrast", "-c", help="Contrast level for semantic tokens"
    ),
    config: Path | None = typer.Option(
        None, "--config", help=f"YAML overrides file (e.g. {TOKENCONFIG_FILE})"
    ),
    timeout: float = typer.Option(
        30.0, "--timeout", help="Per-request Open Props fetch timeout in seconds"
    ),
) -> None:
    """Generate layered CSS design tokens from a seed color."""
    with exit_on_error("Token generation"):
        resolved = with_cli_overrides(
            load_token_config(config), format=format, output_dir=output
        )
        report = asyncio.run(
            generate_tokens(
                seed,
                config=resolved,
                variant=scheme,
                contrast=contrast,
                timeout=timeout,
            )
        )

    for path in report.written:
        console.print(f"  [green]✓[/green] {path.relative_to(report.output_dir)}")
    for path in report.created:
        console.print(f"  [green]✓[/green] {path.relative_to(report.output_dir)} (template)")
    for path in report.skipped:
        console.print(f"  [dim]- {path.relative_to(report.output_dir)} (exists, skipped)[/dim]")
    console.print(f"\n[bold]Done![/bold] Tokens written to {report.output_dir}")


def config_command(
    path: Path = typer.Option(
        Path(TOKENCONFIG_FILE), "--path", "-p", help="Destination file"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a tokens.yaml holding the default configuration."""
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {path}")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    save_token_config(DEFAULT_CONFIG, path)
    console.print(f"[green]✓[/green] Created {path}")
