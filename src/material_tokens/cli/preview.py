"""
Scheme variant preview command.

Shows the seed's HCT decomposition and a table comparing the key role
colors produced by each scheme variant.
"""

from __future__ import annotations

import typer
from rich.table import Table

from material_tokens.cli.utils import console, exit_on_error
from material_tokens.core.color_model import derive_hct
from material_tokens.core.ir import VARIANT_LABELS, ContrastLevel
from material_tokens.core.oklch import hex_to_oklch, normalize_hex
from material_tokens.core.theme_generator import generate_variant_previews


def _swatch(value: str) -> str:
    return f"[on {value}]    [/] {value}"


def preview_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed color as hex, e.g. #769CDF"),
    dark: bool = typer.Option(False, "--dark", help="Preview dark schemes"),
    contrast: ContrastLevel = typer.Option(
        ContrastLevel.STANDARD, "--contrast", "-c", help="Contrast level"
    ),
) -> None:
    """Compare scheme variants for a seed color."""
    with exit_on_error("Preview"):
        normalized = normalize_hex(seed)
        hct = derive_hct(normalized)
        previews = generate_variant_previews(normalized, is_dark=dark, contrast=contrast)

    console.print(f"[bold]Seed[/bold] {_swatch(normalized)}  {hex_to_oklch(normalized)}")
    console.print(f"  Hue: {hct.hue:.1f}  Chroma: {hct.chroma:.1f}  Tone: {hct.tone:.1f}")
    console.print()

    mode = "dark" if dark else "light"
    table = Table(title=f"Scheme variants ({mode}, {contrast.value} contrast)")
    table.add_column("Variant", style="bold")
    table.add_column("Primary")
    table.add_column("Secondary")
    table.add_column("Tertiary")
    table.add_column("Surface")
    table.add_column("On Surface")

    for preview in previews:
        table.add_row(
            VARIANT_LABELS[preview.variant],
            _swatch(preview.primary),
            _swatch(preview.secondary),
            _swatch(preview.tertiary),
            _swatch(preview.surface),
            _swatch(preview.on_surface),
        )

    console.print(table)
