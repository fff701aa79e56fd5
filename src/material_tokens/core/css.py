"""
CSS file scaffolding shared by all tiers.

File headers, the index.css entry point and the one-time app.css template.
"""

from __future__ import annotations

from datetime import datetime

from .ir.tokenconfig import PrefixSpec

REGENERATE_HINT = "material-tokens tokens"


def export_timestamp(now: datetime | None = None) -> str:
    """Timestamp in the ``YYYY-MM-DD HH:MM:SS`` form used by exports and headers."""
    return (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def generate_header(
    title: str,
    source: str | None = None,
    description: str | None = None,
    *,
    generated_at: str | None = None,
) -> str:
    """Generate a standard CSS file header comment.

    Args:
        title: First line of the comment.
        source: Optional origin of the values.
        description: Optional multi-line description.
        generated_at: Generation timestamp, defaults to now.

    Returns:
        Header text ending with a blank line.
    """
    lines: list[str] = ["/**", f" * {title}"]
    if source:
        lines.append(f" * Source: {source}")
    lines.append(f" * Generated: {generated_at or export_timestamp()}")

    if description:
        lines.append(" *")
        for line in description.split("\n"):
            lines.append(f" * {line}".rstrip())

    lines.append(" *")
    lines.append(f" * DO NOT EDIT - Regenerate with: {REGENERATE_HINT}")
    lines.append(" */")
    lines.append("")
    return "\n".join(lines)


def generate_index_css(
    openprops_files: tuple[str, ...] | list[str],
    prefixes: PrefixSpec,
    palette_subdir: str,
    openprops_subdir: str,
    *,
    generated_at: str | None = None,
) -> str:
    """Generate index.css importing every tier in order.

    Tier 1 (palettes, Open Props primitives), tier 2 (semantic), tier 3 (app).
    """
    header = generate_header(
        "Tokens Layer - Main Entry Point",
        description=(
            "Prefix Legend:\n"
            f"  --{prefixes.palette}-palette-* = Material Design palettes (raw color steps)\n"
            f"  --{prefixes.primitives}-*      = Open Props primitives (raw values)\n"
            f"  --{prefixes.semantic}-*        = Application tokens (USE THESE!)\n"
            "\n"
            "Tier 1: Warehouses (Primitives)\n"
            "Tier 2: Showroom (Semantic)\n"
            "Tier 3: App-Specific (manual)"
        ),
        generated_at=generated_at,
    )

    lines: list[str] = [header]

    lines.append("/* === Tier 1: Warehouses (Primitives) === */")
    lines.append(f'@import "./{palette_subdir}/palettes.css";')
    for name in sorted(openprops_files):
        lines.append(f'@import "./{openprops_subdir}/{name}.css";')

    lines.append("")
    lines.append("/* === Tier 2: Showroom (Semantic) === */")
    lines.append('@import "./semantic.css";')

    lines.append("")
    lines.append("/* === Tier 3: App-Specific === */")
    lines.append('@import "./app.css";')
    lines.append("")

    return "\n".join(lines)


APP_CSS_TEMPLATE = """\
/**
 * App-Specific Tokens
 *
 * This file is NOT generated. Add custom tokens here.
 * These tokens are specific to your application.
 */

:root {
  /* Layout */
  --sidebar-width: 240px;
  --sidebar-width-collapsed: 64px;
  --header-height: 56px;

  /* Container Widths */
  --container-sm: 640px;
  --container-md: 768px;
  --container-lg: 1024px;
  --container-xl: 1280px;
}
"""


def generate_app_css() -> str:
    """Generate the app.css starting template."""
    return APP_CSS_TEMPLATE
