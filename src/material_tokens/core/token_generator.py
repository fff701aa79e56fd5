"""
Design token generation pipeline.

Ties the three CSS tiers together: rendering is pure (build_token_files),
writing is a separate step (write_file_set), and generate_tokens runs
validate -> fetch -> build -> write end to end.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from .color_model import build_palettes, build_scheme_colors, resolve_contrast, resolve_variant
from .css import generate_app_css, generate_index_css
from .ir.theme import ContrastLevel, SchemeVariant
from .ir.tokenconfig import DEFAULT_CONFIG, TokenConfig
from .oklch import get_hue, normalize_hex, round_half_up
from .openprops import (
    DEFAULT_TIMEOUT,
    fetch_all_openprops,
    generate_openprops_css,
    validate_openprops_files,
)
from .palettes_css import generate_palettes_css
from .semantic_css import generate_semantic_css

logger = logging.getLogger(__name__)

APP_CSS = "app.css"
INDEX_CSS = "index.css"
SEMANTIC_CSS = "semantic.css"
PALETTES_CSS = "palettes.css"


@dataclass(frozen=True)
class GeneratedFileSet:
    """Rendered output, keyed by path relative to the output directory.

    Attributes:
        files: Regenerated on every run.
        scaffolds: Written once and never overwritten.
    """

    files: dict[str, str]
    scaffolds: dict[str, str] = field(default_factory=dict)

    @property
    def paths(self) -> list[str]:
        return sorted([*self.files, *self.scaffolds])


@dataclass
class WriteReport:
    """Result of writing a GeneratedFileSet."""

    output_dir: Path
    written: list[Path] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def build_token_files(
    seed: str,
    config: TokenConfig,
    openprops_sources: Mapping[str, str],
    *,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    contrast: ContrastLevel | str = ContrastLevel.STANDARD,
    generated_at: str | None = None,
) -> GeneratedFileSet:
    """Render every token file for a seed.

    Args:
        seed: Seed hex color.
        config: Resolved configuration.
        openprops_sources: Logical Open Props name -> raw upstream CSS.
        variant: Scheme variant.
        contrast: Contrast level for the semantic tier.
        generated_at: Header timestamp shared by all files.

    Returns:
        GeneratedFileSet with app.css as the only scaffold.

    Raises:
        InvalidColor: If the seed is not a hex color.
        InvalidConfig: If the variant, contrast or a source name is unknown.
    """
    seed = normalize_hex(seed)
    variant = resolve_variant(variant)
    contrast = resolve_contrast(contrast)
    names = validate_openprops_files(openprops_sources)

    seed_hue = get_hue(seed)
    prefixes = config.prefixes
    output = config.output

    files: dict[str, str] = {}

    palettes = build_palettes(seed, variant, include_error=True)
    files[f"{output.palette_subdir}/{PALETTES_CSS}"] = generate_palettes_css(
        palettes.as_palettes(), seed, prefixes, config.format, generated_at=generated_at
    )

    for name in names:
        files[f"{output.openprops_subdir}/{name}.css"] = generate_openprops_css(
            name,
            openprops_sources[name],
            prefixes.primitives,
            seed_hue,
            generated_at=generated_at,
        )

    light = build_scheme_colors(seed, variant, False, contrast)
    dark = build_scheme_colors(seed, variant, True, contrast)
    files[SEMANTIC_CSS] = generate_semantic_css(
        light.as_roles(),
        dark.as_roles(),
        config.semantic,
        prefixes,
        config.format,
        seed_hue,
        generated_at=generated_at,
    )

    files[INDEX_CSS] = generate_index_css(
        names,
        prefixes,
        output.palette_subdir,
        output.openprops_subdir,
        generated_at=generated_at,
    )

    return GeneratedFileSet(files=files, scaffolds={APP_CSS: generate_app_css()})


def write_file_set(file_set: GeneratedFileSet, output_dir: Path) -> WriteReport:
    """Write rendered files below output_dir.

    Regular files are overwritten. Scaffolds are opened with exclusive
    create, so an existing file is left untouched.
    """
    report = WriteReport(output_dir=output_dir)

    for rel_path, content in file_set.files.items():
        path = output_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        report.written.append(path)
        logger.debug(f"Wrote {path}")

    for rel_path, content in file_set.scaffolds.items():
        path = output_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            report.skipped.append(path)
            logger.info(f"Skipping {rel_path} (already exists)")
            continue
        report.created.append(path)
        logger.info(f"Created {rel_path} template")

    return report


async def generate_tokens(
    seed: str,
    *,
    config: TokenConfig = DEFAULT_CONFIG,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    contrast: ContrastLevel | str = ContrastLevel.STANDARD,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WriteReport:
    """Generate all design token CSS files from a seed color.

    Nothing is written unless every fetch succeeds.

    Args:
        seed: Seed hex color.
        config: Resolved configuration; output.dir is the destination.
        variant: Scheme variant.
        contrast: Contrast level for the semantic tier.
        timeout: Per-request fetch timeout in seconds.
        transport: Optional httpx transport for the Open Props fetch.

    Returns:
        WriteReport describing what was written.

    Raises:
        InvalidColor: If the seed is not a hex color.
        InvalidConfig: If the variant, contrast or an Open Props name is unknown.
        FetchFailure: If any Open Props file cannot be fetched.
    """
    seed = normalize_hex(seed)
    variant = resolve_variant(variant)
    contrast = resolve_contrast(contrast)
    names = validate_openprops_files(config.openprops.files)
    output_dir = Path(config.output.dir)

    logger.info(f"Generating design tokens to {output_dir}/")
    logger.info(f"Seed color: {seed} (scheme: {variant.value}, contrast: {contrast.value})")
    logger.info(f"Seed hue: {round_half_up(get_hue(seed))}")

    logger.info(f"Fetching {len(names)} Open Props file(s)")
    sources = await fetch_all_openprops(
        config.openprops.base_url, names, timeout=timeout, transport=transport
    )

    file_set = build_token_files(seed, config, sources, variant=variant, contrast=contrast)
    report = write_file_set(file_set, output_dir)

    logger.info(f"Generated {len(report.written)} file(s) in {output_dir}")
    return report
