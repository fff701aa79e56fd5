"""
Token configuration IR types.

A TokenConfig is resolved once per run (see tokenconfig_loader.merge_config)
and drives the prefixes, file layout, Open Props sources and semantic
category maps of the generated CSS.

Five sections: format, prefixes, output, openprops, semantic.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)

from .theme import ColorFormat

# =============================================================================
# Section 1: Prefixes
# =============================================================================


class PrefixSpec(BaseModel):
    """Custom-property prefix for each tier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    primitives: str = Field(default="op", min_length=1, description="Open Props primitives: --op-*")
    palette: str = Field(default="md", min_length=1, description="Material palettes: --md-*")
    semantic: str = Field(default="ui", min_length=1, description="Semantic tokens: --ui-*")

    @model_validator(mode="after")
    def _distinct(self) -> PrefixSpec:
        values = [self.primitives, self.palette, self.semantic]
        if len(set(values)) != len(values):
            raise ValueError(f"tier prefixes must be distinct, got {values}")
        # "ui-color" under "ui" would shadow --ui-color-* names
        for outer in values:
            for inner in values:
                if inner != outer and inner.startswith(f"{outer}-"):
                    raise ValueError(f"tier prefixes overlap: '{inner}' starts with '{outer}-'")
        return self


# =============================================================================
# Section 2: Output layout
# =============================================================================


class OutputSpec(BaseModel):
    """Output directory structure."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dir: str = Field(default="./tokens", description="Root output directory")
    palette_subdir: str = Field(default="material", description="Subdirectory for palettes.css")
    openprops_subdir: str = Field(
        default="open-props", description="Subdirectory for adapted Open Props files"
    )


# =============================================================================
# Section 3: Open Props sources
# =============================================================================

DEFAULT_OPENPROPS_BASE_URL = "https://raw.githubusercontent.com/argyleink/open-props/main/src"

# Logical file name -> upstream source file
OPENPROPS_SOURCE_FILES: dict[str, str] = {
    "fonts": "props.fonts.css",
    "sizes": "props.sizes.css",
    "shadows": "props.shadows.css",
    "borders": "props.borders.css",
    "easings": "props.easing.css",
    "animations": "props.animations.css",
    "aspects": "props.aspects.css",
    "zindex": "props.zindex.css",
}


class OpenPropsSpec(BaseModel):
    """Which Open Props files to fetch and from where."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(default=DEFAULT_OPENPROPS_BASE_URL, description="Raw source base URL")
    files: tuple[str, ...] = Field(
        default=("fonts", "sizes", "shadows", "borders", "easings"),
        description="Logical Open Props file names",
    )

    @field_validator("files")
    @classmethod
    def _known_files(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in OPENPROPS_SOURCE_FILES]
        if unknown:
            valid = ", ".join(OPENPROPS_SOURCE_FILES)
            raise ValueError(f"unknown Open Props file(s) {unknown}; valid names: {valid}")
        return value


# =============================================================================
# Section 4: Semantic mappings
# =============================================================================

# Read-only once validated; dumps back to a plain dict
TokenMap = Annotated[
    dict[str, str],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[str, str]),
]


class SemanticSpec(BaseModel):
    """Short name -> raw value or primitives token name, per category."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    space: TokenMap = Field(
        default_factory=lambda: {
            "xs": "size-2",
            "sm": "size-3",
            "md": "size-4",
            "lg": "size-5",
            "xl": "size-6",
            "2xl": "size-7",
        }
    )
    radius: TokenMap = Field(
        default_factory=lambda: {
            "none": "0",
            "sm": "radius-2",
            "md": "radius-3",
            "lg": "radius-4",
            "full": "radius-round",
        }
    )
    shadow: TokenMap = Field(
        default_factory=lambda: {
            "sm": "shadow-2",
            "md": "shadow-3",
            "lg": "shadow-4",
            "xl": "shadow-5",
        }
    )
    weight: TokenMap = Field(
        default_factory=lambda: {
            "light": "font-weight-3",
            "normal": "font-weight-4",
            "medium": "font-weight-5",
            "semibold": "font-weight-6",
            "bold": "font-weight-7",
        }
    )
    leading: TokenMap = Field(
        default_factory=lambda: {
            "none": "1",
            "tight": "font-lineheight-1",
            "snug": "font-lineheight-2",
            "normal": "font-lineheight-3",
            "relaxed": "font-lineheight-4",
            "loose": "font-lineheight-5",
        }
    )
    duration: TokenMap = Field(
        default_factory=lambda: {
            "instant": "0ms",
            "fast": "150ms",
            "normal": "300ms",
            "slow": "500ms",
        }
    )
    ease: TokenMap = Field(
        default_factory=lambda: {
            "linear": "ease-1",
            "default": "ease-2",
            "in": "ease-in-2",
            "out": "ease-out-2",
            "in-out": "ease-in-out-2",
        }
    )
    layer: TokenMap = Field(
        default_factory=lambda: {
            "base": "1",
            "raised": "10",
            "dropdown": "100",
            "sticky": "500",
            "modal": "1000",
            "toast": "2000",
        }
    )


SEMANTIC_CATEGORIES: tuple[str, ...] = tuple(SemanticSpec.model_fields)


# =============================================================================
# Root Model
# =============================================================================


class TokenConfig(BaseModel):
    """Resolved token generation configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: ColorFormat = Field(default=ColorFormat.OKLCH, description="Color literal syntax")
    prefixes: PrefixSpec = Field(default_factory=PrefixSpec)
    output: OutputSpec = Field(default_factory=OutputSpec)
    openprops: OpenPropsSpec = Field(default_factory=OpenPropsSpec)
    semantic: SemanticSpec = Field(default_factory=SemanticSpec)


DEFAULT_CONFIG = TokenConfig()
