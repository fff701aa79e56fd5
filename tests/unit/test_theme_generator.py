"""Tests for Material theme generation and JSON export."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

SCHEME_KEYS = [
    "light",
    "light-medium-contrast",
    "light-high-contrast",
    "dark",
    "dark-medium-contrast",
    "dark-high-contrast",
]


@pytest.fixture
def theme(seed):
    from material_tokens.core.theme_generator import generate_theme

    return generate_theme(seed, now=datetime(2024, 1, 2, 3, 4, 5))


class TestGenerateTheme:
    """Tests for Material Theme Builder document generation."""

    def test_description(self, theme):
        """Test the generated description."""
        assert theme.description == "TYPE: CUSTOM\nMaterial Theme Builder export 2024-01-02 03:04:05"

    def test_seed_normalized(self):
        """Test that the seed is normalized."""
        from material_tokens.core.theme_generator import generate_theme

        theme = generate_theme("769cdf")
        assert theme.seed == "#769CDF"
        assert theme.core_colors.primary == "#769CDF"

    def test_extended_colors_empty(self, theme):
        """Test that extended colors are empty."""
        assert theme.extended_colors == []

    def test_six_schemes(self, seed):
        """Test the six mode and contrast schemes."""
        from material_tokens.core.theme_generator import generate_schemes

        schemes = generate_schemes(seed).model_dump(by_alias=True)
        assert list(schemes) == SCHEME_KEYS

    def test_contrast_levels_differ(self, theme):
        """Test that contrast levels produce different schemes."""
        from material_tokens.core.ir import ContrastLevel

        standard = theme.schemes.get(False, ContrastLevel.STANDARD)
        high = theme.schemes.get(False, ContrastLevel.HIGH)
        assert standard.primary != high.primary

    def test_deterministic_apart_from_timestamp(self, seed):
        """Test that only the timestamp varies between runs."""
        from material_tokens.core.theme_generator import generate_theme

        now = datetime(2025, 6, 1)
        assert generate_theme(seed, "vibrant", now=now) == generate_theme(seed, "vibrant", now=now)

    def test_invalid_seed(self):
        """Test that an invalid seed raises InvalidColor."""
        from material_tokens.core.errors import InvalidColor
        from material_tokens.core.theme_generator import generate_theme

        with pytest.raises(InvalidColor):
            generate_theme("blue")


class TestVariantPreviews:
    """Tests for per-variant previews."""

    def test_one_preview_per_variant(self, seed):
        """Test one preview per scheme variant."""
        from material_tokens.core.ir import SchemeVariant
        from material_tokens.core.theme_generator import generate_variant_previews

        previews = generate_variant_previews(seed)
        assert [p.variant for p in previews] == list(SchemeVariant)

    def test_preview_matches_scheme(self, seed):
        """Test that previews match the full scheme."""
        from material_tokens.core.color_model import build_scheme_colors
        from material_tokens.core.theme_generator import generate_variant_previews

        preview = generate_variant_previews(seed, is_dark=True)[0]
        scheme = build_scheme_colors(seed, preview.variant, True)
        assert preview.primary == scheme.primary
        assert preview.surface == scheme.surface_container


class TestThemeJson:
    """Tests for theme JSON export and import."""

    def test_top_level_key_order(self, theme):
        """Test the exported key order."""
        from material_tokens.core.theme_json import format_theme_json

        data = json.loads(format_theme_json(theme))
        assert list(data) == [
            "description",
            "seed",
            "coreColors",
            "extendedColors",
            "schemes",
            "palettes",
        ]

    def test_four_space_indent(self, theme):
        """Test four-space indentation."""
        from material_tokens.core.theme_json import format_theme_json

        assert '\n    "seed": "#769CDF"' in format_theme_json(theme)

    def test_export_keys(self, theme):
        """Test camelCase role keys in the export."""
        from material_tokens.core.theme_json import format_theme_json

        data = json.loads(format_theme_json(theme))
        assert list(data["schemes"]) == SCHEME_KEYS
        assert "onPrimaryContainer" in data["schemes"]["light"]
        assert "surfaceContainerHighest" in data["schemes"]["dark"]
        assert list(data["palettes"]) == [
            "primary",
            "secondary",
            "tertiary",
            "neutral",
            "neutral-variant",
        ]
        assert len(data["palettes"]["neutral-variant"]) == 18

    def test_parse_round_trip(self, theme):
        """Test parsing exported JSON back into a theme."""
        from material_tokens.core.theme_json import format_theme_json, parse_theme_json

        assert parse_theme_json(format_theme_json(theme)) == theme

    def test_malformed_json(self):
        """Test that malformed JSON raises ParseFailure."""
        from material_tokens.core.errors import ParseFailure
        from material_tokens.core.theme_json import parse_theme_json

        with pytest.raises(ParseFailure, match="Invalid theme JSON"):
            parse_theme_json("{not json")

    def test_missing_required_field(self, theme):
        """Test that a missing field raises ParseFailure."""
        from material_tokens.core.errors import ParseFailure
        from material_tokens.core.theme_json import format_theme_json, parse_theme_json

        data = json.loads(format_theme_json(theme))
        del data["palettes"]
        with pytest.raises(ParseFailure, match="palettes"):
            parse_theme_json(json.dumps(data))

    def test_source_in_message(self):
        """Test that parse errors name the source."""
        from material_tokens.core.errors import ParseFailure
        from material_tokens.core.theme_json import parse_theme_json

        with pytest.raises(ParseFailure, match="theme.json"):
            parse_theme_json("[]", source="theme.json")

    def test_file_round_trip(self, theme, tmp_path):
        """Test exporting to a file and loading it back."""
        from material_tokens.core.theme_json import export_theme_file, load_theme_file

        path = export_theme_file(theme, tmp_path / "out" / "theme.json")
        assert load_theme_file(path) == theme
