"""Tests for token configuration merging and YAML persistence."""

from __future__ import annotations

import pytest


class TestMergeConfig:
    """Tests for merging overrides onto the defaults."""

    def test_no_overrides_gives_defaults(self):
        """Test that no overrides yields the defaults."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import merge_config

        assert merge_config() == DEFAULT_CONFIG
        assert merge_config({}) == DEFAULT_CONFIG

    def test_section_merges_key_by_key(self):
        """Test key-by-key merging within a section."""
        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config({"prefixes": {"semantic": "app"}})
        assert config.prefixes.semantic == "app"
        assert config.prefixes.primitives == "op"
        assert config.prefixes.palette == "md"

    def test_semantic_category_replaced_wholesale(self):
        """Test that a semantic category replaces the default map."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config({"semantic": {"space": {"gutter": "size-8"}}})
        assert config.semantic.space == {"gutter": "size-8"}
        assert config.semantic.radius == DEFAULT_CONFIG.semantic.radius

    def test_semantic_values_coerced_to_text(self):
        """Test that numeric semantic values become strings."""
        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config({"semantic": {"layer": {"base": 1, "modal": 1000}}})
        assert config.semantic.layer == {"base": "1", "modal": "1000"}

    def test_format_override(self):
        """Test overriding the color format."""
        from material_tokens.core.ir import ColorFormat
        from material_tokens.core.tokenconfig_loader import merge_config

        assert merge_config({"format": "hsl"}).format is ColorFormat.HSL

    def test_result_is_frozen(self):
        """Test that config sections reject assignment."""
        from pydantic import ValidationError

        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config()
        with pytest.raises(ValidationError):
            config.prefixes.semantic = "x"

    def test_semantic_maps_are_read_only(self):
        """Test that semantic category maps cannot be mutated in place."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import load_token_config, merge_config

        for config in (DEFAULT_CONFIG, merge_config(), load_token_config(None)):
            with pytest.raises(TypeError):
                config.semantic.space["xs"] = "size-9"
        assert DEFAULT_CONFIG.semantic.space["xs"] == "size-2"

    def test_semantic_maps_dump_as_dicts(self):
        """Test that read-only semantic maps still serialize as plain dicts."""
        from material_tokens.core.tokenconfig_loader import merge_config

        dumped = merge_config().model_dump(mode="json")
        assert type(dumped["semantic"]["space"]) is dict
        assert dumped["semantic"]["space"]["xs"] == "size-2"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"colour": "red"},
            {"prefixes": {"brand": "br"}},
            {"semantic": {"spacing": {}}},
            {"output": {"directory": "out"}},
        ],
    )
    def test_unknown_keys_rejected(self, overrides):
        """Test that unknown keys raise InvalidConfig."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig, match="unknown key"):
            merge_config(overrides)

    def test_wrong_section_type(self):
        """Test that a non-mapping section raises InvalidConfig."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig, match="expected a mapping"):
            merge_config({"prefixes": "ui"})

    def test_colliding_prefixes_rejected(self):
        """Test that duplicate tier prefixes are rejected."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig, match="distinct"):
            merge_config({"prefixes": {"semantic": "op"}})

    @pytest.mark.parametrize(
        "prefixes",
        [
            {"primitives": "ui-color"},
            {"palette": "op-md"},
            {"semantic": "md-ui"},
        ],
    )
    def test_overlapping_prefixes_rejected(self, prefixes):
        """Test that a prefix nested under another tier's prefix is rejected."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig, match="overlap"):
            merge_config({"prefixes": prefixes})

    def test_prefix_sharing_leading_letters_allowed(self):
        """Test that prefixes without a hyphen boundary do not collide."""
        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config({"prefixes": {"primitives": "uix"}})
        assert config.prefixes.primitives == "uix"

    def test_unknown_openprops_file_rejected(self):
        """Test that unknown Open Props names are rejected."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig, match="colors"):
            merge_config({"openprops": {"files": ["sizes", "colors"]}})

    def test_unknown_format_rejected(self):
        """Test that an unknown format is rejected."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import merge_config

        with pytest.raises(InvalidConfig):
            merge_config({"format": "cmyk"})

    def test_cli_overrides(self):
        """Test applying --format and --output over a config."""
        from material_tokens.core.ir import ColorFormat
        from material_tokens.core.tokenconfig_loader import merge_config, with_cli_overrides

        base = merge_config({"output": {"palette_subdir": "m3"}})
        config = with_cli_overrides(base, format="hex", output_dir="out/tokens")
        assert config.format is ColorFormat.HEX
        assert config.output.dir == "out/tokens"
        assert config.output.palette_subdir == "m3"

    def test_cli_overrides_noop(self):
        """Test that no CLI flags returns the config unchanged."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import with_cli_overrides

        assert with_cli_overrides(DEFAULT_CONFIG) is DEFAULT_CONFIG


class TestLoadTokenConfig:
    """Tests for YAML config loading and saving."""

    def test_none_gives_defaults(self):
        """Test that no path yields the defaults."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import load_token_config

        assert load_token_config(None) == DEFAULT_CONFIG

    def test_yaml_overrides(self, tmp_path):
        """Test loading overrides from YAML."""
        from material_tokens.core.tokenconfig_loader import load_token_config

        path = tmp_path / "tokens.yaml"
        path.write_text(
            "format: rgb\n"
            "openprops:\n"
            "  files: [sizes, shadows]\n"
            "semantic:\n"
            "  duration:\n"
            "    quick: 100ms\n"
        )
        config = load_token_config(path)
        assert config.format == "rgb"
        assert config.openprops.files == ("sizes", "shadows")
        assert config.semantic.duration == {"quick": "100ms"}

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file yields the defaults."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.tokenconfig_loader import load_token_config

        path = tmp_path / "tokens.yaml"
        path.write_text("")
        assert load_token_config(path) == DEFAULT_CONFIG

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises InvalidConfig."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import load_token_config

        path = tmp_path / "tokens.yaml"
        path.write_text("prefixes: [unclosed\n")
        with pytest.raises(InvalidConfig, match="Invalid YAML"):
            load_token_config(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises InvalidConfig."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import load_token_config

        with pytest.raises(InvalidConfig, match="Cannot read"):
            load_token_config(tmp_path / "missing.yaml")

    def test_error_names_file(self, tmp_path):
        """Test that errors name the file and key."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.tokenconfig_loader import load_token_config

        path = tmp_path / "tokens.yaml"
        path.write_text("prefixes:\n  brand: br\n")
        with pytest.raises(InvalidConfig) as exc_info:
            load_token_config(path)
        assert str(path) in str(exc_info.value)
        assert "[prefixes]" in str(exc_info.value)

    def test_save_then_load(self, tmp_path):
        """Test saving a config and loading it back."""
        from material_tokens.core.tokenconfig_loader import (
            get_tokenconfig_path,
            load_token_config,
            merge_config,
            save_token_config,
        )

        config = merge_config({"format": "hex", "prefixes": {"semantic": "app"}})
        path = save_token_config(config, get_tokenconfig_path(tmp_path))
        assert path.name == "tokens.yaml"
        assert load_token_config(path) == config
