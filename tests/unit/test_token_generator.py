"""Tests for the token generation pipeline."""

from __future__ import annotations

import httpx
import pytest


@pytest.fixture
def file_set(seed, openprops_sources, generated_at):
    from material_tokens.core.ir import DEFAULT_CONFIG
    from material_tokens.core.token_generator import build_token_files

    return build_token_files(seed, DEFAULT_CONFIG, openprops_sources, generated_at=generated_at)


class TestBuildTokenFiles:
    """Tests for rendering the token file set."""

    def test_paths(self, file_set):
        """Test the rendered file paths."""
        assert file_set.paths == [
            "app.css",
            "index.css",
            "material/palettes.css",
            "open-props/shadows.css",
            "open-props/sizes.css",
            "semantic.css",
        ]
        assert list(file_set.scaffolds) == ["app.css"]

    def test_deterministic(self, seed, openprops_sources, generated_at, file_set):
        """Test that rendering is deterministic."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.token_generator import build_token_files

        again = build_token_files(
            seed, DEFAULT_CONFIG, openprops_sources, generated_at=generated_at
        )
        assert again == file_set

    def test_palettes_include_error(self, file_set):
        """Test that palettes.css includes the error palette."""
        css = file_set.files["material/palettes.css"]
        assert "--md-palette-error-40: oklch(" in css
        assert "--md-palette-neutral-variant-99: oklch(" in css

    def test_semantic_uses_light_dark(self, file_set):
        """Test that semantic.css uses light-dark()."""
        css = file_set.files["semantic.css"]
        assert "--ui-color-primary: light-dark(oklch(" in css
        assert "--ui-color-surface-container-highest: light-dark(" in css

    def test_openprops_prefixed_and_tinted(self, seed, file_set):
        """Test that primitives are prefixed and tinted."""
        from material_tokens.core.oklch import get_hue

        hue = round(get_hue(seed))
        assert "--op-size-1: .25rem;" in file_set.files["open-props/sizes.css"]
        assert f"--op-shadow-color: {hue} 10% 15%;" in file_set.files["open-props/shadows.css"]

    def test_index_imports_configured_files(self, file_set):
        """Test that index.css imports the configured files."""
        css = file_set.files["index.css"]
        assert '@import "./open-props/shadows.css";' in css
        assert '@import "./open-props/sizes.css";' in css
        assert "fonts.css" not in css

    def test_contrast_changes_semantic_only(self, seed, openprops_sources, generated_at, file_set):
        """Test that contrast only affects semantic.css."""
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.token_generator import build_token_files

        high = build_token_files(
            seed, DEFAULT_CONFIG, openprops_sources, contrast="high", generated_at=generated_at
        )
        assert high.files["semantic.css"] != file_set.files["semantic.css"]
        assert high.files["material/palettes.css"] == file_set.files["material/palettes.css"]

    def test_custom_prefixes_do_not_collide(self, seed, openprops_sources, generated_at):
        """Test rendering with custom prefixes."""
        from material_tokens.core.token_generator import build_token_files
        from material_tokens.core.tokenconfig_loader import merge_config

        config = merge_config(
            {
                "format": "hex",
                "prefixes": {"primitives": "p", "palette": "m", "semantic": "s"},
                "output": {"palette_subdir": "m3", "openprops_subdir": "prims"},
            }
        )
        files = build_token_files(seed, config, openprops_sources, generated_at=generated_at).files
        assert "--m-palette-primary-40: #" in files["m3/palettes.css"]
        assert "--p-size-1:" in files["prims/sizes.css"]
        assert "--s-color-primary: light-dark(#" in files["semantic.css"]
        assert "--s-space-sm: var(--p-size-3);" in files["semantic.css"]
        assert '@import "./prims/sizes.css";' in files["index.css"]
        for content in files.values():
            assert "--op-" not in content
            assert "--md-palette" not in content

    def test_unknown_source_name(self, seed):
        """Test that an unknown source name raises InvalidConfig."""
        from material_tokens.core.errors import InvalidConfig
        from material_tokens.core.ir import DEFAULT_CONFIG
        from material_tokens.core.token_generator import build_token_files

        with pytest.raises(InvalidConfig):
            build_token_files(seed, DEFAULT_CONFIG, {"colors": ""})


class TestWriteFileSet:
    """Tests for writing the file set to disk."""

    def test_writes_all_files(self, file_set, tmp_path):
        """Test that every file is written."""
        from material_tokens.core.token_generator import write_file_set

        report = write_file_set(file_set, tmp_path)
        assert (tmp_path / "material" / "palettes.css").exists()
        assert (tmp_path / "open-props" / "sizes.css").exists()
        assert (tmp_path / "app.css").exists()
        assert len(report.written) == 5
        assert report.created == [tmp_path / "app.css"]
        assert report.skipped == []

    def test_app_css_never_overwritten(self, file_set, tmp_path):
        """Test that an existing app.css is kept."""
        from material_tokens.core.token_generator import write_file_set

        write_file_set(file_set, tmp_path)
        app_css = tmp_path / "app.css"
        app_css.write_text(":root { --brand: hotpink; }\n")

        report = write_file_set(file_set, tmp_path)
        assert app_css.read_text() == ":root { --brand: hotpink; }\n"
        assert report.skipped == [app_css]
        assert report.created == []

    def test_generated_files_overwritten(self, file_set, tmp_path):
        """Test that generated files are overwritten."""
        from material_tokens.core.token_generator import write_file_set

        (tmp_path / "semantic.css").write_text("stale")
        write_file_set(file_set, tmp_path)
        assert (tmp_path / "semantic.css").read_text() == file_set.files["semantic.css"]


class TestGenerateTokens:
    """Tests for the end-to-end token pipeline."""

    @pytest.mark.asyncio
    async def test_end_to_end(self, seed, openprops_sources, tmp_path):
        """Test a full run against a mock transport."""
        from material_tokens.core.token_generator import generate_tokens
        from material_tokens.core.tokenconfig_loader import merge_config

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("props.shadows.css"):
                return httpx.Response(200, text=openprops_sources["shadows"])
            return httpx.Response(200, text=openprops_sources["sizes"])

        out = tmp_path / "tokens"
        config = merge_config(
            {"output": {"dir": str(out)}, "openprops": {"files": ["sizes", "shadows"]}}
        )
        report = await generate_tokens(
            seed, config=config, transport=httpx.MockTransport(handler)
        )

        assert report.output_dir == out
        assert (out / "index.css").exists()
        assert (out / "open-props" / "shadows.css").exists()
        assert (out / "app.css").exists()

    @pytest.mark.asyncio
    async def test_fetch_failure_writes_nothing(self, seed, tmp_path):
        """Test that a fetch failure leaves no files."""
        from material_tokens.core.errors import FetchFailure
        from material_tokens.core.token_generator import generate_tokens
        from material_tokens.core.tokenconfig_loader import merge_config

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        out = tmp_path / "tokens"
        config = merge_config({"output": {"dir": str(out)}})
        with pytest.raises(FetchFailure):
            await generate_tokens(seed, config=config, transport=httpx.MockTransport(handler))
        assert not out.exists()

    @pytest.mark.asyncio
    async def test_invalid_seed_before_fetch(self, tmp_path):
        """Test that the seed is validated before fetching."""
        from material_tokens.core.errors import InvalidColor
        from material_tokens.core.token_generator import generate_tokens
        from material_tokens.core.tokenconfig_loader import merge_config

        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            return httpx.Response(200, text="")

        config = merge_config({"output": {"dir": str(tmp_path / "tokens")}})
        with pytest.raises(InvalidColor):
            await generate_tokens("#zzz", config=config, transport=httpx.MockTransport(handler))
        assert calls["n"] == 0
