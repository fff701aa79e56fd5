"""
Open Props adapter.

Fetches raw Open Props stylesheets and rewrites them into the primitives
tier: imports stripped, selectors normalized, every custom-property
declaration prefixed, and shadow colors tinted with the seed hue.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable

import httpx

from .css import generate_header
from .errors import make_config_error, make_fetch_failure
from .ir.tokenconfig import OPENPROPS_SOURCE_FILES
from .oklch import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# =============================================================================
# Transformation
# =============================================================================

_IMPORT_RE = re.compile(r"""@import\s+['"][^'"]+['"]\s*;?\s*\n?""")
_WHERE_HTML_RE = re.compile(r":where\(html\)")
_OSDARK_RE = re.compile(r"@media\s*\(--OSdark\)\s*\{")
_SHADOW_COLOR_RE = re.compile(r"(--shadow-color:\s*)[\d\s%]+;")
_DARK_BLOCK_RE = re.compile(
    r"@media\s*\(prefers-color-scheme:\s*dark\)\s*\{\s*:(?:root|where\(html\))\s*\{([^}]+)\}\s*\}"
)
# A declaration starts a line or follows whitespace, ";" or "{". References
# such as var(--x) are preceded by "(" and therefore never match.
_DECLARATION_RE = re.compile(r"(^|\s|;|\{)--([a-zA-Z][\w-]*)\s*:", re.MULTILINE)


def validate_openprops_files(names: Iterable[str]) -> list[str]:
    """Check logical Open Props names against the known source files.

    Returns:
        The names as a list, in input order.

    Raises:
        InvalidConfig: If any name is unknown.
    """
    names = list(names)
    unknown = [name for name in names if name not in OPENPROPS_SOURCE_FILES]
    if unknown:
        raise make_config_error(
            f"Unknown Open Props file(s): {', '.join(unknown)}. "
            f"Valid names: {', '.join(OPENPROPS_SOURCE_FILES)}",
            key="openprops.files",
        )
    return names


def _inject_shadow_color(css: str, seed_hue: float) -> str:
    hue = round_half_up(seed_hue)
    light_color = f"{hue} 10% 15%"
    dark_color = f"{hue} 30% 5%"

    css = _SHADOW_COLOR_RE.sub(lambda m: f"{m.group(1)}{light_color};", css)

    match = _DARK_BLOCK_RE.search(css)
    if match is None:
        return css

    dark_content = _SHADOW_COLOR_RE.sub(lambda m: f"{m.group(1)}{dark_color};", match.group(1))
    replacement = (
        f'[data-theme="dark"] {{{dark_content}}}\n'
        "\n"
        "@media (prefers-color-scheme: dark) {\n"
        f'  :root:not([data-theme="light"]) {{{dark_content}}}\n'
        "}"
    )
    return css[: match.start()] + replacement + css[match.end() :]


def transform_openprops_css(css: str, name: str, seed_hue: float) -> str:
    """Normalize an upstream Open Props stylesheet.

    Args:
        css: Raw upstream CSS.
        name: Logical file name; "shadows" gets seed-tinted shadow colors.
        seed_hue: Seed hue in degrees.

    Returns:
        Transformed CSS, stripped of surrounding whitespace.
    """
    css = _IMPORT_RE.sub("", css)
    css = _WHERE_HTML_RE.sub(":root", css)
    css = _OSDARK_RE.sub("@media (prefers-color-scheme: dark) {", css)

    if name == "shadows":
        css = _inject_shadow_color(css, seed_hue)

    return css.strip()


def prefix_custom_properties(css: str, prefix: str) -> str:
    """Prefix custom-property declarations: ``--size-3:`` -> ``--op-size-3:``.

    Only declarations are rewritten; ``var(--size-3)`` references are left
    as they are.
    """
    return _DECLARATION_RE.sub(lambda m: f"{m.group(1)}--{prefix}-{m.group(2)}:", css)


def generate_openprops_css(
    name: str,
    content: str,
    prefix: str,
    seed_hue: float,
    *,
    generated_at: str | None = None,
) -> str:
    """Render one primitives-tier file from raw upstream CSS."""
    body = prefix_custom_properties(transform_openprops_css(content, name, seed_hue), prefix)
    header = generate_header(
        f"{name[:1].upper()}{name[1:]} Tokens",
        "Open Props (https://open-props.style)",
        generated_at=generated_at,
    )
    return f"{header}{body}\n"


# =============================================================================
# Fetching
# =============================================================================


async def fetch_openprops(
    client: httpx.AsyncClient,
    base_url: str,
    name: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Fetch one raw Open Props stylesheet.

    Raises:
        InvalidConfig: If the name is unknown.
        FetchFailure: On non-success status, transport error or timeout.
    """
    validate_openprops_files([name])
    url = f"{base_url.rstrip('/')}/{OPENPROPS_SOURCE_FILES[name]}"

    logger.debug(f"Fetching {url}")
    try:
        response = await client.get(url, timeout=timeout)
    except httpx.TimeoutException as e:
        raise make_fetch_failure(f"Timed out after {timeout}s", url) from e
    except httpx.HTTPError as e:
        raise make_fetch_failure(f"Request failed: {e}", url) from e

    if response.is_error:
        raise make_fetch_failure(f"HTTP {response.status_code}", url)

    return response.text


async def fetch_all_openprops(
    base_url: str,
    names: Iterable[str],
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, str]:
    """Fetch several Open Props stylesheets concurrently.

    All names are validated before any request is made. The first failure
    aborts the whole batch.

    Args:
        base_url: Raw source base URL.
        names: Logical file names.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).

    Returns:
        Logical name -> raw CSS, in input order.

    Raises:
        InvalidConfig: If any name is unknown.
        FetchFailure: If any request fails.
    """
    names = validate_openprops_files(names)
    if not names:
        return {}

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        results = await asyncio.gather(
            *(fetch_openprops(client, base_url, name, timeout) for name in names),
            return_exceptions=True,
        )

    contents: list[str] = []
    for result in results:
        if isinstance(result, BaseException):
            raise result
        contents.append(result)

    logger.info(f"Fetched {len(names)} Open Props file(s)")
    return dict(zip(names, contents, strict=True))
