"""Shared pytest fixtures for material-tokens tests."""

from __future__ import annotations

import pytest

SIZES_CSS = """\
@import '../src/props.media.css';

:where(html) {
  --size-1: .25rem;
  --size-2: .5rem;
  --size-content-1: 20ch;
  --size-fluid-1: clamp(.5rem, 1vw, 1rem);
}
"""

SHADOWS_CSS = """\
:where(html) {
  --shadow-color: 220 3% 15%;
  --shadow-strength: 1%;
  --shadow-1: 0 1px 2px -1px hsl(var(--shadow-color) / calc(var(--shadow-strength) + 9%));
}

@media (--OSdark) {
  :where(html) {
    --shadow-color: 220 40% 2%;
    --shadow-strength: 25%;
  }
}
"""


@pytest.fixture
def seed() -> str:
    """The Material Theme Builder default seed."""
    return "#769CDF"


@pytest.fixture
def generated_at() -> str:
    """Fixed header timestamp for deterministic output."""
    return "2024-01-02 03:04:05"


@pytest.fixture
def openprops_sources() -> dict[str, str]:
    """Raw upstream CSS for a couple of Open Props files."""
    return {"sizes": SIZES_CSS, "shadows": SHADOWS_CSS}
