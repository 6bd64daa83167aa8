"""Pytest configuration for GIS tests.

test_geotiff_adapter.py monkeypatches rasterio.open with fake datasets;
test_fixtures_sanity.py reads the generated fixtures through real rasterio.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def fixture_path(fixtures_dir: Path):
    """Return a helper resolving a fixture filename to its generated path."""

    def _resolve(name: str) -> Path:
        return fixtures_dir / name

    return _resolve
