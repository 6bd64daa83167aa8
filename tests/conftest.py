"""Root pytest configuration for all tests.

GeoTIFF fixtures are synthetic and written once per session into a
temporary directory by shared/fixtures.py, so no binary files are checked in.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from shared.fixtures import generate_all


@pytest.fixture(scope="session")
def fixtures_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory holding every fixture listed in shared/fixtures_expected.py."""
    out_dir = tmp_path_factory.mktemp("fixtures")
    generate_all(out_dir)
    return out_dir
