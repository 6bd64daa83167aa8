"""Single source of truth for expected DEM test fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/gis/test_fixtures_sanity.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "corrupted.tif",  # Not a TIFF despite the extension
        "elevation.png",  # Disallowed extension
        "empty.tif",  # Zero-byte file
        "mars_dem_eqc.tif",  # Mars equirectangular CRS, MOLA-like 463 m pixels
        "mars_dem_known_values.tif",  # value = row * 100 + col, no CRS
        "mars_dem_mostly_nodata.tif",  # >80% declared NoData
        "mars_dem_negative.tif",  # Entirely below datum
        "rgb_image.tif",  # Three bands
    ]
)

EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
