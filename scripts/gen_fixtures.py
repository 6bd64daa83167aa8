#!/usr/bin/env python3
"""Generate synthetic GeoTIFF fixtures for the DEM test suite.

Fixtures are minimal synthetic rasters - not real Mars terrain data. The test
suite generates the same files into a temporary directory on its own; this
script is for inspecting them by hand.

Usage:
    python scripts/gen_fixtures.py

Requirements:
    pip install -e .

Output:
    tests/fixtures/*.tif (and .png)
"""

from __future__ import annotations

from pathlib import Path

from shared.fixtures import generate_all
from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def main() -> int:
    """Generate all fixtures.

    Returns:
        0 on success, 1 on failure
    """
    print("=" * 60)
    print("Generating DEM Test Fixtures")
    print("=" * 60)

    try:
        generated = generate_all(FIXTURES_DIR)
    except OSError as e:
        print(f"ERROR: Cannot write fixtures: {e}")
        return 1

    found_set = {p.name for p in generated}
    expected_set = set(EXPECTED_FIXTURES)

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print("\nGenerated files:")
    for f in sorted(generated):
        size = f.stat().st_size
        size_str = f"{size}B" if size < 1024 else f"{size/1024:.1f}KB"
        print(f"  {f.name:40} {size_str:>10}")

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures written to {FIXTURES_DIR}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
