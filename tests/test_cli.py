"""Tests for the planetary-dem command-line entry point."""

from __future__ import annotations

import json

import pytest

from infrastructure.cli import build_parser, main

pytestmark = pytest.mark.integration


def run_cli(capsys, *argv: str) -> tuple[int, str, str]:
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_info(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    code, out, _ = run_cli(capsys, path, "info")

    assert code == 0
    assert json.loads(out) == {"path": path, "width": 6.0, "height": 4.0}


def test_value(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    code, out, _ = run_cli(capsys, path, "value", "3", "2")

    assert code == 0
    assert json.loads(out)["elevation"] == 203.0


def test_value_out_of_bounds_exits_nonzero(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    code, out, err = run_cli(capsys, path, "value", "7", "0")

    assert code == 1
    assert out == ""
    assert err.startswith("ERROR: Pixel (7.0, 0.0) outside bounds")


def test_area(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    code, out, _ = run_cli(capsys, path, "area", "0", "0", "2", "2")

    assert code == 0
    assert json.loads(out)["elevations"] == [[100.0, 101.0], [0.0, 1.0]]


def test_extrema(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_negative.tif")

    code, out, _ = run_cli(capsys, path, "extrema")

    assert code == 0
    assert json.loads(out) == {"min": -8200.0, "max": -1000.0}


def test_latlong_with_custom_scale(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    # 6x4 grid, centre (3, 2); one pixel spans 10 degrees on a 360-unit sphere,
    # so offsets of -1.75 rows and -2.75 columns give 17.5 S and 27.5 W
    code, out, _ = run_cli(
        capsys,
        "--gsd",
        "10",
        "--radius",
        str(180 / 3.141592653589793),
        path,
        "latlong",
        "0.25",
        "0.25",
    )

    assert code == 0
    assert json.loads(out) == {"latitude": -17.0, "longitude": -27.0}


def test_missing_raster_reports_error(capsys, tmp_path):
    code, _, err = run_cli(capsys, str(tmp_path / "nope.tif"), "info")

    assert code == 1
    assert err.startswith("ERROR:")


def test_invalid_scale_reports_error(capsys, fixtures_dir):
    path = str(fixtures_dir / "mars_dem_known_values.tif")

    code, _, err = run_cli(capsys, "--gsd", "-5", path, "info")

    assert code == 1
    assert "ERROR:" in err


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["dem.tif"])
