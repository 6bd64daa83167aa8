"""Tests for pixel_to_planetographic domain service.

At the default scale (5 m/pixel on a 3,396,200 m sphere) one degree spans
roughly 11,855 pixels, so hemisphere tests use wide synthetic extents; no
samples are needed because the conversion only uses the raster dimensions.
"""

from __future__ import annotations

import logging
import math

import pytest

from domain.elevation.services import arc_length_to_degrees, pixel_to_planetographic
from domain.elevation.value_objects import (
    CoordinateUnits,
    PixelCoordinate,
    PlanetaryScale,
)

# Wide enough for several whole degrees in every direction at 5 m/pixel
WIDTH = 200_000
HEIGHT = 100_000
PIXELS_PER_DEGREE = (2 * math.pi * 3_396_200) / 360 / 5


def expected_degrees(pixel_offset: float) -> int:
    return math.trunc(360 * pixel_offset * 5 / (2 * math.pi * 3_396_200))


# ===========================================================================
# No-op for non-pixel coordinates
# ===========================================================================
def test_lat_long_coordinate_returned_unchanged():
    coord = PixelCoordinate(x=12, y=-40, units=CoordinateUnits.LAT_LONG)

    result = pixel_to_planetographic(coord, WIDTH, HEIGHT)

    assert result is coord
    assert result == PixelCoordinate(x=12, y=-40, units="latLong")


# ===========================================================================
# Centre maps to the equator / prime meridian
# ===========================================================================
@pytest.mark.parametrize("width, height", [(100, 100), (5, 3), (WIDTH, HEIGHT)])
def test_centre_pixel_is_origin(width, height):
    coord = PixelCoordinate(x=width / 2, y=height / 2)

    result = pixel_to_planetographic(coord, width, height)

    assert (result.x, result.y) == (0, 0)
    assert result.units == "latLong"


def test_returns_new_coordinate_and_leaves_input_untouched():
    coord = PixelCoordinate(x=10, y=10)

    result = pixel_to_planetographic(coord, 100, 100)

    assert result is not coord
    assert coord == PixelCoordinate(x=10, y=10)
    assert coord.units == CoordinateUnits.PIXELS


# ===========================================================================
# Hemisphere signs
# ===========================================================================
class TestHemispheres:
    offset = 30_000  # about 2.5 degrees

    def convert(self, dx: float, dy: float) -> PixelCoordinate:
        coord = PixelCoordinate(x=WIDTH / 2 + dx, y=HEIGHT / 2 + dy)
        return pixel_to_planetographic(coord, WIDTH, HEIGHT)

    def test_row_above_centre_is_south(self):
        assert self.convert(0, -self.offset).x < 0

    def test_row_below_centre_is_north(self):
        assert self.convert(0, self.offset).x > 0

    def test_column_left_of_centre_is_west(self):
        assert self.convert(-self.offset, 0).y < 0

    def test_column_right_of_centre_is_east(self):
        assert self.convert(self.offset, 0).y > 0

    def test_symmetric_magnitudes(self):
        south = self.convert(0, -self.offset)
        north = self.convert(0, self.offset)
        east = self.convert(self.offset, 0)
        west = self.convert(-self.offset, 0)

        assert north.x == -south.x
        assert east.y == -west.y
        assert north.x == east.y == expected_degrees(self.offset)


# ===========================================================================
# Arithmetic
# ===========================================================================
def test_truncates_toward_zero():
    # Just short of 3 degrees east and 3 degrees north
    near = 3 * PIXELS_PER_DEGREE - 1
    coord = PixelCoordinate(x=WIDTH / 2 + near, y=HEIGHT / 2 + near)

    result = pixel_to_planetographic(coord, WIDTH, HEIGHT)

    assert (result.x, result.y) == (2, 2)


def test_small_offsets_truncate_to_zero():
    result = pixel_to_planetographic(PixelCoordinate(x=0, y=0), 100, 100)
    assert (result.x, result.y) == (0, 0)


def test_custom_scale():
    # 1.25 degrees per pixel on a sphere of circumference 360
    scale = PlanetaryScale(ground_sample_distance=1.25, body_radius=180 / math.pi)
    coord = PixelCoordinate(x=15, y=3)

    result = pixel_to_planetographic(coord, 20, 10, scale)

    # 2.5 degrees south and 6.25 degrees east, truncated
    assert (result.x, result.y) == (-2, 6)


def test_arc_length_to_degrees_quarter_circumference():
    scale = PlanetaryScale()
    assert arc_length_to_degrees(scale.circumference / 4, scale) == pytest.approx(90)


def test_intermediate_values_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="domain.elevation.services")

    pixel_to_planetographic(PixelCoordinate(x=10, y=20), 100, 100)

    assert "Pixel offsets: latitude -30.0, longitude -40.0" in caplog.text
    assert "Unsigned angles" in caplog.text


def test_both_axes_negate_negative_offsets():
    # 1.75 pixels above and left of centre: 17.5 degrees south and west
    scale = PlanetaryScale(ground_sample_distance=10, body_radius=180 / math.pi)
    coord = PixelCoordinate(x=8.25, y=3.25)

    result = pixel_to_planetographic(coord, 20, 10, scale)

    assert (result.x, result.y) == (-17, -17)
