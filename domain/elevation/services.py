"""Elevation Bounded Context - Domain Services.

Pure domain logic for pixel-space coordinate conversion.
NO I/O operations.
"""

from __future__ import annotations

import logging

from domain.elevation.value_objects import (
    CoordinateUnits,
    PixelCoordinate,
    PlanetaryScale,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Arc Length -> Angle
# ---------------------------------------------------------------------------
def arc_length_to_degrees(arc_length: float, scale: PlanetaryScale) -> float:
    """Convert a surface arc length to the angle it subtends, in degrees.

    Treats the body as a sphere of radius scale.body_radius.
    """
    return (360 * arc_length) / scale.circumference


def _offset_to_degrees(
    pixel_offset: float, scale: PlanetaryScale
) -> tuple[float, bool]:
    """Return (unsigned degrees, is_negative) for a signed pixel offset."""
    arc_length = pixel_offset * scale.ground_sample_distance
    is_negative = arc_length < 0
    if is_negative:
        arc_length = -arc_length
    return arc_length_to_degrees(arc_length, scale), is_negative


# ---------------------------------------------------------------------------
# Main Service: pixel_to_planetographic
# ---------------------------------------------------------------------------
def pixel_to_planetographic(
    coord: PixelCoordinate,
    width: int,
    height: int,
    scale: PlanetaryScale | None = None,
) -> PixelCoordinate:
    """Convert a pixel coordinate to whole-degree planetographic lat/long.

    The image centre is taken as the intersection of the equator and the
    prime meridian; this is not a georeferenced origin. Offsets from the
    centre are scaled by the ground sample distance into arc lengths on a
    sphere, converted to degrees and truncated toward zero.

    Rows above the centre give negative (south) latitudes and columns left
    of the centre give negative (west) longitudes.

    Args:
        coord: Coordinate to convert. Returned unchanged unless tagged "pixels".
        width: Raster width in pixels
        height: Raster height in pixels
        scale: Ground sample distance and body radius. Defaults to the
            Mars reference mosaic (5 m/pixel, 3,396,200 m radius).

    Returns:
        New PixelCoordinate tagged "latLong" with x = latitude and
        y = longitude. The input is never modified.

    Example:
        >>> centre = PixelCoordinate(x=50, y=50)
        >>> pixel_to_planetographic(centre, width=100, height=100)
        PixelCoordinate(x=0.0, y=0.0, units=<CoordinateUnits.LAT_LONG: 'latLong'>)
    """
    if coord.units != CoordinateUnits.PIXELS:
        return coord

    if scale is None:
        scale = PlanetaryScale()

    equator = height / 2
    prime_meridian = width / 2

    pixel_distance_latitude = coord.y - equator
    pixel_distance_longitude = coord.x - prime_meridian
    logger.debug(
        "Pixel (%s, %s): equator row %s, prime meridian column %s",
        coord.x,
        coord.y,
        equator,
        prime_meridian,
    )
    logger.debug(
        "Pixel offsets: latitude %s, longitude %s",
        pixel_distance_latitude,
        pixel_distance_longitude,
    )

    latitude, is_south = _offset_to_degrees(pixel_distance_latitude, scale)
    longitude, is_west = _offset_to_degrees(pixel_distance_longitude, scale)
    logger.debug(
        "Unsigned angles: latitude %s deg, longitude %s deg", latitude, longitude
    )

    if is_south:
        latitude = -latitude
    if is_west:
        longitude = -longitude

    # int() truncates toward zero; -0.4 -> 0
    return PixelCoordinate(
        x=int(latitude), y=int(longitude), units=CoordinateUnits.LAT_LONG
    )
