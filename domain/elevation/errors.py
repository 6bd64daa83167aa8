"""Elevation Bounded Context - Error Hierarchy.

Custom exceptions for loading elevation rasters and querying them in
pixel space.
"""

from __future__ import annotations


class ElevationError(Exception):
    """Base error for elevation operations."""


# ---------------------------------------------------------------------------
# Load errors
# ---------------------------------------------------------------------------
class LoadError(ElevationError):
    """Raster could not be loaded into an ElevationGrid."""


class RasterNotFoundError(LoadError, FileNotFoundError):
    """Raster path does not exist."""


class InvalidRasterError(LoadError):
    """File is not a valid raster, wrong format, or corrupted."""


class InvalidGeotransformError(LoadError):
    """Raster has invalid or missing geotransform."""


class InsufficientMemoryError(LoadError):
    """Operation requires more memory than allowed or available."""


# ---------------------------------------------------------------------------
# Query errors
# ---------------------------------------------------------------------------
class GridNotLoadedError(ElevationError):
    """Query issued before a raster was successfully loaded."""


class OutOfBoundsError(ElevationError):
    """Pixel coordinate is outside the grid's pixel extent.

    Attributes:
        x: The offending column coordinate
        y: The offending row coordinate
        width: Grid width in pixels
        height: Grid height in pixels
    """

    def __init__(self, x: float, y: float, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Pixel ({x}, {y}) outside bounds [x: 0 to {width}, y: 0 to {height}]"
        )
