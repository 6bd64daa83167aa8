"""Elevation Bounded Context - Raster Store.

Owns one decoded ElevationGrid and answers pixel-space queries against it.
Decoding is delegated to a RasterDecoder port implementation.

Each store instance holds its own grid; stores are not thread-safe and
callers must serialize a reload against in-flight queries.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from domain.elevation.errors import GridNotLoadedError, OutOfBoundsError
from domain.elevation.repositories import RasterDecoder
from domain.elevation.services import pixel_to_planetographic
from domain.elevation.value_objects import (
    AreaRequest,
    ElevationGrid,
    PixelCoordinate,
    PlanetaryScale,
)

logger = logging.getLogger(__name__)


class RasterStore:
    """Pixel-indexed access to a single elevation raster.

    Parameters
    ----------
    decoder: RasterDecoder
        Adapter used by load() to turn a file path into an ElevationGrid.
    """

    def __init__(self, decoder: RasterDecoder) -> None:
        self.decoder = decoder
        self._grid: ElevationGrid | None = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, path: Path | str, scale: PlanetaryScale | None = None) -> None:
        """Decode the raster at path and make it the store's grid.

        The previous grid is dropped before decoding. If decoding fails the
        LoadError propagates and the store stays unloaded until a later load
        succeeds.
        """
        self._grid = None
        grid = self.decoder.load_grid(path, scale)
        self._grid = grid
        logger.info(
            "Loaded elevation grid %s (%dx%d)",
            Path(grid.source_path).name,
            grid.width,
            grid.height,
        )

    @property
    def grid(self) -> ElevationGrid:
        if self._grid is None:
            raise GridNotLoadedError("No elevation raster has been loaded")
        return self._grid

    @property
    def is_loaded(self) -> bool:
        return self._grid is not None

    def map_path(self) -> str:
        """Return the path of the raster that produced the current grid."""
        return self.grid.source_path

    def get_width(self) -> float:
        return float(self.grid.width)

    def get_height(self) -> float:
        return float(self.grid.height)

    # ------------------------------------------------------------------
    # Point lookup
    # ------------------------------------------------------------------
    def get_value(self, x: float, y: float) -> float:
        """Return the elevation at pixel (x, y).

        Accepts 0 <= x <= width and 0 <= y <= height; the upper bounds are
        inclusive. The pixel position is located on the raster envelope and
        resolved back to a cell through the grid's geotransform.

        Raises:
            OutOfBoundsError: If (x, y) lies outside the accepted range
            GridNotLoadedError: If no raster is loaded
        """
        value = self.sample(x, y)
        if value is None:
            grid = self.grid
            raise OutOfBoundsError(x, y, grid.width, grid.height)
        return value

    def sample(self, x: float, y: float) -> float | None:
        """Return the elevation at pixel (x, y), or None when out of bounds."""
        grid = self.grid
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        if x > grid.width or x < 0 or y > grid.height or y < 0:
            return None

        row, col = grid.world_to_grid(*grid.pixel_to_world(x, y))
        if not grid.contains_index(row, col):
            return None
        return float(grid.samples[row, col])

    # ------------------------------------------------------------------
    # Extrema
    # ------------------------------------------------------------------
    def get_max_value(self) -> float:
        """Scan every pixel and return the highest elevation. Not cached."""
        grid = self.grid
        max_elevation = -np.inf
        for i in range(grid.width):
            for j in range(grid.height):
                current = self.get_value(i, j)
                if current > max_elevation:
                    max_elevation = current
        logger.info("Maximum elevation: %s", max_elevation)
        return float(max_elevation)

    def get_min_value(self) -> float:
        """Scan every pixel and return the lowest elevation. Not cached."""
        grid = self.grid
        min_elevation = np.inf
        for i in range(grid.width):
            for j in range(grid.height):
                current = self.get_value(i, j)
                if current < min_elevation:
                    min_elevation = current
        logger.info("Minimum elevation: %s", min_elevation)
        return float(min_elevation)

    # ------------------------------------------------------------------
    # Area extraction
    # ------------------------------------------------------------------
    def get_elevations_in_area(
        self,
        origin: PixelCoordinate | AreaRequest,
        width: int | None = None,
        height: int | None = None,
    ) -> NDArray[np.float64]:
        """Return elevations for a rectangular window as a (height, width) array.

        Output row 0 is the bottom of the window in pixel space: source row j
        lands in output row (height - 1) - (j - origin_y). Columns are not
        flipped.

        The window is clipped to min(width, grid width) by min(height, grid
        height), measured from the origin rather than against the remaining
        extent. Cells whose source pixel is out of bounds keep the 0.0 fill.

        Args:
            origin: Top-left pixel of the window, or a complete AreaRequest
            width: Window width in pixels (ignored for an AreaRequest)
            height: Window height in pixels (ignored for an AreaRequest)
        """
        if isinstance(origin, AreaRequest):
            request = origin
        else:
            if width is None or height is None:
                raise TypeError(
                    "width and height are required with a coordinate origin"
                )
            request = AreaRequest(
                origin_x=int(origin.x),
                origin_y=int(origin.y),
                width=width,
                height=height,
            )

        grid = self.grid
        x, y = request.origin_x, request.origin_y
        elevations = np.zeros((request.height, request.width), dtype=np.float64)

        area_width = min(request.width, grid.width)
        area_height = min(request.height, grid.height)

        for i in range(x, x + area_width):
            for j in range(y, y + area_height):
                row = (request.height - 1) - (j - y)
                col = i - x
                value = self.sample(i, j)
                if value is None:
                    continue
                elevations[row, col] = value

        return elevations

    # ------------------------------------------------------------------
    # Coordinate conversion
    # ------------------------------------------------------------------
    def to_planetographic(self, coord: PixelCoordinate) -> PixelCoordinate:
        """Convert a pixel coordinate using this grid's size and scale."""
        grid = self.grid
        return pixel_to_planetographic(coord, grid.width, grid.height, grid.scale)
