"""Elevation Bounded Context - Value Objects.

Immutable data structures for pixel-indexed elevation queries.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np
from affine import Affine
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
# Ground distance covered by one pixel of the reference Viking/Phobos mosaic
DEFAULT_GROUND_SAMPLE_DISTANCE_M = 5.0
MARS_MEAN_RADIUS_M = 3_396_200.0

# Absorbs float error from the pixel -> world -> grid round trip
_GRID_EPSILON = 1e-9


class PlanetaryScale(BaseModel):
    """Per-raster scale used to turn pixel offsets into planetographic angles.

    Both values share one length unit (metres for the defaults).
    """

    ground_sample_distance: float = Field(
        default=DEFAULT_GROUND_SAMPLE_DISTANCE_M, gt=0
    )
    body_radius: float = Field(default=MARS_MEAN_RADIUS_M, gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def circumference(self) -> float:
        """Great-circle circumference of the spherical body."""
        return 2 * math.pi * self.body_radius


class CoordinateUnits(str, Enum):
    PIXELS = "pixels"
    LAT_LONG = "latLong"


class PixelCoordinate(BaseModel):
    """Tagged 2D coordinate (Value Object).

    With units == "pixels", x is the column and y the row in pixel space.
    With units == "latLong", x holds latitude and y holds longitude in degrees.
    """

    x: float
    y: float
    units: CoordinateUnits = CoordinateUnits.PIXELS

    model_config = ConfigDict(frozen=True)


class AreaRequest(BaseModel):
    """Rectangular pixel window anchored at its top-left corner (Value Object).

    Sizes are not range-checked; negative sizes are a caller error.
    """

    origin_x: int
    origin_y: int
    width: int
    height: int

    model_config = ConfigDict(frozen=True)

    @property
    def origin(self) -> PixelCoordinate:
        return PixelCoordinate(x=self.origin_x, y=self.origin_y)


class ElevationGrid(BaseModel):
    """Decoded single-band elevation raster (Value Object).

    The samples array is made read-only at construction time. Row 0 is the
    raster's top edge; samples are indexed [row, col].

    transform holds the six affine coefficients (a, b, c, d, e, f) that map
    pixel space onto the raster's registered envelope.
    """

    samples: NDArray[np.float32]  # 2D float32 array (height x width), read-only
    transform: tuple[float, float, float, float, float, float]
    source_path: str  # Path that produced this grid
    scale: PlanetaryScale = PlanetaryScale()
    crs: str | None = None  # As declared by the file, if any
    nodata: float | None = None  # Declared NoData value, if any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    _affine: Affine = PrivateAttr()
    _inverse: Affine = PrivateAttr()

    @model_validator(mode="after")
    def validate_grid(self) -> "ElevationGrid":
        if not isinstance(self.samples, np.ndarray):
            raise ValueError(f"Samples must be a numpy array, got {type(self.samples)}")
        if self.samples.ndim != 2:
            raise ValueError(f"Samples must be 2D, got {self.samples.ndim}D")
        if self.samples.shape[0] == 0 or self.samples.shape[1] == 0:
            raise ValueError(f"Samples cannot be empty: {self.samples.shape}")
        if any(math.isnan(v) or math.isinf(v) for v in self.transform):
            raise ValueError(f"Transform must be finite: {self.transform}")
        if self.transform[0] == 0 or self.transform[4] == 0:
            raise ValueError(f"Transform scale must be non-zero: {self.transform}")

        # Owned, contiguous float32 copy so caller arrays are never frozen in place
        immutable = np.array(self.samples, dtype=np.float32, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "samples", immutable)

        # Built once; every point lookup goes through both
        self._affine = Affine(*self.transform)
        self._inverse = ~self._affine

        return self

    @property
    def width(self) -> int:
        return int(self.samples.shape[1])

    @property
    def height(self) -> int:
        return int(self.samples.shape[0])

    @property
    def affine(self) -> Affine:
        return self._affine

    def pixel_to_world(self, x: float, y: float) -> tuple[float, float]:
        """Locate a pixel-space position on the raster's envelope."""
        wx, wy = self._affine @ (x, y)
        return float(wx), float(wy)

    def world_to_grid(self, wx: float, wy: float) -> tuple[int, int]:
        """Resolve an envelope position to the (row, col) of the containing cell.

        A position lying exactly on the right or bottom edge of the envelope
        resolves to the last column or row. Positions further out are returned
        unclamped and may fall outside the samples array.
        """
        fcol, frow = self._inverse @ (wx, wy)
        col = math.floor(fcol + _GRID_EPSILON)
        row = math.floor(frow + _GRID_EPSILON)
        if col == self.width and abs(fcol - self.width) <= _GRID_EPSILON:
            col = self.width - 1
        if row == self.height and abs(frow - self.height) <= _GRID_EPSILON:
            row = self.height - 1
        return row, col

    def contains_index(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width
