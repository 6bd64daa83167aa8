"""GeoTIFF adapter for the RasterDecoder port.

Decodes single-band planetary DEM rasters from GeoTIFF using rasterio and
returns a domain ElevationGrid. No reprojection: planetary CRSs are carried
through as declared and pixel queries never leave the raster's own envelope.

Lifecycle (to avoid resource leaks):
1) Validate the path (existence, extension, non-empty, memory budget)
2) Open dataset with context manager inside rasterio.Env
3) Read metadata and validate band count and geotransform
4) Read band 1 as float32
5) Exit contexts to release GDAL handles
6) Return ElevationGrid
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
import rasterio
from affine import Affine
from rasterio.errors import RasterioError

from domain.elevation.errors import (
    InsufficientMemoryError,
    InvalidGeotransformError,
    InvalidRasterError,
    RasterNotFoundError,
)
from domain.elevation.value_objects import ElevationGrid, PlanetaryScale

logger = logging.getLogger(__name__)

_ALLOWED_SUFFIXES = (".tif", ".tiff")

# Share of declared NoData pixels above which a load is logged as a warning
_NODATA_WARNING_PCT = 80.0


class GeoTiffElevationAdapter:
    """Infrastructure adapter for decoding elevation grids from GeoTIFF files.

    Parameters
    ----------
    max_bytes: int | None
        Optional memory budget for the decoded float32 grid (height*width*4).
        If specified and exceeded, load_grid raises InsufficientMemoryError.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes

    def load_grid(
        self, file_path: Path | str, scale: PlanetaryScale | None = None
    ) -> ElevationGrid:
        """Decode a single-band GeoTIFF into an ElevationGrid.

        Raises:
            RasterNotFoundError: If file_path does not exist
            InvalidRasterError: Wrong extension, empty, corrupt or multi-band
            InvalidGeotransformError: NaN/Inf or zero-scale geotransform
            InsufficientMemoryError: Decoded grid would exceed max_bytes
        """
        path = Path(file_path)
        if scale is None:
            scale = PlanetaryScale()

        if not path.exists():
            raise RasterNotFoundError(str(path))

        if path.suffix.lower() not in _ALLOWED_SUFFIXES:
            raise InvalidRasterError(f"Unsupported file extension: {path.suffix}")

        try:
            st = path.stat()
        except OSError as e:
            # Log only filename, errno and strerror; never the absolute path
            logger.error(
                "Failed to stat %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise InvalidRasterError(f"Cannot stat raster: {path.name}") from e

        if st.st_size == 0:
            raise InvalidRasterError("Empty file")
        # File size is typically larger than the decoded grid; 2x is certainly too big
        if self.max_bytes is not None and st.st_size > self.max_bytes * 2:
            raise InsufficientMemoryError(
                f"File size {st.st_size}B exceeds 2x memory budget {self.max_bytes}B"
            )

        try:
            with rasterio.Env():
                with rasterio.open(path) as src:
                    if src.count == 0:
                        raise InvalidRasterError("Empty or bandless file")
                    if src.count != 1:
                        raise InvalidRasterError(f"Expected 1 band, got {src.count}")

                    coefficients = _validate_transform(src.transform)

                    if self.max_bytes is not None:
                        est_bytes = src.width * src.height * 4  # float32 = 4 bytes
                        if est_bytes > self.max_bytes:
                            raise InsufficientMemoryError(
                                f"Estimated grid size {est_bytes}B exceeds budget "
                                f"{self.max_bytes}B"
                            )

                    samples = src.read(1, out_dtype="float32")
                    crs = src.crs.to_string() if src.crs is not None else None
                    nodata = src.nodata

        except PermissionError as e:
            raise InvalidRasterError(f"Permission denied: {path.name}") from e
        except RasterioError as e:
            raise InvalidRasterError(f"Corrupted or invalid raster: {e}") from e
        except MemoryError as e:
            raise InsufficientMemoryError("Insufficient memory to load raster") from e

        if nodata is not None:
            if math.isnan(nodata):
                nodata_mask = np.isnan(samples)
            else:
                nodata_mask = samples == nodata
            nodata_pct = float(nodata_mask.mean() * 100.0)
            if nodata_pct > _NODATA_WARNING_PCT:
                logger.warning(
                    "DEM %s: %.1f%% NoData pixels detected", path.name, nodata_pct
                )

        try:
            grid = ElevationGrid(
                samples=samples,
                transform=coefficients,
                source_path=str(path),
                scale=scale,
                crs=crs,
                nodata=nodata,
            )
        except ValueError as e:
            raise InvalidRasterError(str(e)) from e

        height, width = samples.shape
        logger.debug(
            "DEM %s: Decoded %dx%d grid (crs=%s)", path.name, width, height, crs
        )
        return grid


def _validate_transform(
    transform: Affine,
) -> tuple[float, float, float, float, float, float]:
    """Check the geotransform and return its six affine coefficients."""
    if not isinstance(transform, Affine):
        raise InvalidGeotransformError("Missing affine transform")
    coefficients = (
        transform.a,
        transform.b,
        transform.c,
        transform.d,
        transform.e,
        transform.f,
    )
    if any(math.isnan(v) or math.isinf(v) for v in coefficients):
        raise InvalidGeotransformError("Invalid (NaN/Inf) transform values")
    if transform.a == 0 or transform.e == 0:
        raise InvalidGeotransformError("Invalid transform scale (zero)")
    return tuple(float(v) for v in coefficients)  # type: ignore[return-value]

