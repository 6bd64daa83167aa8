"""Synthetic DEM fixture writers shared by scripts/ and tests/.

Fixtures are minimal synthetic rasters, not real Mars terrain. Every writer
takes the output directory so tests can generate into a temporary directory
while scripts/gen_fixtures.py writes to tests/fixtures/.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import rasterio
from affine import Affine
from numpy.typing import NDArray
from rasterio.crs import CRS

# Mars equirectangular projection on the IAU sphere
MARS_EQC_PROJ4 = (
    "+proj=eqc +lat_ts=0 +lat_0=0 +lon_0=0 +x_0=0 +y_0=0 "
    "+R=3396190 +units=m +no_defs"
)

# MOLA MEGDR-like resolution in metres per pixel
MOLA_PIXEL_M = 463.0

KNOWN_VALUES_SHAPE = (4, 6)  # (height, width)
MOSTLY_NODATA_VALUE = -32768.0


def write_raster(
    path: Path,
    data: NDArray[Any],
    transform: Affine,
    crs: CRS | None = None,
    nodata: float | None = None,
) -> None:
    """Write a GeoTIFF using rasterio.

    Args:
        path: Output file path
        data: 2D array (single band) or 3D array (bands x height x width)
        transform: Affine transform for georeferencing
        crs: Coordinate reference system (None for CRS-less files)
        nodata: NoData value (optional)
    """
    if data.ndim == 2:
        count = 1
        height, width = data.shape
    elif data.ndim == 3:
        count, height, width = data.shape
    else:
        raise ValueError(f"Data must be 2D or 3D, got {data.ndim}D")

    kwargs: dict[str, Any] = {
        "driver": "GTiff",
        "height": height,
        "width": width,
        "count": count,
        "dtype": str(data.dtype),
        "transform": transform,
    }
    if crs is not None:
        kwargs["crs"] = crs
    if nodata is not None:
        kwargs["nodata"] = nodata

    with rasterio.open(path, "w", **kwargs) as dst:
        if data.ndim == 2:
            dst.write(data, 1)
        else:
            for band_idx in range(count):
                dst.write(data[band_idx], band_idx + 1)


def known_values() -> NDArray[np.float32]:
    """Grid whose value encodes its own position: row * 100 + col."""
    height, width = KNOWN_VALUES_SHAPE
    rows, cols = np.indices((height, width))
    return (rows * 100 + cols).astype(np.float32)


def gen_mars_dem_known_values(out_dir: Path) -> Path:
    """6x4 float32 DEM, pixel-aligned transform, no CRS."""
    path = out_dir / "mars_dem_known_values.tif"
    write_raster(path, known_values(), Affine.identity())
    return path


def gen_mars_dem_eqc(out_dir: Path) -> Path:
    """20x10 float32 DEM in a Mars equirectangular CRS, north-up."""
    path = out_dir / "mars_dem_eqc.tif"
    height, width = 10, 20
    data = np.linspace(-4000, 12000, height * width, dtype=np.float32).reshape(
        height, width
    )
    transform = Affine.translation(
        -width / 2 * MOLA_PIXEL_M, height / 2 * MOLA_PIXEL_M
    ) @ Affine.scale(MOLA_PIXEL_M, -MOLA_PIXEL_M)
    write_raster(path, data, transform, crs=CRS.from_proj4(MARS_EQC_PROJ4))
    return path


def gen_mars_dem_negative(out_dir: Path) -> Path:
    """5x5 DEM lying entirely below the Mars datum (Hellas-like basin)."""
    path = out_dir / "mars_dem_negative.tif"
    data = np.linspace(-8200, -1000, 25, dtype=np.float32).reshape(5, 5)
    write_raster(path, data, Affine.identity())
    return path


def gen_mars_dem_mostly_nodata(out_dir: Path) -> Path:
    """10x10 DEM where 90% of pixels carry the declared NoData value."""
    path = out_dir / "mars_dem_mostly_nodata.tif"
    data = np.full((10, 10), MOSTLY_NODATA_VALUE, dtype=np.float32)
    data[0, :] = 150.0
    write_raster(path, data, Affine.identity(), nodata=MOSTLY_NODATA_VALUE)
    return path


def gen_rgb_image(out_dir: Path) -> Path:
    path = out_dir / "rgb_image.tif"
    data = np.zeros((3, 8, 8), dtype=np.uint8)
    write_raster(path, data, Affine.identity())
    return path


def gen_empty_tif(out_dir: Path) -> Path:
    path = out_dir / "empty.tif"
    path.write_bytes(b"")
    return path


def gen_corrupted_tif(out_dir: Path) -> Path:
    path = out_dir / "corrupted.tif"
    path.write_bytes(b"II*\x00" + b"\xde\xad\xbe\xef" * 16)
    return path


def gen_png(out_dir: Path) -> Path:
    path = out_dir / "elevation.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return path


def generate_all(out_dir: Path) -> list[Path]:
    """Write every fixture into out_dir and return their paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    return [
        gen_corrupted_tif(out_dir),
        gen_png(out_dir),
        gen_empty_tif(out_dir),
        gen_mars_dem_eqc(out_dir),
        gen_mars_dem_known_values(out_dir),
        gen_mars_dem_mostly_nodata(out_dir),
        gen_mars_dem_negative(out_dir),
        gen_rgb_image(out_dir),
    ]
