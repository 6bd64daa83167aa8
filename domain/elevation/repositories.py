"""Domain Port(s) for Elevation Raster I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import ElevationGrid, PlanetaryScale


class RasterDecoder(Protocol):
    """Port for decoding elevation rasters from external sources.

    Implementations live in infrastructure (e.g., GeoTIFF adapter) and raise
    LoadError subclasses on any failure.
    """

    def load_grid(
        self, file_path: Path | str, scale: PlanetaryScale | None = None
    ) -> ElevationGrid:
        """Decode a single-band elevation raster into an ElevationGrid."""
        ...
