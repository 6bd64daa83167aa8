"""Infrastructure adapters for the elevation bounded context.

This module provides the infrastructure layer implementations for elevation
operations, including decoding DEMs from GeoTIFF files.
"""

from .geotiff_adapter import GeoTiffElevationAdapter

__all__ = ["GeoTiffElevationAdapter"]
