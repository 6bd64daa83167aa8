"""Elevation Bounded Context.

Responsible for pixel-indexed access to planetary elevation rasters:
- Value Objects: ElevationGrid, PixelCoordinate, AreaRequest, PlanetaryScale
- Services: pixel_to_planetographic
- RasterStore: point, area and extrema queries over a loaded grid
"""
