"""Planetary DEM Domain Layer.

This package contains the core logic organized by bounded contexts:
- elevation: Elevation grids, pixel-space queries, planetographic conversion
"""

from domain import elevation

__all__ = ["elevation"]
