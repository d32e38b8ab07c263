"""Coordinate functionality: cell positions and fixed-width wrapping arithmetic."""

from sparselife.core.coordinates.models import (
    NEIGHBOR_OFFSETS,
    ORIGIN,
    CoordinateSpace,
    Point,
)

__all__ = [
    "Point",
    "ORIGIN",
    "NEIGHBOR_OFFSETS",
    "CoordinateSpace",
]
