"""Sparse point index backends."""

from sparselife.storage.protocol import PointIndex
from sparselife.storage.quadtree import PointQuadtree

__all__ = [
    "PointIndex",
    "PointQuadtree",
]
