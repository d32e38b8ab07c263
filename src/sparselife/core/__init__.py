"""Core functionalities: stateless coordinate primitives and shared types.

Architecture Note:
    core/ holds pure building blocks with no runtime state. Stateful
    structures live in storage/ (the point index) and world/ (boards,
    the generation engine and the simulation coordinator).
"""

from sparselife.core.coordinates import NEIGHBOR_OFFSETS, ORIGIN, CoordinateSpace, Point
from sparselife.core.types import Cell, Slot

__all__ = [
    "Point",
    "ORIGIN",
    "NEIGHBOR_OFFSETS",
    "CoordinateSpace",
    "Cell",
    "Slot",
]
