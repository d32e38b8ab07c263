"""Coordinate models.

Usage:
    space = CoordinateSpace(bits=16)
    cell = Point(3, -2)
    right = space.offset(cell, 1, 0)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Discrete cell coordinate on the simulated plane.

    Compared only by exact equality and by per-axis strict less-than.
    """

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        """Allow unpacking: ``x, y = point``."""
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


ORIGIN = Point(0, 0)

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
"""The eight unit vectors around a cell, excluding (0, 0)."""


@dataclass(frozen=True, slots=True)
class CoordinateSpace:
    """Fixed-width signed integer range that coordinates live in.

    Arithmetic wraps modulo ``2**bits``: stepping past the maximum lands on
    the minimum. Patterns touching the edge of the range therefore leak onto
    the opposite edge instead of raising.

    Args:
        bits: Width of each coordinate axis in bits (at least 2).
    """

    bits: int = 16

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError(f"CoordinateSpace needs at least 2 bits, got {self.bits}")

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def wrap(self, value: int) -> int:
        """Reduce an arbitrary integer into this space (two's complement)."""
        modulus = 1 << self.bits
        value &= modulus - 1
        if value > self.maximum:
            value -= modulus
        return value

    def contains(self, point: Point) -> bool:
        return self.minimum <= point.x <= self.maximum and self.minimum <= point.y <= self.maximum

    def normalize(self, point: Point) -> Point:
        """Wrap both axes of ``point`` into range. Returns ``point`` itself if already inside."""
        if self.contains(point):
            return point
        return Point(self.wrap(point.x), self.wrap(point.y))

    def offset(self, point: Point, dx: int, dy: int) -> Point:
        """Translate ``point`` by ``(dx, dy)`` with wrapping addition."""
        return Point(self.wrap(point.x + dx), self.wrap(point.y + dy))

    def neighbors(self, point: Point) -> Iterator[Point]:
        """Yield the eight neighbors of ``point``, wrapping at the edges."""
        for dx, dy in NEIGHBOR_OFFSETS:
            yield self.offset(point, dx, dy)
