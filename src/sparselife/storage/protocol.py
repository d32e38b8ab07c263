"""Point index protocol for swappable sparse backends.

The storage layer abstracts the sparse 2D map a board is built on:
- PointQuadtree: position-split point quadtree (default)
- Anchor/size region quadtree with bounded depth (future)

Usage:
    index: PointIndex[bool] = PointQuadtree(ORIGIN, False)
    index.insert(Point(1, 2), True)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from sparselife.core.coordinates import Point
    from sparselife.core.types import Slot

V = TypeVar("V")


@runtime_checkable
class PointIndex(Protocol[V]):
    """Sparse map from explicitly inserted coordinates to values.

    Unset coordinates cost nothing and are reported as absent; callers decide
    what absence means (dead cell, zero count).
    """

    def get(self, position: Point) -> V | None:
        """Value stored at ``position``, or None if never inserted."""
        ...

    def get_mut(self, position: Point) -> Slot[V] | None:
        """Mutable handle onto the value at ``position``, or None if never inserted."""
        ...

    def insert(self, position: Point, value: V) -> None:
        """Store ``value`` at ``position``, overwriting any previous value."""
        ...

    def all_points(self) -> list[tuple[Point, V]]:
        """Every explicitly stored (position, value) pair. Order is unspecified."""
        ...

    def copy(self) -> PointIndex[V]:
        """Independent clone sharing no nodes with this index."""
        ...

    def __len__(self) -> int:
        """Number of explicitly stored positions."""
        ...

    def __contains__(self, position: object) -> bool:
        ...
