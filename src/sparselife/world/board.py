"""Board: one generation of live cells on a sparse index.

Usage:
    board = Board()
    board.set_cell(Point(1, 0), True)
    successor = board.next_state()
    assert board.generation == 0 and successor.generation == 1
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from sparselife.core.coordinates import ORIGIN, CoordinateSpace, Point
from sparselife.core.types import Cell
from sparselife.storage.quadtree import PointQuadtree

if TYPE_CHECKING:
    from sparselife.world.engine import GenerationEngine


def as_point(position: Point | Cell) -> Point:
    """Accept either a Point or a plain ``(x, y)`` pair."""
    if isinstance(position, Point):
        return position
    x, y = position
    return Point(x, y)


class Board:
    """Generation counter plus the live/dead state of every touched cell.

    A cell is alive iff it is stored with ``True``. Cells never written are
    implicitly dead and cost nothing. Killing a cell stores ``False``; the
    node stays in the index but no longer counts as alive.

    Args:
        space: Coordinate range cells live in (default 16-bit signed).
        generation: Generation counter for this board.
    """

    __slots__ = ("_space", "_generation", "_state", "_population")

    def __init__(self, space: CoordinateSpace | None = None, generation: int = 0):
        self._space = space or CoordinateSpace()
        self._generation = generation
        self._state: PointQuadtree[bool] = PointQuadtree(ORIGIN, False)
        self._population: int | None = 0

    @classmethod
    def from_cells(
        cls,
        cells: Iterable[Point | Cell],
        space: CoordinateSpace | None = None,
    ) -> Board:
        """Build a generation-0 board with every given cell alive."""
        board = cls(space)
        for cell in cells:
            board.set_cell(cell, True)
        return board

    @property
    def space(self) -> CoordinateSpace:
        return self._space

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        """Number of live cells. Counted once, then cached until the next edit."""
        if self._population is None:
            self._population = sum(1 for _ in self.cells())
        return self._population

    @property
    def index(self) -> PointQuadtree[bool]:
        """Underlying state index. Read-only by convention."""
        return self._state

    def set_cell(self, position: Point | Cell, alive: bool) -> None:
        """Set one cell alive or dead. Out-of-range coordinates wrap into the space."""
        self._state.insert(self._space.normalize(as_point(position)), alive)
        self._population = None

    def is_alive(self, position: Point | Cell) -> bool:
        return self._state.get(self._space.normalize(as_point(position))) is True

    def cells(self) -> Iterator[Point]:
        """Iterate live cells. Order is unspecified."""
        for position, alive in self._state.all_points():
            if alive:
                yield position

    def to_list(self) -> list[Cell]:
        """Live cells as sorted ``(x, y)`` pairs, suitable for persistence."""
        return sorted(cell.as_tuple() for cell in self.cells())

    def next_state(self, engine: GenerationEngine | None = None) -> Board:
        """Compute the following generation. This board is left untouched."""
        if engine is None:
            # Import here to avoid circular dependency at module level
            from sparselife.world.engine import GenerationEngine

            engine = GenerationEngine()
        return engine.next_state(self)

    def copy(self) -> Board:
        """Independent clone with the same generation and cells."""
        clone = Board(self._space, self._generation)
        clone._state = self._state.copy()
        clone._population = self._population
        return clone

    def __repr__(self) -> str:
        return f"Board(generation={self._generation}, population={self.population})"
