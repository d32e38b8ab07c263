"""Simulation: stateful coordinator over successive boards.

This is the surface an interactive front end drives: edit cells, advance
generations, read the live cells back for drawing.

Usage:
    simulation = Simulation(history=InMemoryHistoryStore())
    simulation.load(get_pattern("glider"), offset=(10, 10))
    simulation.advance(4)
    for cell in simulation.cells():
        ...
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator

from sparselife.core.coordinates import CoordinateSpace, Point
from sparselife.core.types import Cell
from sparselife.tracing.models import GenerationRecord
from sparselife.tracing.protocol import HistoryStore
from sparselife.world.board import Board, as_point
from sparselife.world.engine import GenerationEngine

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the current board and replaces it on every generation step.

    Boards produced by earlier steps are never mutated afterwards, so a board
    handed out by ``board`` stays a valid snapshot.

    Args:
        board: Starting board (default: empty board in ``space``).
        engine: Engine used to compute successors.
        history: Optional store receiving one record per generation.
        space: Coordinate space for the default empty board.
    """

    def __init__(
        self,
        board: Board | None = None,
        engine: GenerationEngine | None = None,
        history: HistoryStore | None = None,
        space: CoordinateSpace | None = None,
    ):
        self._board = board or Board(space)
        self._engine = engine or GenerationEngine()
        self._history = history
        self._exposed = board is not None
        self._dirty = False
        self._record(step_ms=None)

    @property
    def board(self) -> Board:
        self._exposed = True
        return self._board

    @property
    def engine(self) -> GenerationEngine:
        return self._engine

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    @property
    def generation(self) -> int:
        return self._board.generation

    @property
    def population(self) -> int:
        return self._board.population

    def cells(self) -> Iterator[Point]:
        return self._board.cells()

    def set_cell(self, position: Point | Cell, alive: bool) -> None:
        """Edit the current board in place. Earlier snapshots are unaffected."""
        self._detach()
        self._dirty = True
        self._board.set_cell(position, alive)

    def load(self, cells: Iterable[Point | Cell], offset: Point | Cell = (0, 0)) -> int:
        """Bring every cell of a pattern to life, translated by ``offset``.

        Returns:
            Number of cells set.
        """
        self._detach()
        dx, dy = as_point(offset)
        loaded = 0
        for cell in cells:
            x, y = as_point(cell)
            self._board.set_cell((x + dx, y + dy), True)
            loaded += 1
        self._dirty = True
        logger.info("loaded %d cells at offset (%d, %d)", loaded, dx, dy)
        return loaded

    def clear(self) -> None:
        """Replace the board with an empty one, keeping the generation counter."""
        self._board = Board(self._board.space, self._board.generation)
        self._dirty = True
        self._exposed = False
        logger.info("cleared board at generation %d", self._board.generation)

    def tick(self) -> Board:
        """Advance one generation and return the new board."""
        self.sync_history()
        result = self._engine.step(self._board)
        self._board = result.board
        self._record(step_ms=result.elapsed_ms)
        self._exposed = True
        return self._board

    def advance(self, generations: int) -> Board:
        """Advance ``generations`` steps.

        Raises:
            ValueError: If ``generations`` is negative.
        """
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.tick()
        self._exposed = True
        return self._board

    def sync_history(self) -> None:
        """Re-record the current generation if it was edited since it was last recorded."""
        if self._dirty:
            self._record(step_ms=None)
            self._dirty = False

    def _detach(self) -> None:
        """Copy the board before an edit if it was handed out, so snapshots stay frozen."""
        if self._exposed:
            self._board = self._board.copy()
            self._exposed = False

    def _record(self, step_ms: float | None) -> None:
        if self._history is None:
            return
        self._history.record(
            GenerationRecord(
                generation=self._board.generation,
                timestamp=time.time(),
                population=self._board.population,
                cells=self._board.to_list(),
                step_ms=step_ms,
            )
        )
