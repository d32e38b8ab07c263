"""Generation engine: the Game of Life rule over sparse boards.

Each step runs two passes:
1. Count pass: every live cell adds one to each of its eight neighbors in a
   fresh count index rooted at the origin.
2. Rule pass: every counted coordinate is resolved. 3 neighbors means
   alive, 2 keeps the current state, anything else means dead. Only live
   results are written to the new board.

Coordinates and counters use wrapping arithmetic, so no input can make a
step raise.

Usage:
    engine = GenerationEngine()
    successor = engine.next_state(board)
    result = engine.step(board)  # board plus diagnostics
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from sparselife.core.coordinates import ORIGIN
from sparselife.storage.quadtree import PointQuadtree
from sparselife.world.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Configuration for generation engine behavior."""

    counter_bits: int = 8
    """Width of the neighbor counter. Increments wrap modulo ``2**counter_bits``."""

    def __post_init__(self) -> None:
        if self.counter_bits < 1:
            raise ValueError(f"counter_bits must be at least 1, got {self.counter_bits}")

    @property
    def counter_mask(self) -> int:
        return (1 << self.counter_bits) - 1


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one generation step.

    Attributes:
        board: The new board at ``generation + 1``.
        touched: Coordinates materialized in the count index.
        births: Cells alive now that were dead before.
        deaths: Cells alive before that are dead now.
        elapsed_ms: Wall time spent computing the step.
    """

    board: Board
    touched: int
    births: int
    deaths: int
    elapsed_ms: float


class GenerationEngine:
    """Computes successor boards. Stateless apart from its configuration."""

    def __init__(self, config: EngineConfig | None = None):
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def count_neighbors(self, board: Board) -> PointQuadtree[int]:
        """Build the count index: live-neighbor totals for every cell next to a live cell."""
        mask = self._config.counter_mask
        space = board.space
        counts: PointQuadtree[int] = PointQuadtree(ORIGIN, 0)
        for cell in board.cells():
            for neighbor in space.neighbors(cell):
                slot = counts.get_mut(neighbor)
                if slot is None:
                    counts.insert(neighbor, 1 & mask)
                else:
                    slot.value = (slot.value + 1) & mask
        return counts

    def step(self, board: Board) -> StepResult:
        """Compute the next generation along with step diagnostics."""
        started = time.perf_counter()
        counts = self.count_neighbors(board)
        successor = Board(board.space, board.generation + 1)

        touched = survivors = births = 0
        for position, count in counts.all_points():
            touched += 1
            if count < 2:
                continue
            was_alive = board.is_alive(position)
            alive = was_alive if count == 2 else count == 3
            if not alive:
                continue
            successor.set_cell(position, True)
            if was_alive:
                survivors += 1
            else:
                births += 1

        successor._population = survivors + births

        deaths = board.population - survivors
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.debug(
            "generation %d: population=%d touched=%d births=%d deaths=%d (%.2f ms)",
            successor.generation,
            survivors + births,
            touched,
            births,
            deaths,
            elapsed_ms,
        )
        return StepResult(
            board=successor,
            touched=touched,
            births=births,
            deaths=deaths,
            elapsed_ms=elapsed_ms,
        )

    def next_state(self, board: Board) -> Board:
        """Compute the board one generation after ``board``. ``board`` is not modified."""
        return self.step(board).board

    def run(self, board: Board, generations: int) -> Board:
        """Advance ``board`` by ``generations`` steps.

        Raises:
            ValueError: If ``generations`` is negative.
        """
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        for _ in range(generations):
            board = self.next_state(board)
        return board
