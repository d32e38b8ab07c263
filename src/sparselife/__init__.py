"""sparselife: Conway's Game of Life on a sparse, unbounded board.

Usage:
    from sparselife import Board, Point, get_pattern

    board = Board.from_cells(get_pattern("glider"))
    board = board.next_state()
    for cell in board.cells():
        print(cell.x, cell.y)
"""

__version__ = "0.1.0"

# Core primitives
from sparselife.core import (
    NEIGHBOR_OFFSETS,
    ORIGIN,
    Cell,
    CoordinateSpace,
    Point,
    Slot,
)

# Patterns
from sparselife.patterns import (
    PatternError,
    dump_cells,
    get_pattern,
    load_cells,
)

# Storage
from sparselife.storage import (
    PointIndex,
    PointQuadtree,
)

# Tracing
from sparselife.tracing import (
    GenerationRecord,
    HistoryStore,
    InMemoryHistoryStore,
)

# World
from sparselife.world import (
    Board,
    EngineConfig,
    GenerationEngine,
    Simulation,
    StepResult,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Point",
    "ORIGIN",
    "NEIGHBOR_OFFSETS",
    "CoordinateSpace",
    "Cell",
    "Slot",
    # Storage
    "PointIndex",
    "PointQuadtree",
    # World
    "Board",
    "GenerationEngine",
    "EngineConfig",
    "StepResult",
    "Simulation",
    # Tracing
    "HistoryStore",
    "GenerationRecord",
    "InMemoryHistoryStore",
    # Patterns
    "PatternError",
    "get_pattern",
    "load_cells",
    "dump_cells",
]
