"""Boards, the generation engine and the simulation coordinator.

Architecture Note:
    world/ is the stateful layer built on storage/. Board wraps one state
    index, GenerationEngine turns a board into its successor, and
    Simulation strings successive boards together for a front end.
"""

from sparselife.world.board import Board, as_point
from sparselife.world.engine import EngineConfig, GenerationEngine, StepResult
from sparselife.world.simulation import Simulation

__all__ = [
    "Board",
    "as_point",
    "EngineConfig",
    "GenerationEngine",
    "StepResult",
    "Simulation",
]
