"""Tracing infrastructure for recording simulation history.

This module provides a protocol and data structures for capturing
per-generation records, enabling inspection and analysis of a run.

Usage:
    from sparselife.tracing import InMemoryHistoryStore

    history = InMemoryHistoryStore(max_generations=100)
    simulation = Simulation(history=history)
    simulation.advance(10)
    history.get_cells(5)
"""

from sparselife.tracing.memory import InMemoryHistoryStore
from sparselife.tracing.models import GenerationRecord
from sparselife.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "GenerationRecord",
    "InMemoryHistoryStore",
]
