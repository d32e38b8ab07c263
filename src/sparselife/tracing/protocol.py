"""Protocols for tracing infrastructure.

These protocols define the interface for history storage backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sparselife.core.types import Cell
    from sparselife.tracing.models import GenerationRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving generation history.

    Usage:
        store = InMemoryHistoryStore(max_generations=1000)
        store.record(generation_record)
        cells = store.get_cells(42)
    """

    def record(self, record: GenerationRecord) -> None:
        """Store one generation's record.

        Note:
            Implementations may be bounded. Older records may be evicted when
            the limit is reached.
        """
        ...

    def get(self, generation: int) -> GenerationRecord | None:
        """Full record for ``generation``, or None if not stored."""
        ...

    def get_cells(self, generation: int) -> list[Cell] | None:
        """Live cells at ``generation``, or None if not stored."""
        ...

    def get_range(self) -> tuple[int, int] | None:
        """(oldest, newest) stored generation, or None if empty."""
        ...

    def clear(self) -> None:
        """Drop all stored history."""
        ...

    @property
    def count(self) -> int:
        """Number of generations currently stored."""
        ...
