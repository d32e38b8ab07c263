"""Bounded in-memory history store."""

from __future__ import annotations

from collections import OrderedDict

from sparselife.core.types import Cell
from sparselife.tracing.models import GenerationRecord


class InMemoryHistoryStore:
    """Keeps the most recent generation records in memory.

    Recording a generation that is already stored replaces it and marks it
    as the newest entry.

    Args:
        max_generations: Maximum number of records retained (at least 1).
    """

    def __init__(self, max_generations: int = 64) -> None:
        if max_generations < 1:
            raise ValueError(f"max_generations must be at least 1, got {max_generations}")
        self._max_generations = max_generations
        self._records: OrderedDict[int, GenerationRecord] = OrderedDict()

    @property
    def max_generations(self) -> int:
        return self._max_generations

    def record(self, record: GenerationRecord) -> None:
        self._records[record.generation] = record
        self._records.move_to_end(record.generation)
        while len(self._records) > self._max_generations:
            self._records.popitem(last=False)

    def get(self, generation: int) -> GenerationRecord | None:
        return self._records.get(generation)

    def get_cells(self, generation: int) -> list[Cell] | None:
        record = self._records.get(generation)
        return list(record.cells) if record else None

    def get_range(self) -> tuple[int, int] | None:
        if not self._records:
            return None
        return min(self._records), max(self._records)

    def clear(self) -> None:
        self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)
