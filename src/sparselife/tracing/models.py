"""Data models for tracing infrastructure.

Records are plain JSON-serializable data so any history backend can persist
them without knowing about boards or indexes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sparselife.core.types import Cell


@dataclass(slots=True)
class GenerationRecord:
    """Record of a single generation for history storage.

    Attributes:
        generation: The generation number.
        timestamp: Unix timestamp when the generation was produced.
        population: Number of live cells.
        cells: Live cells as sorted ``(x, y)`` pairs.
        step_ms: Time spent computing this generation (None for loaded boards).
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = GenerationRecord(
            generation=4,
            timestamp=1704067200.0,
            population=5,
            cells=[(1, 2), (2, 3), (3, 1), (3, 2), (3, 3)],
            step_ms=0.4,
        )
    """

    generation: int
    timestamp: float
    population: int
    cells: list[Cell] = field(default_factory=list)
    step_ms: float | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "generation": self.generation,
            "timestamp": self.timestamp,
            "population": self.population,
            "cells": [list(cell) for cell in self.cells],
        }
        if self.step_ms is not None:
            result["step_ms"] = self.step_ms
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenerationRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            generation=data["generation"],
            timestamp=data["timestamp"],
            population=data["population"],
            cells=[(x, y) for x, y in data.get("cells", [])],
            step_ms=data.get("step_ms"),
            metadata=data.get("metadata"),
        )
