"""Tests for generation records and the in-memory history store.

Why these tests exist:
- GenerationRecord is the unit every history backend stores
- Serialization round-trip must preserve all data
- The in-memory store must stay within its bound
"""

import json

import pytest

from sparselife.tracing import GenerationRecord, HistoryStore, InMemoryHistoryStore


def make_record(generation: int, cells=None) -> GenerationRecord:
    cells = cells or []
    return GenerationRecord(
        generation=generation,
        timestamp=1704067200.0 + generation,
        population=len(cells),
        cells=cells,
    )


def test_in_memory_store_is_history_store() -> None:
    assert isinstance(InMemoryHistoryStore(), HistoryStore)


@pytest.mark.parametrize(
    ("kwargs", "has_step", "has_metadata"),
    [
        ({"generation": 3, "timestamp": 1.5, "population": 0}, False, False),
        (
            {
                "generation": 4,
                "timestamp": 2.5,
                "population": 2,
                "cells": [(0, 0), (1, 0)],
                "step_ms": 0.25,
                "metadata": {"seed": "glider"},
            },
            True,
            True,
        ),
    ],
    ids=["minimal", "full"],
)
def test_record_to_dict_from_dict(kwargs, has_step, has_metadata) -> None:
    record = GenerationRecord(**kwargs)

    data = json.loads(json.dumps(record.to_dict()))
    restored = GenerationRecord.from_dict(data)

    assert ("step_ms" in data) == has_step
    assert ("metadata" in data) == has_metadata
    assert restored == record


def test_store_and_retrieve() -> None:
    store = InMemoryHistoryStore()
    store.record(make_record(1, [(2, 3)]))

    assert store.get(1).population == 1
    assert store.get_cells(1) == [(2, 3)]
    assert store.get(2) is None
    assert store.get_cells(2) is None


def test_get_cells_returns_a_copy() -> None:
    store = InMemoryHistoryStore()
    store.record(make_record(1, [(2, 3)]))

    store.get_cells(1).append((9, 9))

    assert store.get_cells(1) == [(2, 3)]


def test_oldest_generations_are_evicted() -> None:
    store = InMemoryHistoryStore(max_generations=3)
    for generation in range(6):
        store.record(make_record(generation))

    assert store.count == 3
    assert store.get_range() == (3, 5)
    assert store.get(2) is None


def test_rerecording_replaces_and_refreshes() -> None:
    store = InMemoryHistoryStore(max_generations=2)
    store.record(make_record(0))
    store.record(make_record(1))
    store.record(make_record(0, [(1, 1)]))
    store.record(make_record(2))

    assert store.get_range() == (0, 2)
    assert store.get(1) is None
    assert store.get_cells(0) == [(1, 1)]


def test_clear_and_empty_range() -> None:
    store = InMemoryHistoryStore()
    store.record(make_record(0))
    store.clear()

    assert store.count == 0
    assert store.get_range() is None


def test_store_rejects_zero_capacity() -> None:
    with pytest.raises(ValueError, match="max_generations"):
        InMemoryHistoryStore(max_generations=0)
