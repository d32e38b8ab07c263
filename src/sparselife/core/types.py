"""Core type definitions for sparselife."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

V = TypeVar("V")

Cell: TypeAlias = tuple[int, int]
"""Plain ``(x, y)`` pair as used by pattern files and the pattern library."""


class Slot(Generic[V]):
    """Mutable handle onto one stored value of an index.

    Returned by ``PointQuadtree.get_mut``. Reading or assigning ``slot.value``
    goes straight to the owning node, so no re-descent is needed to update a
    value that was just looked up.
    """

    __slots__ = ("_read", "_write")

    def __init__(self, read: Callable[[], V], write: Callable[[V], None]) -> None:
        self._read = read
        self._write = write

    @property
    def value(self) -> V:
        return self._read()

    @value.setter
    def value(self, new_value: V) -> None:
        self._write(new_value)

    def __repr__(self) -> str:
        return f"Slot({self._read()!r})"
