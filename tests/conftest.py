"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from sparselife import Board, CoordinateSpace, GenerationEngine, PointQuadtree
from sparselife.core.coordinates import ORIGIN


@pytest.fixture
def tree():
    """Empty integer-valued quadtree rooted at the origin."""
    return PointQuadtree(ORIGIN, 0)


@pytest.fixture
def engine():
    return GenerationEngine()


@pytest.fixture
def tiny_space():
    """4-bit coordinates: the plane wraps from 7 to -8."""
    return CoordinateSpace(bits=4)


@pytest.fixture
def make_board():
    """Factory for generation-0 boards from plain (x, y) pairs."""

    def _make(cells, space=None):
        return Board.from_cells(cells, space)

    return _make

