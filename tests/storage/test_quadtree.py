"""Tests for the point quadtree.

Critical Invariants:
- One node per distinct position (inserts overwrite in place)
- Lookups report absence for anything never inserted, including the root
- Enumeration yields every stored point exactly once
- Quadrant choice is relative to each node's own position
"""

import random

import pytest

from sparselife.core.coordinates import ORIGIN, Point
from sparselife.storage import PointIndex, PointQuadtree
from sparselife.storage.quadtree import quadrant


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (Point(-1, -1), 0),
        (Point(-1, 0), 1),
        (Point(-1, 5), 1),
        (Point(0, -1), 2),
        (Point(3, -1), 2),
        (Point(0, 0), 3),
        (Point(2, 2), 3),
    ],
)
def test_quadrant_rule(candidate, expected) -> None:
    """Strict less-than per axis picks the lower quadrants."""
    assert quadrant(candidate, 0, 0) == expected


def test_quadtree_satisfies_point_index_protocol(tree) -> None:
    assert isinstance(tree, PointIndex)


def test_get_on_empty_tree_reports_absence(tree) -> None:
    assert tree.get(Point(5, 5)) is None
    assert tree.get_mut(Point(5, 5)) is None


def test_unwritten_root_is_absent(tree) -> None:
    """The root holds its default but only counts as stored once inserted."""
    assert tree.get(ORIGIN) is None
    assert tree.get_mut(ORIGIN) is None
    assert ORIGIN not in tree
    assert tree.all_points() == []
    assert len(tree) == 0
    assert tree.node_count == 1


def test_insert_at_root_overwrites_root_value(tree) -> None:
    tree.insert(ORIGIN, 7)

    assert tree.get(ORIGIN) == 7
    assert tree.node_count == 1
    assert tree.all_points() == [(ORIGIN, 7)]


def test_insert_allocates_exactly_one_leaf(tree) -> None:
    tree.insert(Point(3, 4), 1)
    assert tree.node_count == 2

    tree.insert(Point(-3, 4), 2)
    assert tree.node_count == 3
    assert tree.get(Point(3, 4)) == 1
    assert tree.get(Point(-3, 4)) == 2


def test_overwrite_keeps_single_node(tree) -> None:
    """Inserting the same coordinate twice leaves one node with the last value."""
    position = Point(2, -9)
    tree.insert(position, 1)
    nodes_after_first = tree.node_count

    tree.insert(position, 2)

    assert tree.node_count == nodes_after_first
    assert tree.get(position) == 2
    matches = [value for point, value in tree.all_points() if point == position]
    assert matches == [2]


def test_round_trip_random_points() -> None:
    """Every inserted coordinate returns its last value, others report absence."""
    rng = random.Random(1234)
    tree = PointQuadtree(ORIGIN, 0)
    expected: dict[Point, int] = {}
    for i in range(500):
        position = Point(rng.randint(-50, 50), rng.randint(-50, 50))
        tree.insert(position, i)
        expected[position] = i

    for position, value in expected.items():
        assert tree.get(position) == value

    for _ in range(200):
        missing = Point(rng.randint(-60, 60), rng.randint(-60, 60))
        if missing not in expected:
            assert tree.get(missing) is None


def test_enumeration_is_complete_and_duplicate_free() -> None:
    rng = random.Random(99)
    positions = {Point(rng.randint(-1000, 1000), rng.randint(-1000, 1000)) for _ in range(300)}
    tree = PointQuadtree(ORIGIN, False)
    for position in positions:
        tree.insert(position, True)

    points = tree.all_points()

    assert len(points) == len(positions) == len(tree)
    assert {point for point, _ in points} == positions


def test_insertion_order_changes_shape_not_content() -> None:
    """Different orders build different trees holding the same mapping."""
    positions = [Point(x, 0) for x in range(1, 9)]
    ascending = PointQuadtree(ORIGIN, 0)
    shuffled = PointQuadtree(ORIGIN, 0)
    for position in positions:
        ascending.insert(position, position.x)
    for position in [positions[i] for i in (3, 1, 5, 0, 2, 4, 6, 7)]:
        shuffled.insert(position, position.x)

    assert ascending.depth() > shuffled.depth()
    assert set(ascending.all_points()) == set(shuffled.all_points())


def test_get_mut_writes_through(tree) -> None:
    position = Point(4, 4)
    tree.insert(position, 1)

    slot = tree.get_mut(position)
    assert slot is not None
    slot.value = slot.value + 10

    assert tree.get(position) == 11
    assert tree.node_count == 2


def test_get_mut_does_not_materialize_nodes(tree) -> None:
    assert tree.get_mut(Point(1, 1)) is None
    assert tree.node_count == 1


def test_false_value_stays_enumerable() -> None:
    """Overwriting with False keeps the node; it is not removed."""
    tree = PointQuadtree(ORIGIN, False)
    tree.insert(Point(1, 2), True)
    tree.insert(Point(1, 2), False)

    assert tree.get(Point(1, 2)) is False
    assert tree.all_points() == [(Point(1, 2), False)]


def test_copy_is_independent(tree) -> None:
    tree.insert(Point(1, 1), 1)
    clone = tree.copy()

    clone.insert(Point(1, 1), 5)
    clone.insert(Point(-1, -1), 2)

    assert tree.get(Point(1, 1)) == 1
    assert tree.get(Point(-1, -1)) is None
    assert clone.get(Point(1, 1)) == 5
    assert len(tree) == 1
    assert len(clone) == 2


def test_contains_rejects_non_points(tree) -> None:
    tree.insert(Point(1, 1), 1)
    assert Point(1, 1) in tree
    assert (1, 1) not in tree


def test_non_origin_root_position() -> None:
    tree = PointQuadtree(Point(10, 10), "root")
    tree.insert(Point(0, 0), "a")
    tree.insert(Point(20, 20), "b")

    assert tree.root_position == Point(10, 10)
    assert tree.get(Point(10, 10)) is None
    assert set(tree.all_points()) == {(Point(0, 0), "a"), (Point(20, 20), "b")}
