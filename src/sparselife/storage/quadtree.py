"""Point quadtree: sparse 2D index keyed on integer coordinates.

Each node holds one explicitly inserted position and splits the plane into
four quadrants around that position. Insertion order therefore shapes the
tree; there is no fixed anchor and no rebalancing.

Nodes live in an arena of parallel lists addressed by integer ids, so every
descent is an iterative walk over ids rather than recursion over objects.

Structure:
    _xs[node], _ys[node]    node position
    _values[node]           stored value
    _children[node][q]      child id for quadrant q, or -1

Usage:
    tree = PointQuadtree(Point(0, 0), 0)
    tree.insert(Point(2, 3), 5)
    tree.get(Point(2, 3))  # 5
"""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

from sparselife.core.coordinates import Point
from sparselife.core.types import Slot

V = TypeVar("V")

ROOT = 0
NO_CHILD = -1


def quadrant(position: Point, x: int, y: int) -> int:
    """Child slot for ``position`` relative to a node at ``(x, y)``.

    0: x smaller, y smaller    1: x smaller, y not smaller
    2: x not smaller, y smaller    3: x not smaller, y not smaller
    """
    if position.x < x:
        return 0 if position.y < y else 1
    return 2 if position.y < y else 3


class PointQuadtree(Generic[V]):
    """Sparse point index with one node per explicitly inserted coordinate.

    The root node is created at construction with ``default`` and a fixed
    position. It counts as stored only once ``insert`` writes to it; until
    then lookups at the root position report absence and enumeration skips it.

    Args:
        root_position: Fixed position of the root node.
        default: Value held by the root until it is first written.
    """

    __slots__ = ("_xs", "_ys", "_values", "_children", "_root_set")

    def __init__(self, root_position: Point, default: V):
        self._xs: list[int] = [root_position.x]
        self._ys: list[int] = [root_position.y]
        self._values: list[V] = [default]
        self._children: list[list[int]] = [[NO_CHILD] * 4]
        self._root_set = False

    @property
    def root_position(self) -> Point:
        return Point(self._xs[ROOT], self._ys[ROOT])

    @property
    def node_count(self) -> int:
        """Nodes in the arena, including an unwritten root."""
        return len(self._values)

    def _find(self, position: Point) -> int:
        """Node id holding ``position``, or NO_CHILD."""
        xs, ys, children = self._xs, self._ys, self._children
        node = ROOT
        while xs[node] != position.x or ys[node] != position.y:
            node = children[node][quadrant(position, xs[node], ys[node])]
            if node == NO_CHILD:
                return NO_CHILD
        if node == ROOT and not self._root_set:
            return NO_CHILD
        return node

    def get(self, position: Point) -> V | None:
        """Get the value stored at ``position``.

        Returns:
            Stored value, or None if ``position`` was never inserted.
        """
        node = self._find(position)
        if node == NO_CHILD:
            return None
        return self._values[node]

    def get_mut(self, position: Point) -> Slot[V] | None:
        """Get a writable handle onto the value stored at ``position``.

        Returns:
            Slot bound to the matching node, or None if ``position`` was never
            inserted. Writing through the slot never changes the tree shape.
        """
        node = self._find(position)
        if node == NO_CHILD:
            return None
        values = self._values

        def write(value: V) -> None:
            values[node] = value

        return Slot(lambda: values[node], write)

    def insert(self, position: Point, value: V) -> None:
        """Store ``value`` at ``position``.

        Overwrites in place on an exact match, otherwise descends by quadrant
        and allocates exactly one new leaf where the path runs out.
        """
        xs, ys, children = self._xs, self._ys, self._children
        node = ROOT
        while True:
            if xs[node] == position.x and ys[node] == position.y:
                self._values[node] = value
                if node == ROOT:
                    self._root_set = True
                return

            slot = quadrant(position, xs[node], ys[node])
            child = children[node][slot]
            if child == NO_CHILD:
                children[node][slot] = self._allocate(position, value)
                return
            node = child

    def _allocate(self, position: Point, value: V) -> int:
        self._xs.append(position.x)
        self._ys.append(position.y)
        self._values.append(value)
        self._children.append([NO_CHILD] * 4)
        return len(self._values) - 1

    def all_points(self) -> list[tuple[Point, V]]:
        """Enumerate every explicitly stored (position, value) pair.

        Breadth-first from the root. Callers must not depend on the order.
        """
        points: list[tuple[Point, V]] = []
        pending = deque([ROOT])
        while pending:
            node = pending.popleft()
            if node != ROOT or self._root_set:
                points.append((Point(self._xs[node], self._ys[node]), self._values[node]))
            pending.extend(child for child in self._children[node] if child != NO_CHILD)
        return points

    def depth(self) -> int:
        """Longest root-to-leaf path, counted in nodes."""
        deepest = 0
        pending = [(ROOT, 1)]
        while pending:
            node, level = pending.pop()
            deepest = max(deepest, level)
            pending.extend(
                (child, level + 1) for child in self._children[node] if child != NO_CHILD
            )
        return deepest

    def copy(self) -> PointQuadtree[V]:
        """Clone the tree. The clone shares no mutable state with this one."""
        clone = PointQuadtree.__new__(PointQuadtree)
        clone._xs = list(self._xs)
        clone._ys = list(self._ys)
        clone._values = list(self._values)
        clone._children = [list(children) for children in self._children]
        clone._root_set = self._root_set
        return clone

    def __len__(self) -> int:
        return len(self._values) - (0 if self._root_set else 1)

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, Point):
            return False
        return self._find(position) != NO_CHILD

    def __repr__(self) -> str:
        return f"PointQuadtree(root={self.root_position}, points={len(self)})"
