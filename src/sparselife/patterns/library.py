"""Named seed patterns.

Cells are ``(x, y)`` pairs with y growing downwards, so the glider travels
towards +x, +y.
"""

from __future__ import annotations

from collections.abc import Iterable

from sparselife.core.types import Cell


class PatternError(ValueError):
    """Raised for unknown pattern names and malformed pattern data."""


PATTERNS: dict[str, list[Cell]] = {
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "blinker": [(0, 0), (1, 0), (2, 0)],
    "glider": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    "lwss": [
        (1, 0), (4, 0), (0, 1), (0, 2), (4, 2),
        (0, 3), (1, 3), (2, 3), (3, 3),
    ],
    "r_pentomino": [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
    "acorn": [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
    "diehard": [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
}

# Gosper glider gun, one tuple of x positions per row
_GLIDER_GUN_ROWS: tuple[tuple[int, ...], ...] = (
    (24,),
    (22, 24),
    (12, 13, 20, 21, 34, 35),
    (11, 15, 20, 21, 34, 35),
    (0, 1, 10, 16, 20, 21),
    (0, 1, 10, 14, 16, 17, 22, 24),
    (10, 16, 24),
    (11, 15),
    (12, 13),
)
PATTERNS["gosper_gun"] = [(x, y) for y, row in enumerate(_GLIDER_GUN_ROWS) for x in row]


def pattern_names() -> list[str]:
    return sorted(PATTERNS)


def get_pattern(name: str) -> list[Cell]:
    """Copy of the named pattern's cells.

    Raises:
        PatternError: If no pattern has that name.
    """
    try:
        return list(PATTERNS[name])
    except KeyError:
        raise PatternError(
            f"Unknown pattern {name!r}; choose from {', '.join(pattern_names())}"
        ) from None


def translate(cells: Iterable[Cell], dx: int, dy: int) -> list[Cell]:
    return [(x + dx, y + dy) for x, y in cells]
