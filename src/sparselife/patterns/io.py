"""Reading and writing cell lists.

Two on-disk formats are understood:
- ``.json``: a list of ``[x, y]`` pairs (what ``dump_cells`` writes)
- ``.cells``: plaintext rows, ``O`` alive and ``.`` dead, ``!`` comment lines
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from sparselife.core.types import Cell
from sparselife.patterns.library import PatternError

ALIVE_MARKS = frozenset("O*")
DEAD_MARKS = frozenset(".")


def parse_plaintext(text: str) -> list[Cell]:
    """Parse plaintext pattern rows into cells.

    Raises:
        PatternError: On characters other than ``O``, ``*`` or ``.``.
    """
    cells: list[Cell] = []
    y = 0
    for line_number, raw in enumerate(text.splitlines(), start=1):
        if raw.startswith("!"):
            continue
        line = raw.rstrip()
        for x, mark in enumerate(line):
            if mark in ALIVE_MARKS:
                cells.append((x, y))
            elif mark not in DEAD_MARKS:
                raise PatternError(f"Unexpected {mark!r} at line {line_number}, column {x + 1}")
        y += 1
    return cells


def _cells_from_json(data: Any) -> list[Cell]:
    if not isinstance(data, list):
        raise PatternError("Cell file must contain a JSON list of [x, y] pairs")
    cells: list[Cell] = []
    for entry in data:
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in entry)
        ):
            raise PatternError(f"Invalid cell entry {entry!r}; expected [x, y] integers")
        cells.append((entry[0], entry[1]))
    return cells


def load_cells(path: str | Path) -> list[Cell]:
    """Load live cells from a ``.json`` or ``.cells`` file.

    Raises:
        PatternError: If the content is malformed or not UTF-8.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PatternError(f"{path}: not UTF-8 text") from e
    if path.suffix.lower() == ".cells":
        return parse_plaintext(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PatternError(f"{path}: not valid JSON ({e.msg})") from e
    return _cells_from_json(data)


def dump_cells(cells: Iterable[Cell], path: str | Path) -> None:
    """Write cells as a sorted JSON list of ``[x, y]`` pairs."""
    payload = [[x, y] for x, y in sorted(cells)]
    Path(path).write_text(json.dumps(payload) + "\n", encoding="utf-8")
