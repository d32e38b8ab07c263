"""Pattern library and cell-list persistence.

Usage:
    from sparselife.patterns import get_pattern, load_cells, dump_cells

    glider = get_pattern("glider")
    dump_cells(glider, "glider.json")
    assert load_cells("glider.json") == sorted(glider)
"""

from sparselife.patterns.io import dump_cells, load_cells, parse_plaintext
from sparselife.patterns.library import PATTERNS, PatternError, get_pattern, pattern_names, translate

__all__ = [
    "PATTERNS",
    "PatternError",
    "get_pattern",
    "pattern_names",
    "translate",
    "parse_plaintext",
    "load_cells",
    "dump_cells",
]
