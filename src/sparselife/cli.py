"""Headless command line runner.

Usage:
    sparselife --pattern glider --generations 40 --report-every 10
    sparselife --cells seed.json --generations 100 --save result.json
    LIFE_HISTORY_LIMIT=10 sparselife --pattern acorn --history acorn.jsonl
    python -m sparselife --pattern gosper_gun --offset 16 16
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from sparselife.config import LifeSettings
from sparselife.patterns import PatternError, dump_cells, get_pattern, load_cells, pattern_names
from sparselife.tracing import InMemoryHistoryStore
from sparselife.world import GenerationEngine, Simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sparselife",
        description="Run Conway's Game of Life on a sparse unbounded board.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--pattern",
        default="gosper_gun",
        help=f"Named seed pattern ({', '.join(pattern_names())})",
    )
    source.add_argument("--cells", help="Seed from a .json or .cells file")
    parser.add_argument("--generations", type=int, default=100, help="Generations to run")
    parser.add_argument(
        "--offset",
        type=int,
        nargs=2,
        default=(0, 0),
        metavar=("X", "Y"),
        help="Translate the seed before running",
    )
    parser.add_argument(
        "--report-every",
        type=int,
        default=10,
        metavar="K",
        help="Print a status line every K generations (0: only the last)",
    )
    parser.add_argument("--save", help="Write the final live cells as JSON")
    parser.add_argument(
        "--history",
        metavar="FILE",
        help="Write the last LIFE_HISTORY_LIMIT generations as JSON lines",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LIFE_LOG_LEVEL",
    )
    return parser


def write_history(history: InMemoryHistoryStore, path: str) -> int:
    """Write every stored record, oldest first, one JSON object per line.

    Returns:
        Number of records written.
    """
    span = history.get_range()
    records = [] if span is None else [history.get(g) for g in range(span[0], span[1] + 1)]
    lines = [json.dumps(record.to_dict()) for record in records if record is not None]
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return len(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.generations < 0:
        print("error: --generations must be non-negative", file=sys.stderr)
        return 2

    try:
        settings = LifeSettings()
    except ValidationError as e:
        print(f"error: invalid LIFE_* settings\n{e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        seed = load_cells(args.cells) if args.cells else get_pattern(args.pattern)
    except (PatternError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    history = None
    if args.history:
        if not settings.history_limit:
            print("error: --history needs LIFE_HISTORY_LIMIT above 0", file=sys.stderr)
            return 2
        history = InMemoryHistoryStore(max_generations=settings.history_limit)
    simulation = Simulation(
        engine=GenerationEngine(settings.engine_config()),
        history=history,
        space=settings.coordinate_space(),
    )
    simulation.load(seed, offset=tuple(args.offset))
    logger.debug("coordinate space: %d bits", settings.coordinate_bits)

    print(f"generation={simulation.generation} population={simulation.population}")
    for _ in range(args.generations):
        simulation.tick()
        every = args.report_every
        if (every > 0 and simulation.generation % every == 0) or (
            simulation.generation == args.generations
        ):
            print(f"generation={simulation.generation} population={simulation.population}")

    if args.save:
        try:
            dump_cells(simulation.board.to_list(), args.save)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
    if history is not None:
        simulation.sync_history()
        try:
            write_history(history, args.history)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
