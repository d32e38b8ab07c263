"""Grow a Gosper glider gun and print an ASCII view of the result.

Usage:
    python examples/glider_gun.py
"""

from sparselife import Board, GenerationEngine, InMemoryHistoryStore, Simulation, get_pattern


def render(board: Board, width: int = 60, height: int = 30) -> str:
    rows = [["." for _ in range(width)] for _ in range(height)]
    for cell in board.cells():
        if 0 <= cell.x < width and 0 <= cell.y < height:
            rows[cell.y][cell.x] = "O"
    return "\n".join("".join(row) for row in rows)


def main() -> None:
    history = InMemoryHistoryStore(max_generations=200)
    simulation = Simulation(engine=GenerationEngine(), history=history)
    simulation.load(get_pattern("gosper_gun"), offset=(1, 1))

    simulation.advance(120)

    print(render(simulation.board))
    oldest, newest = history.get_range()
    for generation in range(oldest, newest + 1, 30):
        print(f"generation {generation}: {history.get(generation).population} cells")


if __name__ == "__main__":
    main()
