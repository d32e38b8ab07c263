"""End-to-end runs checked against known pattern behavior."""

from sparselife import Board, GenerationEngine, InMemoryHistoryStore, Simulation, get_pattern
from sparselife.patterns import translate


def test_lwss_travels_two_cells_every_four_generations() -> None:
    lwss = get_pattern("lwss")
    board = Board.from_cells(lwss)

    after = GenerationEngine().run(board, 4)

    shifted = {(x, y) for x, y in translate(lwss, -2, 0)}
    shifted_other = {(x, y) for x, y in translate(lwss, 2, 0)}
    assert set(after.to_list()) in (shifted, shifted_other)


def test_diehard_vanishes() -> None:
    board = GenerationEngine().run(Board.from_cells(get_pattern("diehard")), 130)
    assert board.population == 0
    assert board.generation == 130


def test_glider_far_from_origin_keeps_shape() -> None:
    """Index depth grows with distance travelled, not with coordinate magnitude."""
    history = InMemoryHistoryStore(max_generations=5)
    simulation = Simulation(history=history)
    simulation.load(get_pattern("glider"), offset=(20000, -20000))

    simulation.advance(40)

    expected = sorted(translate(get_pattern("glider"), 20010, -19990))
    assert simulation.board.to_list() == expected
    assert history.get_range() == (36, 40)
    assert all(history.get(g).population == 5 for g in range(36, 41))
