import random
from typing import List

import pytest

from grid_life.grid import Grid
from grid_life.position import Position
from grid_life.seeding import blinker_seed_fn, random_seed
from grid_life.simulation import Simulation, step
from grid_life.types import SeedFn
from tests.test_utils import (
    BLINKER_HORIZONTAL,
    BLINKER_VERTICAL,
    BLOCK,
    GLIDER,
    alive_coords,
    make_grid,
    shift,
)


def seed_cells(cells: set[tuple[int, int]]) -> SeedFn:
    def seed(grid: Grid, rng: random.Random) -> None:
        grid.make_alive_many(Position(x, y) for x, y in cells)

    return seed


def test_empty_grid_stays_empty() -> None:
    assert step(Grid(6)) == Grid(6)


def test_step_keeps_size_and_input() -> None:
    grid = make_grid(5, BLINKER_VERTICAL)
    next_grid = step(grid)
    assert next_grid is not grid
    assert next_grid.size == 5
    assert alive_coords(grid) == BLINKER_VERTICAL


@pytest.mark.parametrize("size", [5, 8])
def test_blinker_oscillates(size: int) -> None:
    sim = Simulation(size, seed_fn=seed_cells(BLINKER_VERTICAL))
    sim.restart()
    assert alive_coords(sim.next()) == BLINKER_HORIZONTAL
    assert alive_coords(sim.next()) == BLINKER_VERTICAL


def test_isolated_cell_dies() -> None:
    assert alive_coords(step(make_grid(5, [(2, 2)]))) == set()
    assert alive_coords(step(make_grid(5, [(2, 2), (3, 2)]))) == set()


def test_overcrowded_center_dies() -> None:
    plus = {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}
    assert (2, 2) not in alive_coords(step(make_grid(5, plus)))


def test_filled_block_center_dies() -> None:
    filled = {(x, y) for x in range(1, 4) for y in range(1, 4)}
    next_cells = alive_coords(step(make_grid(5, filled)))
    assert (2, 2) not in next_cells
    assert {(1, 1), (3, 1), (1, 3), (3, 3)} <= next_cells


def test_reproduction() -> None:
    # L-tromino fills its missing corner.
    cells = {(1, 1), (2, 1), (1, 2)}
    assert alive_coords(step(make_grid(5, cells))) == cells | {(2, 2)}


def test_block_is_still_life() -> None:
    cells = shift(BLOCK, 2, 2)
    assert alive_coords(step(make_grid(6, cells))) == cells


def test_block_in_corner_is_still_life() -> None:
    assert alive_coords(step(make_grid(2, BLOCK))) == BLOCK


def test_glider_translates_diagonally() -> None:
    sim = Simulation(12, seed_fn=seed_cells(shift(GLIDER, 2, 2)))
    sim.restart()
    assert alive_coords(sim.run(4)) == shift(GLIDER, 3, 3)


def test_border_is_not_wrapping() -> None:
    # Horizontal blinker on the top row: the upper cell would be off board.
    cells = {(0, 0), (1, 0), (2, 0)}
    assert alive_coords(step(make_grid(5, cells))) == {(1, 0), (1, 1)}


def test_turn_counter() -> None:
    sim = Simulation(5, seed_fn=seed_cells(BLINKER_VERTICAL))
    assert sim.turn == 0
    sim.restart()
    assert sim.turn == 0
    sim.next()
    sim.next()
    sim.next()
    assert sim.turn == 3
    sim.restart()
    assert sim.turn == 0
    assert alive_coords(sim.grid) == BLINKER_VERTICAL


def test_run_rejects_negative_turns() -> None:
    with pytest.raises(ValueError):
        Simulation(5).run(-1)


def test_next_replaces_grid() -> None:
    sim = Simulation(5, seed_fn=seed_cells(BLINKER_VERTICAL))
    sim.restart()
    before = sim.grid
    after = sim.next()
    assert after is sim.grid
    assert after is not before
    assert alive_coords(before) == BLINKER_VERTICAL


def test_render_called_on_restart_and_next() -> None:
    painted: List[Grid] = []
    sim = Simulation(5, seed_fn=seed_cells(BLINKER_VERTICAL), render_fn=painted.append)
    sim.restart()
    sim.next()
    assert len(painted) == 2
    assert alive_coords(painted[0]) == BLINKER_VERTICAL
    assert alive_coords(painted[1]) == BLINKER_HORIZONTAL
    assert painted[1] is sim.grid


def test_restart_seed_override() -> None:
    sim = Simulation(5, seed_fn=seed_cells(BLINKER_VERTICAL))
    sim.restart(blinker_seed_fn())
    assert alive_coords(sim.grid) == {(1, 2), (2, 2), (3, 2)}


def test_restart_without_seed_is_empty() -> None:
    sim = Simulation(5)
    sim.restart()
    assert sim.grid.population == 0
    assert sim.next().population == 0


def test_restart_clears_previous_generation() -> None:
    sim = Simulation(5, seed_fn=seed_cells({(0, 0)}))
    sim.restart(seed_cells(BLINKER_VERTICAL))
    sim.restart()
    assert alive_coords(sim.grid) == {(0, 0)}


def test_random_restart_reproducible() -> None:
    first = Simulation(20, seed_fn=random_seed, rng=random.Random(5))
    second = Simulation(20, seed_fn=random_seed, rng=random.Random(5))
    first.restart()
    second.restart()
    assert first.grid == second.grid
    assert first.run(3) == second.run(3)
