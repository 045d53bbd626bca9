"""The fixed Game of Life rule (B3/S23).

Evaluated against a single generation snapshot; the caller is responsible for
writing the outcome into a *different* grid.
"""

from grid_life.grid import Grid
from grid_life.position import Position


def will_be_alive_next_turn(grid: Grid, pos: Position) -> bool:
    """Return the state of ``pos`` in the generation after ``grid``."""
    is_alive = grid.is_alive(pos)
    living_neighbors = grid.count_live_neighbors(pos)

    # Underpopulation
    if is_alive and living_neighbors < 2:
        return False
    # Survival
    if is_alive and living_neighbors in (2, 3):
        return True
    # Overpopulation
    if is_alive and living_neighbors > 3:
        return False
    # Reproduction
    if not is_alive and living_neighbors == 3:
        return True
    return is_alive
