"""Seed policies and registry.

A seed function populates an *empty* grid when a simulation restarts:

``SeedFn = Callable[[Grid, random.Random], None]``

Fixed patterns ignore the RNG. Patterns that do not fit on the board raise
:class:`grid_life.grid.OutOfBoundsError` rather than being clipped.
"""

import logging
import random
from typing import Dict, Optional

from grid_life.grid import Grid
from grid_life.position import Position
from grid_life.types import SeedFn

logger = logging.getLogger(__name__)

ROW_LENGTH = 10
BLINKER_LENGTH = 3


def _centered_row_origin(grid: Grid, length: int) -> Position:
    x = max(0, (grid.size - length) // 2)
    return Position(x, grid.size // 2)


def _seed_row(grid: Grid, origin: Position, length: int) -> None:
    cell = origin
    grid.make_alive(cell)
    for _ in range(length - 1):
        cell = cell.right
        grid.make_alive(cell)


def ten_cell_row_seed_fn(origin: Optional[Position] = None) -> SeedFn:
    """Ten cells in a horizontal row starting at ``origin``.

    Defaults to a row centered on the board.
    """

    def seed(grid: Grid, rng: random.Random) -> None:
        start = origin
        if start is None:
            start = _centered_row_origin(grid, ROW_LENGTH)
        logger.debug("Seeding ten-cell row at %s", start)
        _seed_row(grid, start, ROW_LENGTH)

    return seed


def blinker_seed_fn(origin: Optional[Position] = None) -> SeedFn:
    """Horizontal period-2 blinker: ``origin`` and the two cells to its right."""

    def seed(grid: Grid, rng: random.Random) -> None:
        start = origin
        if start is None:
            start = _centered_row_origin(grid, BLINKER_LENGTH)
        logger.debug("Seeding blinker at %s", start)
        _seed_row(grid, start, BLINKER_LENGTH)

    return seed


def random_seed(grid: Grid, rng: random.Random) -> None:
    """Sample a cell count uniformly in ``[0, size*size)``, then that many cells.

    Repeated samples collapse onto the same cell, so the final population is
    usually below the drawn count.
    """
    size = grid.size
    count = rng.randrange(size * size)
    for _ in range(count):
        grid.make_alive(Position(rng.randrange(size), rng.randrange(size)))
    logger.debug("Random seed drew %d cells, %d alive", count, grid.population)


def empty_seed(grid: Grid, rng: random.Random) -> None:
    """Leave the grid empty."""


SEED_FN_REGISTRY: Dict[str, SeedFn] = {
    "random": random_seed,
    "row": ten_cell_row_seed_fn(),
    "blinker": blinker_seed_fn(),
    "empty": empty_seed,
}
"""Name -> seed function mapping for configuration and the app."""

DEFAULT_SEED_FN_NAME = "random"

SEED_FN_MIN_GRID_SIZE: Dict[str, int] = {
    "row": ROW_LENGTH,
    "blinker": BLINKER_LENGTH,
}
"""Smallest board each centered fixed pattern fits on; others fit any board."""


def get_seed_fn(name: str) -> SeedFn:
    if name not in SEED_FN_REGISTRY:
        raise ValueError(
            f"Unknown seed function {name!r}; "
            f"expected one of {sorted(SEED_FN_REGISTRY)}"
        )
    return SEED_FN_REGISTRY[name]
