"""Turn engine.

:func:`step` is the pure generation transition: it reads one grid and returns
a brand new one, never touching its input. :class:`Simulation` wraps it with
the mutable bits a driver needs (current grid, turn counter, seeding and a
render callback).

Transition outline:

1. Collect candidate cells (living cells and their in-bounds dead neighbors);
   no other cell can change state.
2. Evaluate :func:`grid_life.rules.will_be_alive_next_turn` for each distinct
   candidate against the *old* grid only.
3. Mark the survivors alive in a fresh grid of the same size.

Because every decision reads the old snapshot, the update is synchronous: no
cell ever observes a neighbor that was already advanced.
"""

import logging
import random
from typing import Optional

from grid_life.grid import Grid
from grid_life.rules import will_be_alive_next_turn
from grid_life.types import RenderFn, SeedFn

logger = logging.getLogger(__name__)


def step(grid: Grid) -> Grid:
    """Compute the next generation of ``grid``.

    Args:
        grid (Grid): Current generation. Not modified.

    Returns:
        Grid: Next generation, same size as ``grid``.
    """
    candidates = dict.fromkeys(grid.collect_candidate_cells())
    next_grid = Grid(grid.size)
    next_grid.make_alive_many(
        pos for pos in candidates if will_be_alive_next_turn(grid, pos)
    )
    logger.debug(
        "Evaluated %d candidates, population %d -> %d",
        len(candidates),
        grid.population,
        next_grid.population,
    )
    return next_grid


class Simulation:
    """Owns the current generation and advances it turn by turn.

    Attributes:
        seed_fn (SeedFn | None): Default seed policy used by :meth:`restart`.
        render_fn (RenderFn | None): Called with the current grid after every
            restart and every turn.
        rng (random.Random): Randomness source handed to seed functions.
    """

    seed_fn: Optional[SeedFn]
    render_fn: Optional[RenderFn]
    rng: random.Random

    def __init__(
        self,
        grid_size: int,
        seed_fn: Optional[SeedFn] = None,
        render_fn: Optional[RenderFn] = None,
        rng: Optional[random.Random] = None,
    ):
        self._grid = Grid(grid_size)
        self._turn = 0
        self.seed_fn = seed_fn
        self.render_fn = render_fn
        self.rng = rng or random.Random()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def turn(self) -> int:
        return self._turn

    def restart(self, seed_fn: Optional[SeedFn] = None) -> None:
        """Empty the board, apply a seed policy, reset the turn counter and render.

        Args:
            seed_fn (SeedFn | None): Overrides :attr:`seed_fn` for this
                restart. With neither set the board stays empty.
        """
        grid = Grid(self._grid.size)
        seed = seed_fn or self.seed_fn
        if seed is not None:
            seed(grid, self.rng)
        self._grid = grid
        self._turn = 0
        logger.info(
            "Restarted %dx%d simulation with %s, population %d",
            grid.size,
            grid.size,
            getattr(seed, "__qualname__", "no seed"),
            grid.population,
        )
        self._paint()

    def next(self) -> Grid:
        """Advance one turn and return the new current grid."""
        self._turn += 1
        self._grid = step(self._grid)
        logger.debug("Turn %d: population %d", self._turn, self._grid.population)
        self._paint()
        return self._grid

    def run(self, turns: int) -> Grid:
        if turns < 0:
            raise ValueError(f"Cannot run a negative number of turns: {turns}")
        for _ in range(turns):
            self.next()
        return self._grid

    def _paint(self) -> None:
        if self.render_fn is not None:
            self.render_fn(self._grid)
