"""grid_life
=========

Conway's Game of Life on a bounded, non-wrapping square board.

Import surface::

    from grid_life import Grid, Position, Simulation, step

``Grid`` holds one generation as a sparse persistent set of living
``Position`` values; ``step`` computes the next generation without touching
its input; ``Simulation`` adds the turn counter, seeding and a render
callback on top.
"""

from .position import Position, neighbors
from .grid import Grid, OutOfBoundsError
from .rules import will_be_alive_next_turn
from .simulation import Simulation, step

__all__ = [
    "Grid",
    "OutOfBoundsError",
    "Position",
    "Simulation",
    "neighbors",
    "step",
    "will_be_alive_next_turn",
]
