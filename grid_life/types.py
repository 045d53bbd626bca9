"""Common type aliases and enumerations.

``SeedFn`` and ``RenderFn`` are the two extension points of a
:class:`grid_life.simulation.Simulation`: the first populates an empty grid on
restart, the second receives every freshly adopted generation.
"""

import random
from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from grid_life.grid import Grid

SeedFn = Callable[["Grid", random.Random], None]
RenderFn = Callable[["Grid"], None]


class Direction(StrEnum):
    """Compass directions of the Moore neighborhood.

    Declared in the canonical neighbor order: starting west and proceeding
    clockwise. ``y`` grows downward, so ``TOP`` is ``y - 1``.
    """

    LEFT = auto()
    UPPER_LEFT = auto()
    TOP = auto()
    UPPER_RIGHT = auto()
    RIGHT = auto()
    LOWER_RIGHT = auto()
    BOTTOM = auto()
    LOWER_LEFT = auto()
