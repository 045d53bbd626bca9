"""Simulation configuration.

``LifeConfig`` is a frozen value object; derive variants with
``dataclasses.replace``. Validation happens on construction so an invalid
config never reaches a :class:`grid_life.simulation.Simulation`.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from grid_life.renderer.canvas import DEFAULT_CELL_SIZE
from grid_life.seeding import (
    DEFAULT_SEED_FN_NAME,
    SEED_FN_MIN_GRID_SIZE,
    SEED_FN_REGISTRY,
    get_seed_fn,
)
from grid_life.types import SeedFn

DEFAULT_GRID_SIZE = 100
DEFAULT_INTERVAL_MS = 200


@dataclass(frozen=True)
class LifeConfig:
    """Parameters for one simulation run.

    Attributes:
        grid_size (int): Board edge length in cells.
        cell_size (int): Edge length of a painted cell in pixels.
        interval_ms (int): Period between turns for timer-driven drivers.
        seed_fn_name (str): Key into ``SEED_FN_REGISTRY``.
        seed (int | None): RNG seed for reproducible random seeding.
        max_turns (int | None): Optional turn limit (environment truncation).
    """

    grid_size: int = DEFAULT_GRID_SIZE
    cell_size: int = DEFAULT_CELL_SIZE
    interval_ms: int = DEFAULT_INTERVAL_MS
    seed_fn_name: str = DEFAULT_SEED_FN_NAME
    seed: Optional[int] = None
    max_turns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.interval_ms < 1:
            raise ValueError(f"interval_ms must be positive, got {self.interval_ms}")
        if self.max_turns is not None and self.max_turns < 0:
            raise ValueError(f"max_turns must be non-negative, got {self.max_turns}")
        if self.seed_fn_name not in SEED_FN_REGISTRY:
            raise ValueError(f"Unknown seed function: {self.seed_fn_name!r}")
        min_size = SEED_FN_MIN_GRID_SIZE.get(self.seed_fn_name, 1)
        if self.grid_size < min_size:
            raise ValueError(
                f"Seed function {self.seed_fn_name!r} needs grid_size >= {min_size}, "
                f"got {self.grid_size}"
            )

    @property
    def seed_fn(self) -> SeedFn:
        return get_seed_fn(self.seed_fn_name)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        side = self.grid_size * self.cell_size
        return side, side
