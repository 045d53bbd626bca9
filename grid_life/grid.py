"""Bounded square board holding the sparse set of living cells.

The alive set is a persistent set (``pyrsistent.PSet``) of
:class:`grid_life.position.Position` values. Mutating calls rebind the grid to
a new persistent set instead of changing the old one, so a snapshot obtained
from :attr:`Grid.alive` or :meth:`Grid.living_cells` stays valid for a reader
(e.g. the renderer) no matter what happens to the grid afterwards.

Bounds:

* Reads are total. ``is_alive`` reports any out-of-bounds position as dead,
  which is what neighbor counting at the border relies on.
* Writes are checked. ``make_alive`` / ``make_dead`` outside
  ``[0, size) x [0, size)`` raise :class:`OutOfBoundsError`.
"""

from typing import Iterable, Iterator, List, Optional

import numpy as np
import numpy.typing as npt
from pyrsistent import pset
from pyrsistent.typing import PSet

from grid_life.position import Position

BoolArray = npt.NDArray[np.bool_]


class OutOfBoundsError(ValueError):
    """Raised when a cell outside the board is marked alive or dead."""

    def __init__(self, pos: Position, size: int):
        super().__init__(
            f"Position ({pos.x}, {pos.y}) out of bounds for grid of size {size}"
        )
        self.pos = pos
        self.size = size


class Grid:
    """Square ``size x size`` board.

    Attributes:
        size (int): Board edge length; cells span ``[0, size)`` on both axes.
    """

    def __init__(self, size: int, alive: Optional[Iterable[Position]] = None):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self._size = size
        self._alive: PSet[Position] = pset()
        if alive is not None:
            self.make_alive_many(alive)

    @property
    def size(self) -> int:
        return self._size

    @property
    def alive(self) -> PSet[Position]:
        """Immutable snapshot of the living positions."""
        return self._alive

    @property
    def population(self) -> int:
        return len(self._alive)

    def __len__(self) -> int:
        return len(self._alive)

    def __contains__(self, pos: object) -> bool:
        return pos in self._alive

    def __iter__(self) -> Iterator[Position]:
        return iter(self._alive)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._alive == other._alive

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, population={len(self._alive)})"

    def copy(self) -> "Grid":
        clone = Grid(self._size)
        clone._alive = self._alive
        return clone

    def clear(self) -> None:
        self._alive = pset()

    # Queries

    def is_within_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._size and 0 <= pos.y < self._size

    def is_alive(self, pos: Position) -> bool:
        return pos in self._alive

    def neighbors_in_bounds(self, pos: Position) -> List[Position]:
        """Neighbors of ``pos`` that lie on the board, in compass order."""
        return [n for n in pos.neighbors() if self.is_within_bounds(n)]

    def count_live_neighbors(self, pos: Position) -> int:
        return sum(1 for n in self.neighbors_in_bounds(pos) if self.is_alive(n))

    def living_cells(self) -> List[Position]:
        return list(self._alive)

    def collect_candidate_cells(self) -> List[Position]:
        """Cells whose state may change next turn.

        Living cells first, then every in-bounds dead neighbor of a living
        cell. A dead neighbor shared by several living cells appears once per
        living cell; callers that care deduplicate.
        """
        living = self.living_cells()
        fringe = [
            n
            for cell in living
            for n in self.neighbors_in_bounds(cell)
            if not self.is_alive(n)
        ]
        return living + fringe

    def to_array(self) -> BoolArray:
        """Dense boolean mask of shape ``(size, size)`` indexed ``[y, x]``."""
        arr: BoolArray = np.zeros((self._size, self._size), dtype=np.bool_)
        for pos in self._alive:
            arr[pos.y, pos.x] = True
        return arr

    # Mutation

    def make_alive(self, pos: Position) -> None:
        self._set_cell(pos, True)

    def make_alive_at(self, x: int, y: int) -> None:
        self.make_alive(Position(x, y))

    def make_alive_many(self, positions: Iterable[Position]) -> None:
        """Mark each position alive in order.

        Not atomic: if an element is out of bounds the error propagates and
        the elements before it remain alive.
        """
        for pos in positions:
            self.make_alive(pos)

    def make_dead(self, pos: Position) -> None:
        self._set_cell(pos, False)

    def make_dead_at(self, x: int, y: int) -> None:
        self.make_dead(Position(x, y))

    def _set_cell(self, pos: Position, alive: bool) -> None:
        if not self.is_within_bounds(pos):
            raise OutOfBoundsError(pos, self._size)
        if alive:
            self._alive = self._alive.add(pos)
        else:
            self._alive = self._alive.discard(pos)
