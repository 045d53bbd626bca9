"""Position value object.

Immutable integer grid coordinates plus the eight Moore-neighborhood offsets.
Coordinates may be negative or exceed the board; bounds are a property of a
:class:`grid_life.grid.Grid`, not of a position.

The canonical string form ``"x|y"`` (see :meth:`Position.to_key`) is kept as a
stable textual key for debugging and diagnostics.
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

from grid_life.types import Direction

KEY_SEPARATOR = "|"
KEY_PATTERN = re.compile(r"(-?\d+)\|(-?\d+)", re.ASCII)

NEIGHBOR_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.UPPER_LEFT: (-1, -1),
    Direction.TOP: (0, -1),
    Direction.UPPER_RIGHT: (1, -1),
    Direction.RIGHT: (1, 0),
    Direction.LOWER_RIGHT: (1, 1),
    Direction.BOTTOM: (0, 1),
    Direction.LOWER_LEFT: (-1, 1),
}
"""Direction -> (dx, dy), in the fixed neighbor order."""


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    @classmethod
    def from_key(cls, key: str) -> "Position":
        """Parse a ``"x|y"`` key produced by :meth:`to_key`.

        Raises:
            ValueError: If ``key`` is not two integers joined by ``|``.
        """
        match = KEY_PATTERN.fullmatch(key)
        if match is None:
            raise ValueError(f"Malformed position key: {key!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def to_key(self) -> str:
        return f"{self.x}{KEY_SEPARATOR}{self.y}"

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def neighbor(self, direction: Direction) -> "Position":
        dx, dy = NEIGHBOR_OFFSETS[direction]
        return self.offset(dx, dy)

    def neighbors(self) -> Tuple["Position", ...]:
        """All eight neighbors: left, upper-left, top, upper-right, right,
        lower-right, bottom, lower-left."""
        return tuple(self.offset(dx, dy) for dx, dy in NEIGHBOR_OFFSETS.values())

    @property
    def left(self) -> "Position":
        return self.neighbor(Direction.LEFT)

    @property
    def upper_left(self) -> "Position":
        return self.neighbor(Direction.UPPER_LEFT)

    @property
    def top(self) -> "Position":
        return self.neighbor(Direction.TOP)

    @property
    def upper_right(self) -> "Position":
        return self.neighbor(Direction.UPPER_RIGHT)

    @property
    def right(self) -> "Position":
        return self.neighbor(Direction.RIGHT)

    @property
    def lower_right(self) -> "Position":
        return self.neighbor(Direction.LOWER_RIGHT)

    @property
    def bottom(self) -> "Position":
        return self.neighbor(Direction.BOTTOM)

    @property
    def lower_left(self) -> "Position":
        return self.neighbor(Direction.LOWER_LEFT)


def neighbors(pos: Position) -> Tuple[Position, ...]:
    """Free-function form of :meth:`Position.neighbors`."""
    return pos.neighbors()
