import pytest
from typing import Tuple

from grid_life.position import NEIGHBOR_OFFSETS, Position, neighbors
from grid_life.types import Direction


def test_neighbors_fixed_compass_order() -> None:
    assert Position(5, 5).neighbors() == (
        Position(4, 5),  # left
        Position(4, 4),  # upper-left
        Position(5, 4),  # top
        Position(6, 4),  # upper-right
        Position(6, 5),  # right
        Position(6, 6),  # lower-right
        Position(5, 6),  # bottom
        Position(4, 6),  # lower-left
    )


@pytest.mark.parametrize("x, y", [(0, 0), (3, 7), (-2, -5), (99, 0)])
def test_neighbors_are_distinct_at_chebyshev_distance_one(x: int, y: int) -> None:
    pos = Position(x, y)
    result = neighbors(pos)
    assert len(result) == 8
    assert len(set(result)) == 8
    for n in result:
        assert max(abs(n.x - x), abs(n.y - y)) == 1


def test_named_accessors_match_neighbor_order() -> None:
    pos = Position(2, 2)
    named = (
        pos.left,
        pos.upper_left,
        pos.top,
        pos.upper_right,
        pos.right,
        pos.lower_right,
        pos.bottom,
        pos.lower_left,
    )
    assert named == pos.neighbors()
    assert list(NEIGHBOR_OFFSETS) == list(Direction)


def test_neighbors_may_be_negative() -> None:
    assert Position(0, 0).upper_left == Position(-1, -1)


def test_equality_and_hash_by_value() -> None:
    assert Position(1, 2) == Position(1, 2)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_position_is_immutable() -> None:
    pos = Position(1, 2)
    with pytest.raises(AttributeError):
        pos.x = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "coords, key",
    [((0, 0), "0|0"), ((12, 7), "12|7"), ((-3, 4), "-3|4"), ((-1, -1), "-1|-1")],
)
def test_key_round_trip(coords: Tuple[int, int], key: str) -> None:
    pos = Position(*coords)
    assert pos.to_key() == key
    assert Position.from_key(pos.to_key()) == pos


@pytest.mark.parametrize(
    "key",
    [
        "",
        "1",
        "1,2",
        "1|2|3",
        "a|b",
        "1_0| 2",  # int() would accept underscores and spaces
        "+1|2",
        " 1|2",
        "1|2\n",
        "--1|2",
        "\u0661|2",  # non-ASCII digit
    ],
)
def test_from_key_rejects_malformed(key: str) -> None:
    with pytest.raises(ValueError):
        Position.from_key(key)
