"""Board model tests: construction, keys, geometry and moves."""

from __future__ import annotations

import pytest

from backend.models.board import GOAL, Board, Direction
from backend.models.errors import InvalidConfiguration


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    ["1,2,3,4,5,6,7,8,0", "1 2 3 4 5 6 7 8 0", "123456780", " 1, 2, 3, 4, 5, 6, 7, 8, 0 "],
)
def test_parse_formats(text: str) -> None:
    assert Board.parse(text) == GOAL


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
        [1, 2, 3, 4, 5, 6, 7, 8, "0"],
        [1.0, 2, 3, 4, 5, 6, 7, 8, 0],
        None,
    ],
    ids=["short", "long", "duplicate", "out-of-range", "string", "float", "none"],
)
def test_from_flat_rejects_bad_input(flat) -> None:
    with pytest.raises(InvalidConfiguration):
        Board.from_flat(flat)


def test_constructor_validates() -> None:
    with pytest.raises(InvalidConfiguration):
        Board((1, 1, 3, 4, 5, 6, 7, 8, 0))
    with pytest.raises(InvalidConfiguration):
        Board((1, 2, 3))

    board = Board([1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert board.cells == GOAL.cells
    assert isinstance(board.cells, tuple)
    assert hash(board) == hash(GOAL)


def test_parse_rejects_garbage() -> None:
    with pytest.raises(InvalidConfiguration):
        Board.parse("1,2,three,4,5,6,7,8,0")
    with pytest.raises(ValueError):
        Board.parse("")


# -- keys ---------------------------------------------------------------------


def test_key_is_packed_base_nine() -> None:
    cells = [8, 6, 7, 2, 5, 4, 3, 0, 1]
    expected = sum(v * 9 ** (8 - i) for i, v in enumerate(cells))
    assert Board.from_flat(cells).key == expected


def test_keys_are_distinct() -> None:
    a = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert a.key != b.key != GOAL.key
    assert GOAL.key == Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0]).key


# -- geometry -----------------------------------------------------------------


def test_coords() -> None:
    assert Board.coords(0) == (0, 0)
    assert Board.coords(5) == (2, 1)
    assert Board.coords(7) == (1, 2)


@pytest.mark.parametrize(
    "i, j, expected",
    [(0, 1, True), (0, 3, True), (4, 7, True), (2, 3, False), (0, 4, False), (5, 6, False)],
)
def test_are_adjacent(i: int, j: int, expected: bool) -> None:
    assert Board.are_adjacent(i, j) is expected
    assert Board.are_adjacent(j, i) is expected


def test_queries() -> None:
    board = Board.from_flat([4, 1, 3, 7, 2, 6, 0, 5, 8])

    assert board.position_of(7) == 3
    assert board.blank_index == 6
    assert board.blank_pos == (2, 0)
    assert board.tiles == [[4, 1, 3], [7, 2, 6], [0, 5, 8]]
    assert board.get_tile(1, 2) == 6
    assert board.tiles_out_of_place() == 6
    assert not board.is_solved()
    assert GOAL.is_solved()
    assert GOAL.tiles_out_of_place() == 0
    assert str(board) == "4,1,3,7,2,6,0,5,8"


# -- moves --------------------------------------------------------------------


def test_move_directions() -> None:
    board = Board.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])

    assert board.move(Direction.UP) == Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.move(Direction.DOWN) == Board.from_flat([1, 0, 3, 4, 2, 6, 7, 5, 8])
    assert board.move(Direction.LEFT) == Board.from_flat([1, 2, 3, 4, 6, 0, 7, 5, 8])
    assert board.move(Direction.RIGHT) == Board.from_flat([1, 2, 3, 0, 4, 6, 7, 5, 8])


def test_move_off_grid() -> None:
    assert GOAL.move(Direction.UP) is None
    assert GOAL.move(Direction.LEFT) is None


def test_slide_does_not_mutate() -> None:
    start = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    moved = start.slide(8)

    assert moved == GOAL
    assert start.cells == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    with pytest.raises(ValueError):
        start.slide(0)


def test_direction_to() -> None:
    start = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert start.direction_to(GOAL) is Direction.LEFT
    with pytest.raises(ValueError):
        GOAL.direction_to(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
