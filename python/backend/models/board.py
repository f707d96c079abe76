"""Board model for the 8-puzzle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidConfiguration

SIZE = 3
CELLS = SIZE * SIZE


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset (in flat indices) from the blank to the tile that slides.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 configuration.

    Cells are stored flat in row-major order. 0 represents the blank.
    """

    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        try:
            cells = tuple(self.cells)
        except TypeError:
            raise InvalidConfiguration(
                f"Expected a sequence of tiles, got {self.cells!r}."
            ) from None
        if len(cells) != CELLS:
            raise InvalidConfiguration(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(cells)}."
            )
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in cells):
            raise InvalidConfiguration(f"Tiles must be integers, got {cells!r}.")
        if sorted(cells) != list(range(CELLS)):
            raise InvalidConfiguration(
                f"Tiles must be a permutation of 0..{CELLS - 1}, got {cells!r}."
            )
        object.__setattr__(self, "cells", cells)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(flat)

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse ``"1,2,3,4,5,6,7,8,0"``, ``"1 2 3 ..."`` or ``"123456780"``."""
        text = text.strip()
        if re.fullmatch(r"\d{%d}" % CELLS, text):
            parts = list(text)
        else:
            parts = [p for p in re.split(r"[\s,;]+", text) if p]
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise InvalidConfiguration(f"Cannot parse board {text!r}.") from None
        return cls.from_flat(values)

    # -- keys & geometry ------------------------------------------------------

    @property
    def key(self) -> int:
        """Base-9 packing of the cells, first cell most significant."""
        k = 0
        for v in self.cells:
            k = k * CELLS + v
        return k

    @staticmethod
    def coords(index: int) -> tuple[int, int]:
        """Return ``(x, y)`` = ``(column, row)`` of a flat index."""
        return index % SIZE, index // SIZE

    @staticmethod
    def are_adjacent(i: int, j: int) -> bool:
        """True if cells *i* and *j* share an edge."""
        (x1, y1), (x2, y2) = Board.coords(i), Board.coords(j)
        return abs(x1 - x2) + abs(y1 - y2) == 1

    def position_of(self, value: int) -> int:
        for i, v in enumerate(self.cells):
            if v == value:
                return i
        raise ValueError(f"{value} is not on the board.")

    @property
    def blank_index(self) -> int:
        return self.position_of(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        """``(row, col)`` of the blank."""
        return divmod(self.blank_index, SIZE)

    @property
    def tiles(self) -> list[list[int]]:
        return [list(self.cells[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * SIZE + col]

    def is_solved(self) -> bool:
        return self == GOAL

    def is_tile_correct(self, index: int) -> bool:
        """Check if the value at *index* sits in its goal position."""
        return GOAL.cells[index] == self.cells[index]

    def tiles_out_of_place(self) -> int:
        """Count non-blank tiles away from their goal position."""
        return sum(
            1 for i, v in enumerate(self.cells) if v != 0 and not self.is_tile_correct(i)
        )

    # -- moves ----------------------------------------------------------------

    def slide(self, index: int) -> Board:
        """Return a new board with the tile at *index* slid into the blank."""
        blank = self.blank_index
        if not Board.are_adjacent(index, blank):
            raise ValueError(f"Cell {index} is not adjacent to the blank at {blank}.")
        cells = list(self.cells)
        cells[blank], cells[index] = cells[index], cells[blank]
        return Board(tuple(cells))

    def move(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction*; ``None`` if no tile can move that way."""
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return self.slide(tr * SIZE + tc)

    def direction_to(self, other: Board) -> Direction:
        """Return the move that turns this board into the adjacent *other*."""
        for direction in Direction:
            if self.move(direction) == other:
                return direction
        raise ValueError("Boards are not one move apart.")

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.cells)


GOAL = Board(tuple(range(1, CELLS)) + (0,))
