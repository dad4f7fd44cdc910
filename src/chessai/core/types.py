"""Coordinate value type and board-bound helpers.

Board layout::

    row 0 = white back rank, row 7 = black back rank
    col 0 = 'a', ..., col 7 = 'h'
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, order=True, slots=True)
class Coordinate:
    """Immutable (row, col) pair naming one tile.

    Out-of-range values are representable; filter with :func:`inside_board`.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        """Column letter then row digit, e.g. row 3 col 0 -> 'a3'."""
        return f"{chr(ord('a') + self.col)}{self.row}"


def inside_board(coord: Coordinate) -> bool:
    """Whether both components lie in 0-7."""
    return 0 <= coord.row < BOARD_SIZE and 0 <= coord.col < BOARD_SIZE


def parse_coordinate(name: str) -> Coordinate:
    """Parse a tile name, e.g. 'a3' -> Coordinate(3, 0)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "01234567":
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return Coordinate(int(name[1]), ord(name[0]) - ord("a"))


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
