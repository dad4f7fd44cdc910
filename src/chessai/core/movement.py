"""Per-piece movement rules: covered tiles and successor positions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, NamedTuple

from chessai.core.enums import PieceType
from chessai.core.piece import Piece
from chessai.core.types import Coordinate, inside_board

if TYPE_CHECKING:
    from chessai.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

# Row-major over {-1, 0, 1}²; (0, 0) drops out because the king's own tile is
# always friendly-occupied.
KING_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (d_row, d_col) for d_row in (-1, 0, 1) for d_col in (-1, 0, 1)
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

TilesFn = Callable[["Position", Coordinate, Piece], Iterator[Coordinate]]
MovesFn = Callable[["Position", Coordinate, Piece], Iterator["Position"]]


class MovementRule(NamedTuple):
    """Pair of callables describing how one piece variant moves."""

    tiles_covered: TilesFn
    possible_moves: MovesFn


# -- Attack sets -----------------------------------------------------------


def cast_rays(
    position: Position,
    coord: Coordinate,
    directions: tuple[tuple[int, int], ...],
) -> Iterator[Coordinate]:
    """Walk each direction until the edge, including the first occupied tile."""
    for d_row, d_col in directions:
        target = coord.offset(d_row, d_col)
        while inside_board(target):
            yield target
            if position.is_occupied(target):
                break
            target = target.offset(d_row, d_col)


def _rook_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    return cast_rays(position, coord, ROOK_DIRS)


def _bishop_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    return cast_rays(position, coord, BISHOP_DIRS)


def _queen_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    union = dict.fromkeys(cast_rays(position, coord, ROOK_DIRS))
    union.update(dict.fromkeys(cast_rays(position, coord, BISHOP_DIRS)))
    return iter(union)


def _knight_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    for d_row, d_col in KNIGHT_OFFSETS:
        target = coord.offset(d_row, d_col)
        if inside_board(target):
            yield target


def _king_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    for d_row, d_col in KING_OFFSETS:
        target = coord.offset(d_row, d_col)
        if inside_board(target) and not position.is_occupied(target, piece.color):
            yield target


def _pawn_tiles(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    # Capture diagonals only; occupancy is not consulted.
    row = coord.row + piece.color.forward
    if not 0 <= row <= 7:
        return
    if coord.col < 7:
        yield Coordinate(row, coord.col + 1)
    if coord.col > 0:
        yield Coordinate(row, coord.col - 1)


# -- Move generation -------------------------------------------------------


def _default_moves(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Position]:
    for target in tiles_covered(position, coord, piece):
        if not position.is_occupied(target, piece.color):
            yield position.with_move(coord, target)


def _king_moves(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Position]:
    opponent = piece.color.opposite
    # Opponent coverage is measured before the king moves.
    targets = [
        target
        for target in _king_tiles(position, coord, piece)
        if not position.is_covered(opponent, target)
    ]
    for target in targets:
        yield position.with_move(coord, target)


def _pawn_moves(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Position]:
    target = coord.offset(piece.color.forward, 0)
    if inside_board(target) and not position.is_occupied(target):
        yield position.with_move(coord, target)


RULES: dict[PieceType, MovementRule] = {
    PieceType.PAWN: MovementRule(_pawn_tiles, _pawn_moves),
    PieceType.ROOK: MovementRule(_rook_tiles, _default_moves),
    PieceType.KNIGHT: MovementRule(_knight_tiles, _default_moves),
    PieceType.BISHOP: MovementRule(_bishop_tiles, _default_moves),
    PieceType.QUEEN: MovementRule(_queen_tiles, _default_moves),
    PieceType.KING: MovementRule(_king_tiles, _king_moves),
}


def tiles_covered(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Coordinate]:
    """Tiles *piece* standing on *coord* attacks in *position*."""
    return RULES[piece.piece_type].tiles_covered(position, coord, piece)


def possible_moves(
    position: Position, coord: Coordinate, piece: Piece
) -> Iterator[Position]:
    """Successor positions after moving *piece* from *coord* once."""
    return RULES[piece.piece_type].possible_moves(position, coord, piece)
