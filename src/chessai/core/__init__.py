"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessai.core import Position

    pos = Position.initial()
    for successor in pos.possible_moves():
        print(successor)
"""

from chessai.core.enums import Color, PieceType
from chessai.core.movement import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
    MovementRule,
    cast_rays,
    possible_moves,
    tiles_covered,
)
from chessai.core.piece import Piece
from chessai.core.position import Position
from chessai.core.types import (
    ALL_COORDINATES,
    BOARD_SIZE,
    Coordinate,
    inside_board,
    parse_coordinate,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_COORDINATES",
    "BOARD_SIZE",
    "Coordinate",
    "inside_board",
    "parse_coordinate",
    # Domain objects
    "Piece",
    "Position",
    # Movement rules
    "BISHOP_DIRS",
    "KING_OFFSETS",
    "KNIGHT_OFFSETS",
    "ROOK_DIRS",
    "MovementRule",
    "cast_rays",
    "possible_moves",
    "tiles_covered",
]
