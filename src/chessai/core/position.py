"""Position — immutable board snapshot with attack and successor queries."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from chessai.core import movement
from chessai.core.enums import Color, PieceType
from chessai.core.piece import Piece
from chessai.core.types import BOARD_SIZE, Coordinate

# King before Queen: the layout this engine has always started from.
_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Position:
    """Mapping of :class:`Coordinate` to :class:`Piece`.

    A position never changes after construction. :meth:`with_move` returns a
    fresh position, so instances can be shared freely, including across
    threads.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Mapping[Coordinate, Piece] | None = None) -> None:
        self._pieces: dict[Coordinate, Piece] = dict(pieces or {})

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Position:
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Starting layout: white on rows 0-1, black on rows 6-7."""
        pieces: dict[Coordinate, Piece] = {}
        for col, ptype in enumerate(_BACK_RANK):
            pieces[Coordinate(0, col)] = Piece(Color.WHITE, ptype)
        for col in range(BOARD_SIZE):
            pieces[Coordinate(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
        for col in range(BOARD_SIZE):
            pieces[Coordinate(6, col)] = Piece(Color.BLACK, PieceType.PAWN)
        for col, ptype in enumerate(_BACK_RANK):
            pieces[Coordinate(7, col)] = Piece(Color.BLACK, ptype)
        return cls(pieces)

    # -- Element access -----------------------------------------------------

    @property
    def pieces(self) -> Mapping[Coordinate, Piece]:
        """Read-only view of the placement."""
        return MappingProxyType(self._pieces)

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._pieces.get(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._pieces

    def __iter__(self) -> Iterator[tuple[Coordinate, Piece]]:
        return iter(self._pieces.items())

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Occupancy ----------------------------------------------------------

    def is_occupied(self, coord: Coordinate, color: Color | None = None) -> bool:
        """Whether a piece (of *color*, when given) sits on *coord*."""
        piece = self._pieces.get(coord)
        if piece is None:
            return False
        return color is None or piece.color == color

    def king_coordinates(self, color: Color) -> list[Coordinate]:
        return [
            coord
            for coord, piece in self._pieces.items()
            if piece.color == color and piece.piece_type == PieceType.KING
        ]

    # -- Transforms ---------------------------------------------------------

    def with_move(self, origin: Coordinate, target: Coordinate) -> Position:
        """Relocate the piece on *origin* to *target*, capturing any occupant.

        *origin* must be occupied; an empty origin raises ``KeyError``.
        """
        pieces = dict(self._pieces)
        moved = pieces.pop(origin)
        pieces[target] = moved
        return Position(pieces)

    # -- Attack / move queries ---------------------------------------------

    def covered_tiles(self, color: Color) -> Iterator[Coordinate]:
        """Every tile attacked by *color*; duplicates are possible."""
        for coord, piece in self._pieces.items():
            if piece.color == color:
                yield from movement.tiles_covered(self, coord, piece)

    def is_covered(self, color: Color, coord: Coordinate) -> bool:
        return any(tile == coord for tile in self.covered_tiles(color))

    def possible_moves(self) -> Iterator[Position]:
        """Successors for every piece of both colors, in placement order."""
        for coord, piece in self._pieces.items():
            yield from movement.possible_moves(self, coord, piece)

    @property
    def is_check(self) -> bool:
        """Whether any king stands on a tile its opponent covers.

        Side to move is not tracked, so either king being attacked counts.
        """
        for coord, piece in self._pieces.items():
            if piece.piece_type != PieceType.KING:
                continue
            if self.is_covered(piece.color.opposite, coord):
                return True
        return False

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        lines: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                piece = self._pieces.get(Coordinate(row, col))
                cells.append(f"{piece.letter} " if piece else "  ")
            lines.append(f"{row} {''.join(cells)}")
        return "\n".join(lines) + "\n"

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        return hash(frozenset(self._pieces.items()))

    def __repr__(self) -> str:
        placement = ", ".join(f"{coord}={piece}" for coord, piece in self)
        return f"Position({placement})"
