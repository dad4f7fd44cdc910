"""Tests for Position queries, transforms and rendering."""

import pytest

from chessai.core.enums import Color, PieceType
from chessai.core.piece import Piece
from chessai.core.position import Position
from chessai.core.types import Coordinate, parse_coordinate


def _place(**tiles: str) -> Position:
    return Position(
        {parse_coordinate(name): Piece.from_char(char) for name, char in tiles.items()}
    )


class TestPositionInitial:
    def test_thirty_two_pieces(self) -> None:
        assert len(Position.initial()) == 32

    def test_white_back_rank_king_before_queen(self) -> None:
        pos = Position.initial()
        expected = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.KING,
            PieceType.QUEEN,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert pos[Coordinate(0, col)] == Piece(Color.WHITE, pt)
            assert pos[Coordinate(7, col)] == Piece(Color.BLACK, pt)

    def test_pawn_rows(self) -> None:
        pos = Position.initial()
        for col in range(8):
            assert pos[Coordinate(1, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert pos[Coordinate(6, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        pos = Position.initial()
        for row in range(2, 6):
            for col in range(8):
                assert not pos.is_occupied(Coordinate(row, col))

    def test_not_in_check(self) -> None:
        assert Position.initial().is_check is False

    def test_successor_count(self) -> None:
        # 16 single pawn pushes plus two knight moves per knight, both colors.
        successors = list(Position.initial().possible_moves())
        assert len(successors) == 24

    def test_successor_order_starts_with_white_knight(self) -> None:
        first = next(Position.initial().possible_moves())
        assert first[Coordinate(0, 1)] is None
        assert first[Coordinate(2, 2)] == Piece(Color.WHITE, PieceType.KNIGHT)


class TestOccupancy:
    def test_is_occupied_any_color(self) -> None:
        pos = _place(c2="P", d3="n")
        assert pos.is_occupied(Coordinate(2, 2))
        assert pos.is_occupied(Coordinate(3, 3))
        assert not pos.is_occupied(Coordinate(4, 4))

    def test_is_occupied_by_color(self) -> None:
        pos = _place(c2="P")
        assert pos.is_occupied(Coordinate(2, 2), Color.WHITE)
        assert not pos.is_occupied(Coordinate(2, 2), Color.BLACK)
        assert not pos.is_occupied(Coordinate(4, 4), Color.WHITE)

    def test_getitem_returns_none_for_empty(self) -> None:
        assert Position.empty()[Coordinate(0, 0)] is None


class TestWithMove:
    def test_relocates_piece(self) -> None:
        pos = _place(c2="N")
        moved = pos.with_move(Coordinate(2, 2), Coordinate(4, 3))
        assert moved[Coordinate(2, 2)] is None
        assert moved[Coordinate(4, 3)] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_original_unchanged(self) -> None:
        pos = Position.initial()
        pos.with_move(Coordinate(1, 4), Coordinate(3, 4))
        assert pos == Position.initial()

    def test_capture_overwrites_target(self) -> None:
        pos = _place(c2="R", c6="q")
        moved = pos.with_move(Coordinate(2, 2), Coordinate(6, 2))
        assert len(moved) == 1
        assert moved[Coordinate(6, 2)] == Piece(Color.WHITE, PieceType.ROOK)

    def test_same_tile_keeps_piece(self) -> None:
        pos = _place(c2="R")
        assert pos.with_move(Coordinate(2, 2), Coordinate(2, 2)) == pos

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(KeyError):
            Position.empty().with_move(Coordinate(0, 0), Coordinate(1, 1))


class TestCoverage:
    def test_duplicates_allowed(self) -> None:
        pos = _place(a0="R", c0="R")
        tiles = list(pos.covered_tiles(Color.WHITE))
        assert tiles.count(Coordinate(0, 1)) == 2
        assert pos.is_covered(Color.WHITE, Coordinate(0, 1))

    def test_only_requested_color(self) -> None:
        pos = _place(a0="R", h7="r")
        assert not pos.is_covered(Color.WHITE, Coordinate(7, 6))
        assert pos.is_covered(Color.BLACK, Coordinate(7, 6))

    def test_pawn_covers_diagonals_even_when_empty(self) -> None:
        pos = _place(d3="p")
        assert pos.is_covered(Color.BLACK, Coordinate(2, 2))
        assert pos.is_covered(Color.BLACK, Coordinate(2, 4))
        assert not pos.is_covered(Color.BLACK, Coordinate(2, 3))

    def test_sequences_are_restartable(self) -> None:
        pos = Position.initial()
        assert list(pos.covered_tiles(Color.WHITE)) == list(pos.covered_tiles(Color.WHITE))
        assert list(pos.possible_moves()) == list(pos.possible_moves())


class TestCheck:
    def test_rook_gives_check(self) -> None:
        assert _place(a0="K", a7="r").is_check

    def test_blocked_rook_no_check(self) -> None:
        assert not _place(a0="K", a7="r", a3="P").is_check

    def test_pawn_gives_check_to_black_king(self) -> None:
        assert _place(d5="P", e6="k").is_check

    def test_either_king_counts(self) -> None:
        pos = _place(a0="K", h7="k", a5="r", h2="R")
        assert pos.is_check

    def test_no_kings_no_check(self) -> None:
        assert not _place(a0="R", a7="r").is_check

    def test_king_coordinates(self) -> None:
        pos = Position.initial()
        assert pos.king_coordinates(Color.WHITE) == [Coordinate(0, 3)]
        assert pos.king_coordinates(Color.BLACK) == [Coordinate(7, 3)]


class TestPositionValue:
    def test_equality_and_hash(self) -> None:
        assert Position.initial() == Position.initial()
        assert hash(Position.initial()) == hash(Position.initial())
        assert Position.initial() != Position.empty()

    def test_pieces_view_is_read_only(self) -> None:
        pos = Position.initial()
        with pytest.raises(TypeError):
            pos.pieces[Coordinate(3, 3)] = Piece(Color.WHITE, PieceType.QUEEN)  # type: ignore[index]

    def test_iteration_yields_pairs(self) -> None:
        pos = _place(c2="P")
        assert list(pos) == [(Coordinate(2, 2), Piece(Color.WHITE, PieceType.PAWN))]
        assert Coordinate(2, 2) in pos


class TestRender:
    def test_initial_layout(self) -> None:
        lines = Position.initial().render().splitlines()
        assert len(lines) == 8
        assert lines[0] == "0 R N B K Q B N R "
        assert lines[1] == "1 " + "P " * 8
        assert lines[2] == "2 " + " " * 16
        assert lines[7] == "7 R N B K Q B N R "

    def test_str_matches_render(self) -> None:
        pos = _place(e4="k")
        assert str(pos) == pos.render()
        assert pos.render().splitlines()[4] == "4 " + " " * 8 + "K " + " " * 6
