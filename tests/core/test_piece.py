"""Tests for the Piece value object."""

from __future__ import annotations

import pytest

from kingside.core.enums import PieceKind, Side
from kingside.core.piece import Piece


class TestPiece:
    def test_equality_is_positional(self) -> None:
        assert Piece(Side.WHITE, PieceKind.KNIGHT, 10) == Piece(
            Side.WHITE, PieceKind.KNIGHT, 10
        )
        assert Piece(Side.WHITE, PieceKind.KNIGHT, 10) != Piece(
            Side.WHITE, PieceKind.KNIGHT, 10, first_move=False
        )
        assert Piece(Side.WHITE, PieceKind.KNIGHT, 10) != Piece(
            Side.BLACK, PieceKind.KNIGHT, 10
        )

    def test_moved_to_returns_new_piece(self) -> None:
        knight = Piece(Side.WHITE, PieceKind.KNIGHT, 62)
        moved = knight.moved_to(45)
        assert moved.square == 45
        assert not moved.first_move
        assert knight.square == 62
        assert knight.first_move

    def test_promoted_keeps_square_and_side(self) -> None:
        pawn = Piece(Side.BLACK, PieceKind.PAWN, 60, first_move=False)
        queen = pawn.promoted()
        assert queen == Piece(Side.BLACK, PieceKind.QUEEN, 60, first_move=False)

    def test_display_characters(self) -> None:
        assert str(Piece(Side.WHITE, PieceKind.KNIGHT, 0)) == "N"
        assert str(Piece(Side.BLACK, PieceKind.KING, 0)) == "k"

    def test_from_char(self) -> None:
        piece = Piece.from_char("q", 3)
        assert piece.side is Side.BLACK
        assert piece.kind == PieceKind.QUEEN
        with pytest.raises(ValueError):
            Piece.from_char("x", 3)

    def test_values(self) -> None:
        values = [kind.value_cp for kind in PieceKind]
        assert values == [100, 300, 350, 500, 1100, 10000]
