"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from kingside.core.enums import PieceKind, Side
from kingside.core.piece import Piece
from kingside.core.position import Position, PositionBuilder
from kingside.core.types import A1, A8, H1, H8, make_square, parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

STANDARD_SETUP = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"

# Castling letter → (side, rook home square)
_CASTLE_ROOKS: dict[str, tuple[Side, int]] = {
    "K": (Side.WHITE, H1),
    "Q": (Side.WHITE, A1),
    "k": (Side.BLACK, H8),
    "q": (Side.BLACK, A8),
}


def _parse_setup(text: str) -> Position:
    """Build a position from ``placement side castling en-passant`` text.

    Only kings and rooks named by the castling field keep their first-move
    flag; the en-passant field names the square behind the jumped pawn.
    """
    fields = text.split()
    placement = fields[0]
    side = Side.WHITE if len(fields) < 2 or fields[1] == "w" else Side.BLACK
    castling = fields[2] if len(fields) > 2 else "-"
    en_passant = fields[3] if len(fields) > 3 else "-"

    rights = {_CASTLE_ROOKS[c] for c in castling if c in _CASTLE_ROOKS}
    builder = PositionBuilder()
    for row, rank in enumerate(placement.split("/")):
        column = 0
        for char in rank:
            if char.isdigit():
                column += int(char)
                continue
            sq = make_square(column, row)
            piece = Piece.from_char(char, sq)
            if piece.kind == PieceKind.KING:
                first_move = any(s is piece.side for s, _ in rights)
            elif piece.kind == PieceKind.ROOK:
                first_move = (piece.side, sq) in rights
            elif piece.kind == PieceKind.PAWN:
                first_move = row == piece.side.pawn_start_row
            else:
                first_move = True
            builder.set_piece(Piece(piece.side, piece.kind, sq, first_move))
            column += 1

    builder.set_side_to_move(side)
    if en_passant != "-":
        behind = parse_square(en_passant)
        jumped = behind + side.opposite.direction * 8
        builder.set_en_passant_pawn(
            Piece(side.opposite, PieceKind.PAWN, jumped, first_move=False)
        )
    return builder.build()


@pytest.fixture
def load_position() -> Callable[[str], Position]:
    """Loader for positions written as ``placement side castling ep``."""
    return _parse_setup


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
