"""Position: immutable board snapshot with both players derived on construction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kingside.core.enums import PieceKind, Side
from kingside.core.move_generator import DEFAULT_MOVE_GENERATOR, MoveGenerator
from kingside.core.piece import Piece
from kingside.core.player import Player
from kingside.core.types import (
    NUM_SQUARES,
    SQUARES_PER_ROW,
    Square,
    is_valid_square,
    make_square,
)

_BACK_ROW: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class InvalidPositionError(ValueError):
    """Raised when a position is structurally malformed (e.g. a missing king)."""


class Position:
    """Immutable chess position.

    ``ply`` counts half-moves from the game's start position and indexes the
    caller's move history; it is not part of equality or hashing.
    """

    __slots__ = (
        "squares",
        "side_to_move",
        "en_passant_pawn",
        "castled",
        "ply",
        "white_pieces",
        "black_pieces",
        "white_player",
        "black_player",
        "current_player",
        "_hash",
    )

    def __init__(
        self,
        squares: Iterable[Piece | None],
        side_to_move: Side = Side.WHITE,
        en_passant_pawn: Piece | None = None,
        castled: Iterable[Side] = (),
        ply: int = 0,
        generator: MoveGenerator = DEFAULT_MOVE_GENERATOR,
    ) -> None:
        board = tuple(squares)
        _validate(board, side_to_move, en_passant_pawn)
        init = object.__setattr__
        init(self, "squares", board)
        init(self, "side_to_move", side_to_move)
        init(self, "en_passant_pawn", en_passant_pawn)
        init(self, "castled", frozenset(castled))
        init(self, "ply", ply)
        init(self, "white_pieces", _pieces_of(board, Side.WHITE))
        init(self, "black_pieces", _pieces_of(board, Side.BLACK))
        init(self, "_hash", hash((board, side_to_move, en_passant_pawn, self.castled)))

        white_moves = generator.side_moves(self, Side.WHITE)
        black_moves = generator.side_moves(self, Side.BLACK)
        white = Player(self, Side.WHITE, white_moves, black_moves, generator)
        black = Player(self, Side.BLACK, black_moves, white_moves, generator)
        init(self, "white_player", white)
        init(self, "black_player", black)
        init(self, "current_player", white if side_to_move is Side.WHITE else black)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.squares[sq]

    def is_occupied(self, sq: Square) -> bool:
        return self.squares[sq] is not None

    def pieces(self, side: Side) -> tuple[Piece, ...]:
        return self.white_pieces if side is Side.WHITE else self.black_pieces

    @property
    def all_pieces(self) -> tuple[Piece, ...]:
        return self.white_pieces + self.black_pieces

    def king(self, side: Side) -> Piece:
        for piece in self.pieces(side):
            if piece.kind == PieceKind.KING:
                return piece
        raise InvalidPositionError(f"No {side.name} king on the board")

    def player(self, side: Side) -> Player:
        return self.white_player if side is Side.WHITE else self.black_player

    @property
    def is_game_over(self) -> bool:
        return self.current_player.status.is_terminal

    # ── Display ──────────────────────────────────────────────────────────

    def to_display_string(self) -> str:
        """8×8 text grid, rank 8 first, ``-`` for empty squares."""
        lines: list[str] = []
        for row in range(SQUARES_PER_ROW):
            cells = (
                self.squares[make_square(column, row)]
                for column in range(SQUARES_PER_ROW)
            )
            lines.append("".join(f"{str(p) if p else '-':>3}" for p in cells))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Position(side_to_move={self.side_to_move.name}, ply={self.ply})"

    # ── Equality ─────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._hash == other._hash
            and self.side_to_move == other.side_to_move
            and self.en_passant_pawn == other.en_passant_pawn
            and self.castled == other.castled
            and self.squares == other.squares
        )

    def __hash__(self) -> int:
        return self._hash


def _pieces_of(board: tuple[Piece | None, ...], side: Side) -> tuple[Piece, ...]:
    return tuple(p for p in board if p is not None and p.side is side)


def _check_square(sq: Square) -> None:
    if not is_valid_square(sq):
        raise InvalidPositionError(f"Square {sq} is off the board")


def _validate(
    board: tuple[Piece | None, ...],
    side_to_move: Side,
    en_passant_pawn: Piece | None,
) -> None:
    if len(board) != NUM_SQUARES:
        raise InvalidPositionError(f"Expected {NUM_SQUARES} squares, got {len(board)}")

    kings = {Side.WHITE: 0, Side.BLACK: 0}
    for sq, piece in enumerate(board):
        if piece is None:
            continue
        if piece.square != sq:
            raise InvalidPositionError(f"{piece!r} stored on square {sq}")
        if piece.kind == PieceKind.KING:
            kings[piece.side] += 1
    for side, count in kings.items():
        if count != 1:
            raise InvalidPositionError(f"Expected one {side.name} king, found {count}")

    if en_passant_pawn is not None:
        if (
            en_passant_pawn.kind != PieceKind.PAWN
            or en_passant_pawn.side is side_to_move
            or not is_valid_square(en_passant_pawn.square)
            or board[en_passant_pawn.square] != en_passant_pawn
        ):
            raise InvalidPositionError(
                f"Invalid en passant pawn {en_passant_pawn!r}"
            )


class PositionBuilder:
    """Mutable staging area for a :class:`Position`."""

    __slots__ = ("_squares", "_side_to_move", "_en_passant_pawn", "_castled", "_ply")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * NUM_SQUARES
        self._side_to_move = Side.WHITE
        self._en_passant_pawn: Piece | None = None
        self._castled: frozenset[Side] = frozenset()
        self._ply = 0

    @classmethod
    def from_position(cls, position: Position) -> PositionBuilder:
        builder = cls()
        builder._squares = list(position.squares)
        builder._side_to_move = position.side_to_move
        builder._en_passant_pawn = position.en_passant_pawn
        builder._castled = position.castled
        builder._ply = position.ply
        return builder

    def set_piece(self, piece: Piece) -> PositionBuilder:
        _check_square(piece.square)
        self._squares[piece.square] = piece
        return self

    def clear_square(self, sq: Square) -> PositionBuilder:
        _check_square(sq)
        self._squares[sq] = None
        return self

    def set_side_to_move(self, side: Side) -> PositionBuilder:
        self._side_to_move = side
        return self

    def set_en_passant_pawn(self, pawn: Piece | None) -> PositionBuilder:
        self._en_passant_pawn = pawn
        return self

    def set_castled(self, sides: Iterable[Side]) -> PositionBuilder:
        self._castled = frozenset(sides)
        return self

    def set_ply(self, ply: int) -> PositionBuilder:
        self._ply = ply
        return self

    def build(self) -> Position:
        return Position(
            self._squares,
            self._side_to_move,
            self._en_passant_pawn,
            self._castled,
            self._ply,
        )


def create_standard_position() -> Position:
    """The initial chess position, White to move."""
    builder = PositionBuilder()
    for side in Side:
        for column, kind in enumerate(_BACK_ROW):
            builder.set_piece(Piece(side, kind, make_square(column, side.back_row)))
            builder.set_piece(
                Piece(side, PieceKind.PAWN, make_square(column, side.pawn_start_row))
            )
    return builder.set_side_to_move(Side.WHITE).build()
