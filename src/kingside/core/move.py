"""Move variants: each move knows how to build the position that follows it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kingside.core.enums import MoveKind, MoveStatus, PieceKind
from kingside.core.notation import move_to_notation
from kingside.core.piece import Piece
from kingside.core.types import Square, square_name

if TYPE_CHECKING:
    from kingside.core.position import Position

_CAPTURE_KINDS = frozenset(
    {MoveKind.CAPTURE, MoveKind.EN_PASSANT, MoveKind.PROMOTION_CAPTURE}
)
_CASTLE_KINDS = frozenset({MoveKind.KING_SIDE_CASTLE, MoveKind.QUEEN_SIDE_CASTLE})
_PROMOTION_KINDS = frozenset({MoveKind.PROMOTION, MoveKind.PROMOTION_CAPTURE})


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move made from :attr:`position`.

    Equality is structural: origin position, moved piece, destination and
    kind. The captured piece and castling rook are derived from those and
    do not take part in comparisons.
    """

    position: Position | None = field(repr=False)
    moved_piece: Piece | None
    destination: Square
    kind: MoveKind = MoveKind.QUIET
    attacked_piece: Piece | None = field(default=None, compare=False)
    castle_rook: Piece | None = field(default=None, compare=False)
    rook_destination: Square | None = field(default=None, compare=False)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def quiet(cls, position: Position, piece: Piece, destination: Square) -> Move:
        return cls(position, piece, destination)

    @classmethod
    def capture(
        cls,
        position: Position,
        piece: Piece,
        destination: Square,
        attacked: Piece,
    ) -> Move:
        return cls(position, piece, destination, MoveKind.CAPTURE, attacked)

    @classmethod
    def pawn_jump(cls, position: Position, pawn: Piece, destination: Square) -> Move:
        return cls(position, pawn, destination, MoveKind.PAWN_JUMP)

    @classmethod
    def en_passant(
        cls,
        position: Position,
        pawn: Piece,
        destination: Square,
        attacked: Piece,
    ) -> Move:
        return cls(position, pawn, destination, MoveKind.EN_PASSANT, attacked)

    @classmethod
    def promotion(
        cls,
        position: Position,
        pawn: Piece,
        destination: Square,
        attacked: Piece | None = None,
    ) -> Move:
        kind = MoveKind.PROMOTION if attacked is None else MoveKind.PROMOTION_CAPTURE
        return cls(position, pawn, destination, kind, attacked)

    @classmethod
    def castle(
        cls,
        position: Position,
        king: Piece,
        destination: Square,
        rook: Piece,
        rook_destination: Square,
        *,
        king_side: bool,
    ) -> Move:
        kind = MoveKind.KING_SIDE_CASTLE if king_side else MoveKind.QUEEN_SIDE_CASTLE
        return cls(
            position,
            king,
            destination,
            kind,
            castle_rook=rook,
            rook_destination=rook_destination,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def current_square(self) -> Square:
        """Square the moved piece starts from (-1 for the null move)."""
        return self.moved_piece.square if self.moved_piece is not None else -1

    @property
    def is_attack(self) -> bool:
        return self.kind in _CAPTURE_KINDS

    @property
    def is_castling(self) -> bool:
        return self.kind in _CASTLE_KINDS

    @property
    def is_promotion(self) -> bool:
        return self.kind in _PROMOTION_KINDS

    @property
    def is_null(self) -> bool:
        return self.kind == MoveKind.NULL

    @property
    def rook_start(self) -> Square | None:
        return self.castle_rook.square if self.castle_rook is not None else None

    @property
    def coordinates(self) -> str:
        """Long coordinate form, e.g. ``e2e4``."""
        if self.is_null:
            return "0000"
        return square_name(self.current_square) + square_name(self.destination)

    # ── Transitions ──────────────────────────────────────────────────────

    def execute(self) -> Position:
        """Build the position reached by playing this move."""
        return _EXECUTORS[self.kind](self)

    def undo(self) -> Position:
        """Rebuild the position this move was made from."""
        if self.position is None:
            raise ValueError("Cannot undo the null move")
        from kingside.core.position import PositionBuilder

        return PositionBuilder.from_position(self.position).build()

    def __str__(self) -> str:
        return move_to_notation(self)


# ── Executors (looked up by MoveKind) ──────────────────────────────────────


def _origin(move: Move) -> Position:
    if move.position is None or move.moved_piece is None:
        raise ValueError("Cannot execute the null move")
    return move.position


def _execute_standard(move: Move) -> Position:
    from kingside.core.position import PositionBuilder

    origin = _origin(move)
    piece = move.moved_piece
    assert piece is not None

    builder = PositionBuilder.from_position(origin)
    builder.clear_square(piece.square)
    if move.attacked_piece is not None:
        # En passant victims do not stand on the destination square.
        builder.clear_square(move.attacked_piece.square)

    placed = piece.moved_to(move.destination)
    if move.kind in _PROMOTION_KINDS:
        placed = placed.promoted(PieceKind.QUEEN)
    builder.set_piece(placed)

    builder.set_side_to_move(piece.side.opposite)
    builder.set_en_passant_pawn(placed if move.kind == MoveKind.PAWN_JUMP else None)
    builder.set_ply(origin.ply + 1)
    return builder.build()


def _execute_castle(move: Move) -> Position:
    from kingside.core.position import PositionBuilder

    origin = _origin(move)
    king = move.moved_piece
    rook = move.castle_rook
    assert king is not None
    if rook is None or move.rook_destination is None:
        raise ValueError("Castle move without a rook")

    builder = PositionBuilder.from_position(origin)
    builder.clear_square(king.square)
    builder.clear_square(rook.square)
    builder.set_piece(king.moved_to(move.destination))
    builder.set_piece(rook.moved_to(move.rook_destination))

    builder.set_side_to_move(king.side.opposite)
    builder.set_en_passant_pawn(None)
    builder.set_castled(origin.castled | {king.side})
    builder.set_ply(origin.ply + 1)
    return builder.build()


def _execute_null(move: Move) -> Position:
    raise ValueError("Cannot execute the null move")


_EXECUTORS: dict[MoveKind, Callable[[Move], Position]] = {
    MoveKind.QUIET: _execute_standard,
    MoveKind.CAPTURE: _execute_standard,
    MoveKind.PAWN_JUMP: _execute_standard,
    MoveKind.EN_PASSANT: _execute_standard,
    MoveKind.PROMOTION: _execute_standard,
    MoveKind.PROMOTION_CAPTURE: _execute_standard,
    MoveKind.KING_SIDE_CASTLE: _execute_castle,
    MoveKind.QUEEN_SIDE_CASTLE: _execute_castle,
    MoveKind.NULL: _execute_null,
}


NULL_MOVE = Move(None, None, -1, MoveKind.NULL)


@dataclass(frozen=True, slots=True)
class MoveTransition:
    """Outcome of attempting a move.

    ``to_position`` is ``from_position`` itself unless the move was played.
    """

    from_position: Position
    to_position: Position
    move: Move
    status: MoveStatus

    @property
    def is_done(self) -> bool:
        return self.status.is_done


class MoveFactory:
    """Resolves moves from coordinates supplied by external callers."""

    @staticmethod
    def create_move(position: Position, from_sq: Square, to_sq: Square) -> Move:
        """Legal move of the side to move from *from_sq* to *to_sq*.

        Returns :data:`NULL_MOVE` when no candidate matches.
        """
        for move in position.current_player.legal_moves:
            if move.current_square == from_sq and move.destination == to_sq:
                return move
        return NULL_MOVE

    @staticmethod
    def null_move() -> Move:
        return NULL_MOVE
