"""Player, one side's view of a position: legal moves, check state and castles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.enums import MoveStatus, PieceKind, PlayerStatus, Side
from kingside.core.move import Move, MoveTransition
from kingside.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)

if TYPE_CHECKING:
    from kingside.core.move_generator import MoveGenerator
    from kingside.core.piece import Piece
    from kingside.core.position import Position


@dataclass(frozen=True, slots=True)
class CastleRule:
    """Fixed squares of one castle for one side."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]
    transit: tuple[Square, ...]
    king_side: bool


CASTLE_RULES: dict[Side, tuple[CastleRule, CastleRule]] = {
    Side.WHITE: (
        CastleRule(E1, G1, H1, F1, (F1, G1), (F1, G1), king_side=True),
        CastleRule(E1, C1, A1, D1, (D1, C1, B1), (D1, C1), king_side=False),
    ),
    Side.BLACK: (
        CastleRule(E8, G8, H8, F8, (F8, G8), (F8, G8), king_side=True),
        CastleRule(E8, C8, A8, D8, (D8, C8, B8), (D8, C8), king_side=False),
    ),
}


def attack_squares(
    position: Position,
    attacker: Side,
    attacker_moves: Iterable[Move],
    generator: MoveGenerator,
) -> frozenset[Square]:
    """Squares *attacker* hits with its pseudo-legal moves.

    Pawn pushes never attack; every pawn diagonal does, occupied or not.
    """
    squares = {
        move.destination
        for move in attacker_moves
        if move.moved_piece is not None and move.moved_piece.kind != PieceKind.PAWN
    }
    for piece in position.pieces(attacker):
        if piece.kind == PieceKind.PAWN:
            squares.update(generator.pawn_attack_squares(piece.square, attacker))
    return frozenset(squares)


class Player:
    """Legal moves and check status of *side* in *position*.

    Check and castle eligibility are computed on construction; the
    checkmate/stalemate escape search runs once, on first use.
    """

    __slots__ = (
        "position",
        "side",
        "king",
        "legal_moves",
        "opponent_moves",
        "attacked_squares",
        "is_in_check",
        "_has_escape",
    )

    def __init__(
        self,
        position: Position,
        side: Side,
        own_moves: Iterable[Move],
        opponent_moves: Iterable[Move],
        generator: MoveGenerator,
    ) -> None:
        self.position = position
        self.side = side
        self.king = position.king(side)
        self.opponent_moves: tuple[Move, ...] = tuple(opponent_moves)
        self.attacked_squares = attack_squares(
            position, side.opposite, self.opponent_moves, generator
        )
        self.is_in_check = self.king.square in self.attacked_squares
        own = list(own_moves)
        own.extend(self._castle_moves())
        self.legal_moves: tuple[Move, ...] = tuple(own)
        self._has_escape: bool | None = None

    # ── Relations ────────────────────────────────────────────────────────

    @property
    def opponent(self) -> Player:
        return self.position.player(self.side.opposite)

    @property
    def active_pieces(self) -> tuple[Piece, ...]:
        return self.position.pieces(self.side)

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveTransition:
        """Try *move*; the returned transition says whether it was played."""
        if move not in self.legal_moves:
            return MoveTransition(
                self.position, self.position, move, MoveStatus.ILLEGAL_MOVE
            )
        successor = move.execute()
        if successor.player(self.side).is_in_check:
            return MoveTransition(
                self.position,
                self.position,
                move,
                MoveStatus.LEAVES_PLAYER_IN_CHECK,
            )
        return MoveTransition(self.position, successor, move, MoveStatus.DONE)

    def safe_moves(self) -> list[Move]:
        """Legal moves whose transition completes (king left safe)."""
        safe = [m for m in self.legal_moves if self.make_move(m).status.is_done]
        self._has_escape = bool(safe)
        return safe

    def attacks_on(self, square: Square) -> list[Move]:
        """Opponent pseudo-legal moves landing on *square*."""
        return [m for m in self.opponent_moves if m.destination == square]

    # ── Status ───────────────────────────────────────────────────────────

    @property
    def is_in_checkmate(self) -> bool:
        return self.is_in_check and not self._has_escape_moves()

    @property
    def is_in_stalemate(self) -> bool:
        return not self.is_in_check and not self._has_escape_moves()

    @property
    def status(self) -> PlayerStatus:
        if self.is_in_check:
            return PlayerStatus.CHECK if self._has_escape_moves() else PlayerStatus.CHECKMATE
        return PlayerStatus.NORMAL if self._has_escape_moves() else PlayerStatus.STALEMATE

    @property
    def is_castled(self) -> bool:
        return self.side in self.position.castled

    @property
    def is_king_side_castle_capable(self) -> bool:
        return self._castle_rights(CASTLE_RULES[self.side][0])

    @property
    def is_queen_side_castle_capable(self) -> bool:
        return self._castle_rights(CASTLE_RULES[self.side][1])

    def _has_escape_moves(self) -> bool:
        if self._has_escape is None:
            self._has_escape = any(
                self.make_move(move).status.is_done for move in self.legal_moves
            )
        return self._has_escape

    # ── Castling ─────────────────────────────────────────────────────────

    def _castle_rights(self, rule: CastleRule) -> bool:
        """King and rook are unmoved on their home squares."""
        if not self.king.first_move or self.king.square != rule.king_from:
            return False
        rook = self.position.piece_at(rule.rook_from)
        return (
            rook is not None
            and rook.kind == PieceKind.ROOK
            and rook.side is self.side
            and rook.first_move
        )

    def _castle_moves(self) -> list[Move]:
        if self.is_in_check:
            return []
        castles: list[Move] = []
        position = self.position
        for rule in CASTLE_RULES[self.side]:
            if not self._castle_rights(rule):
                continue
            if any(position.is_occupied(sq) for sq in rule.between):
                continue
            if any(sq in self.attacked_squares for sq in rule.transit):
                continue
            rook = position.piece_at(rule.rook_from)
            assert rook is not None
            castles.append(
                Move.castle(
                    position,
                    self.king,
                    rule.king_to,
                    rook,
                    rule.rook_to,
                    king_side=rule.king_side,
                )
            )
        return castles

    def __repr__(self) -> str:
        return f"Player({self.side.name}, moves={len(self.legal_moves)}, check={self.is_in_check})"
