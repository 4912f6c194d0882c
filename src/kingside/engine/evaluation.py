"""Static position evaluation (positive scores favour White)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from kingside.engine.king_safety import KingSafetyAnalyzer
from kingside.engine.pawn_structure import PawnStructureAnalyzer

if TYPE_CHECKING:
    from kingside.core.player import Player
    from kingside.core.position import Position

CHECK_BONUS = 10
CHECKMATE_BONUS = 1000
DEPTH_BONUS = 100
CASTLE_BONUS = 60
ATTACK_MULTIPLIER = 1
MOBILITY_MULTIPLIER = 5


class BoardEvaluator(Protocol):
    """Scores a position searched with *depth* plies still remaining."""

    def evaluate(self, position: Position, depth: int) -> int: ...


def depth_bonus(depth: int) -> int:
    """Mates found with more depth left (i.e. sooner) are worth more."""
    return 1 if depth == 0 else DEPTH_BONUS * depth


class StandardEvaluator:
    """Material, mobility, king threats, castling, attacks, pawns, king safety.

    Each side is scored on its own and Black's total is subtracted from
    White's.
    """

    __slots__ = ("_pawn_structure", "_king_safety")

    def __init__(
        self,
        pawn_structure: PawnStructureAnalyzer | None = None,
        king_safety: KingSafetyAnalyzer | None = None,
    ) -> None:
        self._pawn_structure = pawn_structure or PawnStructureAnalyzer()
        self._king_safety = king_safety or KingSafetyAnalyzer()

    def evaluate(self, position: Position, depth: int) -> int:
        return self.score_player(position.white_player, depth) - self.score_player(
            position.black_player, depth
        )

    def score_player(self, player: Player, depth: int) -> int:
        return (
            material(player)
            + mobility(player)
            + check(player)
            + checkmate(player, depth)
            + castled(player)
            + attacks(player)
            + self._pawn_structure.pawn_structure_score(player)
            + self._king_safety.king_safety_score(player)
        )


# ── Terms ──────────────────────────────────────────────────────────────────


def material(player: Player) -> int:
    return sum(piece.value_cp for piece in player.active_pieces)


def mobility(player: Player) -> int:
    return MOBILITY_MULTIPLIER * mobility_ratio(player)


def mobility_ratio(player: Player) -> int:
    # A side without moves is already terminal; count it as one move.
    opponent_moves = len(player.opponent.legal_moves) or 1
    return int(len(player.legal_moves) * 10.0 / opponent_moves)


def check(player: Player) -> int:
    return CHECK_BONUS if player.opponent.is_in_check else 0


def checkmate(player: Player, depth: int) -> int:
    opponent = player.opponent
    if opponent.is_in_check and opponent.is_in_checkmate:
        return CHECKMATE_BONUS + depth_bonus(depth)
    return 0


def castled(player: Player) -> int:
    return CASTLE_BONUS if player.is_castled else 0


def attacks(player: Player) -> int:
    """Captures on pieces worth at least as much as the capturing piece."""
    count = 0
    for move in player.legal_moves:
        attacker = move.moved_piece
        victim = move.attacked_piece
        if move.is_attack and attacker is not None and victim is not None:
            if attacker.value_cp <= victim.value_cp:
                count += 1
    return count * ATTACK_MULTIPLIER
