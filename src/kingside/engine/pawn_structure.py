"""Pawn-structure sub-score: doubled, isolated and passed pawns."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from kingside.core.enums import PieceKind
from kingside.core.types import column_of, row_of

if TYPE_CHECKING:
    from kingside.core.piece import Piece
    from kingside.core.player import Player

DOUBLED_PAWN_PENALTY = -10
ISOLATED_PAWN_PENALTY = -10
PASSED_PAWN_ROW_BONUS = 10


def _pawns(pieces: tuple[Piece, ...]) -> list[Piece]:
    return [p for p in pieces if p.kind == PieceKind.PAWN]


class PawnStructureAnalyzer:
    """Scores one side's pawns; higher is better for that side."""

    __slots__ = ()

    def pawn_structure_score(self, player: Player) -> int:
        own = _pawns(player.active_pieces)
        enemy = _pawns(player.opponent.active_pieces)
        files = Counter(column_of(p.square) for p in own)
        return (
            self.doubled_penalty(files)
            + self.isolated_penalty(own, files)
            + self.passed_bonus(own, enemy)
        )

    @staticmethod
    def doubled_penalty(files: Counter[int]) -> int:
        return sum(DOUBLED_PAWN_PENALTY * (n - 1) for n in files.values() if n > 1)

    @staticmethod
    def isolated_penalty(own: list[Piece], files: Counter[int]) -> int:
        isolated = 0
        for pawn in own:
            column = column_of(pawn.square)
            if not files[column - 1] and not files[column + 1]:
                isolated += 1
        return isolated * ISOLATED_PAWN_PENALTY

    @staticmethod
    def passed_bonus(own: list[Piece], enemy: list[Piece]) -> int:
        bonus = 0
        for pawn in own:
            column = column_of(pawn.square)
            row = row_of(pawn.square)
            ahead = pawn.side.direction
            blocked = any(
                abs(column_of(e.square) - column) <= 1
                and (row_of(e.square) - row) * ahead > 0
                for e in enemy
            )
            if not blocked:
                advanced = abs(row - pawn.side.pawn_start_row)
                bonus += advanced * PASSED_PAWN_ROW_BONUS
        return bonus
