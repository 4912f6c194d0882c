"""King-safety sub-score based on king tropism."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.types import distance

if TYPE_CHECKING:
    from kingside.core.piece import Piece
    from kingside.core.player import Player


@dataclass(frozen=True, slots=True)
class KingDistance:
    """Closest enemy piece and how many king steps it is from our king."""

    enemy_piece: Piece
    distance: int

    @property
    def tropism_score(self) -> int:
        return (self.enemy_piece.value_cp // 100) * self.distance


class KingSafetyAnalyzer:
    """Scores how far the nearest enemy reach is from a side's king.

    Heavy pieces that can land next to the king lower the score; the same
    pieces far away raise it.
    """

    __slots__ = ()

    def king_tropism(self, player: Player) -> KingDistance | None:
        king_square = player.king.square
        closest: KingDistance | None = None
        for move in player.opponent_moves:
            piece = move.moved_piece
            if piece is None:
                continue
            steps = distance(king_square, move.destination)
            if closest is None or steps < closest.distance:
                closest = KingDistance(piece, steps)
        return closest

    def king_safety_score(self, player: Player) -> int:
        tropism = self.king_tropism(player)
        return tropism.tropism_score if tropism is not None else 0
