"""Plain minimax search: White maximises, Black minimises."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Side
from kingside.engine.search import INF_SCORE, TreeSearchEngine

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position


class MinimaxEngine(TreeSearchEngine):
    """Exhaustive fixed-depth minimax over every completed move."""

    name = "minimax"

    __slots__ = ()

    def _search_root(self, position: Position, depth: int) -> tuple[int, Move | None]:
        player = position.current_player
        maximizing = player.side is Side.WHITE
        best_score = -INF_SCORE if maximizing else INF_SCORE
        best_move: Move | None = None

        for move in player.legal_moves:
            if best_move is not None and self._should_stop():
                break
            transition = player.make_move(move)
            if not transition.status.is_done:
                continue
            score = self._minimax(transition.to_position, depth - 1)
            # Strict comparison: the first move reaching the best value wins.
            if best_move is None or (
                score > best_score if maximizing else score < best_score
            ):
                best_score = score
                best_move = move

        return best_score, best_move

    def _minimax(self, position: Position, depth: int) -> int:
        self._nodes += 1
        if depth == 0 or self._should_stop():
            return self._evaluate(position, depth)

        player = position.current_player
        maximizing = player.side is Side.WHITE
        best = -INF_SCORE if maximizing else INF_SCORE
        searched = False
        for move in player.legal_moves:
            if searched and self._should_stop():
                break
            transition = player.make_move(move)
            if not transition.status.is_done:
                continue
            score = self._minimax(transition.to_position, depth - 1)
            best = max(best, score) if maximizing else min(best, score)
            searched = True
        if not searched:
            # Checkmate or stalemate.
            return self._evaluate(position, depth)
        return best
