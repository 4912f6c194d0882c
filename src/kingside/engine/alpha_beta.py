"""Alpha-beta search with MVV-LVA move ordering.

The root keeps minimax's choice: moves are searched in MVV-LVA order, but
each one gets a window just wide enough to score ties exactly, and a tie
goes to the move that comes first in the player's legal move list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Side
from kingside.engine.ordering import mvv_lva_score, order_moves
from kingside.engine.search import INF_SCORE, TreeSearchEngine

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position


class AlphaBetaEngine(TreeSearchEngine):
    """Fixed-depth alpha-beta search (fail-soft)."""

    name = "alphabeta"

    __slots__ = ()

    def _search_root(self, position: Position, depth: int) -> tuple[int, Move | None]:
        player = position.current_player
        maximizing = player.side is Side.WHITE
        best_score = -INF_SCORE if maximizing else INF_SCORE
        best_move: Move | None = None
        best_index = -1

        indexed = sorted(
            enumerate(player.legal_moves),
            key=lambda item: mvv_lva_score(item[1]),
            reverse=True,
        )
        for index, move in indexed:
            if best_move is not None and self._should_stop():
                break
            transition = player.make_move(move)
            if not transition.status.is_done:
                continue

            if best_move is None:
                alpha, beta = -INF_SCORE, INF_SCORE
            elif maximizing:
                alpha, beta = best_score - 1, INF_SCORE
            else:
                alpha, beta = -INF_SCORE, best_score + 1
            score = self._alpha_beta(transition.to_position, depth - 1, alpha, beta)

            if best_move is None:
                improved = True
            elif score == best_score:
                improved = index < best_index
            else:
                improved = score > best_score if maximizing else score < best_score
            if improved:
                best_score = score
                best_move = move
                best_index = index

        return best_score, best_move

    def _alpha_beta(self, position: Position, depth: int, alpha: int, beta: int) -> int:
        self._nodes += 1
        if depth == 0 or self._should_stop():
            return self._evaluate(position, depth)

        player = position.current_player
        maximizing = player.side is Side.WHITE
        best = -INF_SCORE if maximizing else INF_SCORE
        searched = False
        for move in order_moves(player.legal_moves):
            if searched and self._should_stop():
                break
            transition = player.make_move(move)
            if not transition.status.is_done:
                continue
            score = self._alpha_beta(transition.to_position, depth - 1, alpha, beta)
            searched = True
            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)
            if alpha >= beta:
                break
        if not searched:
            # Checkmate or stalemate.
            return self._evaluate(position, depth)
        return best
