"""MVV-LVA move ordering (most valuable victim, least valuable attacker)."""

from __future__ import annotations

from collections.abc import Iterable

from kingside.core.enums import PieceKind
from kingside.core.move import Move

_KING_VALUE = PieceKind.KING.value_cp


def mvv_lva_score(move: Move) -> int:
    """Ordering key; higher scores are searched first.

    Captures always outrank quiet moves; among quiet moves cheaper pieces
    come first.
    """
    piece = move.moved_piece
    if piece is None:
        return 0
    attacker = piece.value_cp
    victim = move.attacked_piece
    if move.is_attack and victim is not None:
        return (victim.value_cp - attacker + _KING_VALUE) * 100
    return _KING_VALUE - attacker


def order_moves(moves: Iterable[Move]) -> list[Move]:
    """Moves sorted by :func:`mvv_lva_score`, stable for equal keys."""
    return sorted(moves, key=mvv_lva_score, reverse=True)
