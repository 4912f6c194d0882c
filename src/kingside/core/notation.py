"""Short algebraic notation for moves.

Rendering follows the usual short form: ``Nf3``, ``Nbd2``, ``exd5``,
``O-O``, ``e8=Q``, with a trailing ``+`` or ``#`` when the move checks
or mates the opponent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import MoveKind, PieceKind
from kingside.core.tables import BOARD_TABLES, BoardTables
from kingside.core.types import column_of, row_of

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position

NULL_NOTATION = "--"


def move_to_notation(move: Move, tables: BoardTables = BOARD_TABLES) -> str:
    """Render *move* in short algebraic notation."""
    piece = move.moved_piece
    if move.is_null or piece is None or move.position is None:
        return NULL_NOTATION

    if move.kind == MoveKind.KING_SIDE_CASTLE:
        body = "O-O"
    elif move.kind == MoveKind.QUEEN_SIDE_CASTLE:
        body = "O-O-O"
    elif piece.kind == PieceKind.PAWN:
        dest = tables.position_at(move.destination)
        if move.is_attack:
            body = f"{tables.position_at(piece.square)[0]}x{dest}"
        else:
            body = dest
        if move.is_promotion:
            body += "=" + PieceKind.QUEEN.letter
    else:
        body = piece.kind.letter + _disambiguation(move, tables)
        if move.is_attack:
            body += "x"
        body += tables.position_at(move.destination)

    return body + _check_sign(move)


def find_move_by_notation(position: Position, text: str) -> Move | None:
    """Legal move of the side to move whose notation is *text*.

    The check suffix is optional on input, so ``Qh4`` matches ``Qh4#``.
    Text matching more than one move resolves to nothing.
    """
    wanted = text.strip().rstrip("+#")
    if not wanted:
        return None
    matches = [
        move
        for move in position.current_player.legal_moves
        if move_to_notation(move).rstrip("+#") == wanted
    ]
    return matches[0] if len(matches) == 1 else None


def _disambiguation(move: Move, tables: BoardTables) -> str:
    """Origin file, rank or square when a twin piece can also reach the destination.

    Only twins whose move keeps the king safe count, so a pinned twin adds
    nothing.
    """
    piece = move.moved_piece
    assert piece is not None and move.position is not None
    player = move.position.player(piece.side)
    twins = [
        other.moved_piece.square
        for other in player.legal_moves
        if other.moved_piece is not None
        and other.moved_piece.kind == piece.kind
        and other.moved_piece.square != piece.square
        and other.destination == move.destination
        and player.make_move(other).status.is_done
    ]
    if not twins:
        return ""
    origin = tables.position_at(piece.square)
    if all(column_of(sq) != column_of(piece.square) for sq in twins):
        return origin[0]
    if all(row_of(sq) != row_of(piece.square) for sq in twins):
        return origin[1]
    return origin


def _check_sign(move: Move) -> str:
    assert move.position is not None and move.moved_piece is not None
    transition = move.position.player(move.moved_piece.side).make_move(move)
    if not transition.status.is_done:
        return ""
    opponent = transition.to_position.current_player
    if opponent.is_in_checkmate:
        return "#"
    if opponent.is_in_check:
        return "+"
    return ""
