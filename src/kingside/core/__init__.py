"""Core domain layer: immutable chess rules with zero external dependencies.

Quick start::

    from kingside.core import create_standard_position

    pos = create_standard_position()
    for move in pos.current_player.legal_moves:
        print(move)
"""

from kingside.core.enums import (
    GameResult,
    MoveKind,
    MoveStatus,
    PieceKind,
    PlayerStatus,
    Side,
)
from kingside.core.move import NULL_MOVE, Move, MoveFactory, MoveTransition
from kingside.core.move_generator import DEFAULT_MOVE_GENERATOR, MoveGenerator
from kingside.core.notation import find_move_by_notation, move_to_notation
from kingside.core.piece import Piece
from kingside.core.player import Player
from kingside.core.position import (
    InvalidPositionError,
    Position,
    PositionBuilder,
    create_standard_position,
)
from kingside.core.tables import BOARD_TABLES, BoardTables
from kingside.core.types import (
    Square,
    column_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "MoveKind",
    "MoveStatus",
    "PieceKind",
    "PlayerStatus",
    "Side",
    # Types / tables
    "BOARD_TABLES",
    "BoardTables",
    "Square",
    "column_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "DEFAULT_MOVE_GENERATOR",
    "InvalidPositionError",
    "Move",
    "MoveFactory",
    "MoveGenerator",
    "MoveTransition",
    "NULL_MOVE",
    "Piece",
    "Player",
    "Position",
    "PositionBuilder",
    "create_standard_position",
    # Notation
    "find_move_by_notation",
    "move_to_notation",
]
