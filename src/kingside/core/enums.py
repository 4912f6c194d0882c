"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Side color.

    Square indexes grow from a8 (0) towards h1 (63), so White pawns advance
    towards lower indexes.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def direction(self) -> int:
        """Row step of a forward pawn move (-1 for White, +1 for Black)."""
        return -1 if self is Side.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self is Side.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Side.WHITE else 7

    @property
    def back_row(self) -> int:
        return 7 if self is Side.WHITE else 0

    def is_promotion_square(self, sq: int) -> bool:
        return sq >> 3 == self.promotion_row

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def value_cp(self) -> int:
        """Material value in centipawns."""
        return _PIECE_VALUES[self]

    @property
    def letter(self) -> str:
        return _PIECE_LETTERS[self]


_PIECE_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 100,
    PieceKind.KNIGHT: 300,
    PieceKind.BISHOP: 350,
    PieceKind.ROOK: 500,
    PieceKind.QUEEN: 1100,
    PieceKind.KING: 10000,
}

_PIECE_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}


class MoveKind(IntEnum):
    """Move variant tag."""

    QUIET = 0
    CAPTURE = 1
    PAWN_JUMP = 2
    EN_PASSANT = 3
    PROMOTION = 4
    PROMOTION_CAPTURE = 5
    KING_SIDE_CASTLE = 6
    QUEEN_SIDE_CASTLE = 7
    NULL = 8


class MoveStatus(Enum):
    """Outcome of :meth:`Player.make_move`."""

    DONE = "done"
    ILLEGAL_MOVE = "illegal_move"
    LEAVES_PLAYER_IN_CHECK = "leaves_player_in_check"

    @property
    def is_done(self) -> bool:
        return self is MoveStatus.DONE


class PlayerStatus(IntEnum):
    """Check state of the side to move."""

    NORMAL = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (PlayerStatus.CHECKMATE, PlayerStatus.STALEMATE)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
