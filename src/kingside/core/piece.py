"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from kingside.core.enums import PieceKind, Side
from kingside.core.types import Square

# Display character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.WHITE, PieceKind.PAWN),
    "N": (Side.WHITE, PieceKind.KNIGHT),
    "B": (Side.WHITE, PieceKind.BISHOP),
    "R": (Side.WHITE, PieceKind.ROOK),
    "Q": (Side.WHITE, PieceKind.QUEEN),
    "K": (Side.WHITE, PieceKind.KING),
    "p": (Side.BLACK, PieceKind.PAWN),
    "n": (Side.BLACK, PieceKind.KNIGHT),
    "b": (Side.BLACK, PieceKind.BISHOP),
    "r": (Side.BLACK, PieceKind.ROOK),
    "q": (Side.BLACK, PieceKind.QUEEN),
    "k": (Side.BLACK, PieceKind.KING),
}

_DISPLAY_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece standing on a square.

    Two pieces are equal when side, kind, square and first-move flag all
    match; moving a piece produces a new value instead of changing this one.
    """

    side: Side
    kind: PieceKind
    square: Square
    first_move: bool = True

    # ── Movement ─────────────────────────────────────────────────────────

    def moved_to(self, square: Square) -> Piece:
        """The same piece after it has moved to *square*."""
        return replace(self, square=square, first_move=False)

    def promoted(self, kind: PieceKind = PieceKind.QUEEN) -> Piece:
        """The piece a pawn turns into on its promotion square."""
        return Piece(self.side, kind, self.square, first_move=False)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Display character (uppercase = white, lowercase = black)."""
        return _DISPLAY_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str, square: Square, first_move: bool = True) -> Piece:
        """Create piece from display character, e.g. 'N' → white knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind, square, first_move)

    @property
    def value_cp(self) -> int:
        return self.kind.value_cp
