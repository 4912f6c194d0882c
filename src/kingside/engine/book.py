"""In-memory opening book keyed by position display string."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from kingside.core.notation import find_move_by_notation
from kingside.core.position import create_standard_position

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position

_LOGGER = logging.getLogger(__name__)

DEFAULT_LINES: tuple[tuple[str, ...], ...] = (
    ("e4", "e5", "Nf3", "Nc6", "Bb5"),
    ("e4", "c5", "Nf3", "d6"),
    ("d4", "d5", "c4", "e6"),
    ("Nf3", "d5", "g3"),
)


def book_key(position: Position) -> str:
    """Side to move followed by the board grid."""
    return f"{position.side_to_move.name}\n{position.to_display_string()}"


class OpeningBook:
    """Maps positions to candidate moves in short algebraic notation.

    Candidates are only suggestions: the search engine still validates the
    returned move with :meth:`Player.make_move`.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Sequence[str]] | None = None) -> None:
        self._entries: dict[str, list[str]] = {
            key: list(moves) for key, moves in (entries or {}).items()
        }

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[Sequence[str]] = DEFAULT_LINES,
        start: Position | None = None,
    ) -> OpeningBook:
        """Build a book by replaying each line from *start*."""
        book = cls()
        origin = start or create_standard_position()
        for line in lines:
            position = origin
            for text in line:
                move = find_move_by_notation(position, text)
                if move is None:
                    raise ValueError(f"Book line {list(line)} has unplayable move {text!r}")
                transition = position.current_player.make_move(move)
                if not transition.status.is_done:
                    raise ValueError(f"Book line {list(line)} has illegal move {text!r}")
                book.add(position, text)
                position = transition.to_position
        return book

    def add(self, position: Position, notation: str) -> None:
        candidates = self._entries.setdefault(book_key(position), [])
        if notation not in candidates:
            candidates.append(notation)

    def candidates(self, position: Position) -> list[str]:
        return list(self._entries.get(book_key(position), ()))

    def lookup(self, position: Position) -> Move | None:
        """First book move that resolves in *position*, if any."""
        for text in self._entries.get(book_key(position), ()):
            move = find_move_by_notation(position, text)
            if move is not None:
                return move
            _LOGGER.debug("Book entry %r does not resolve in this position", text)
        return None

    __call__ = lookup

    def __len__(self) -> int:
        return len(self._entries)
