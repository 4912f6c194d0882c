"""Read-only board lookup tables, built once at import time."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from kingside.core.types import NUM_SQUARES, SQUARES_PER_ROW, Square, square_name


def _build_column(column: int) -> tuple[bool, ...]:
    return tuple(sq % SQUARES_PER_ROW == column for sq in range(NUM_SQUARES))


def _build_row(row: int) -> tuple[bool, ...]:
    return tuple(sq // SQUARES_PER_ROW == row for sq in range(NUM_SQUARES))


@dataclass(frozen=True, slots=True)
class BoardTables:
    """Column/row membership masks and algebraic notation tables.

    ``columns[0]`` is the a-file, ``rows[0]`` is rank 8.
    """

    columns: tuple[tuple[bool, ...], ...]
    rows: tuple[tuple[bool, ...], ...]
    algebraic_notation: tuple[str, ...]
    square_by_name: Mapping[str, Square]

    @classmethod
    def build(cls) -> BoardTables:
        notation = tuple(square_name(sq) for sq in range(NUM_SQUARES))
        return cls(
            columns=tuple(_build_column(c) for c in range(SQUARES_PER_ROW)),
            rows=tuple(_build_row(r) for r in range(SQUARES_PER_ROW)),
            algebraic_notation=notation,
            square_by_name=MappingProxyType({n: sq for sq, n in enumerate(notation)}),
        )

    # Named accessors mirror the usual chess-programming vocabulary.

    @property
    def first_column(self) -> tuple[bool, ...]:
        return self.columns[0]

    @property
    def second_column(self) -> tuple[bool, ...]:
        return self.columns[1]

    @property
    def seventh_column(self) -> tuple[bool, ...]:
        return self.columns[6]

    @property
    def eighth_column(self) -> tuple[bool, ...]:
        return self.columns[7]

    def position_at(self, sq: Square) -> str:
        """Algebraic name of *sq*, e.g. 0 → 'a8'."""
        return self.algebraic_notation[sq]

    def coordinate_at(self, name: str) -> Square:
        """Square index of an algebraic name, e.g. 'h1' → 63."""
        try:
            return self.square_by_name[name]
        except KeyError:
            raise ValueError(f"Invalid square name: {name!r}") from None


BOARD_TABLES = BoardTables.build()
