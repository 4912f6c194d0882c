"""Tests for square helpers and the shared board lookup tables."""

from __future__ import annotations

import pytest

from kingside.core.tables import BOARD_TABLES
from kingside.core.types import (
    A1,
    A8,
    E2,
    H1,
    H8,
    column_of,
    distance,
    is_valid_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquareHelpers:
    def test_corners(self) -> None:
        assert (A8, H8, A1, H1) == (0, 7, 56, 63)
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"

    def test_parse_square(self) -> None:
        assert parse_square("e2") == E2 == 52
        with pytest.raises(ValueError):
            parse_square("i9")

    def test_row_and_column(self) -> None:
        assert column_of(E2) == 4
        assert row_of(E2) == 6

    def test_distance_is_king_steps(self) -> None:
        assert distance(A8, H1) == 7
        assert distance(E2, E2) == 0
        assert distance(parse_square("e1"), parse_square("g2")) == 2

    def test_is_valid_square(self) -> None:
        assert is_valid_square(A8)
        assert is_valid_square(H1)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)


class TestBoardTables:
    def test_notation_tables_are_inverse(self) -> None:
        for sq in range(64):
            assert BOARD_TABLES.coordinate_at(BOARD_TABLES.position_at(sq)) == sq

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError):
            BOARD_TABLES.coordinate_at("z0")

    def test_column_masks(self) -> None:
        assert BOARD_TABLES.first_column[A8]
        assert BOARD_TABLES.first_column[A1]
        assert not BOARD_TABLES.first_column[1]
        assert BOARD_TABLES.second_column[57]
        assert BOARD_TABLES.seventh_column[6]
        assert BOARD_TABLES.eighth_column[H1]
        assert sum(BOARD_TABLES.eighth_column) == 8

    def test_row_masks(self) -> None:
        assert all(BOARD_TABLES.rows[0][sq] for sq in range(8))
        assert BOARD_TABLES.rows[7][H1]
        assert not BOARD_TABLES.rows[7][A8]

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            BOARD_TABLES.square_by_name["a8"] = 5  # type: ignore[index]
