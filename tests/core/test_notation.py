"""Tests for short algebraic move notation."""

from __future__ import annotations

from collections.abc import Callable

from kingside.core.move import MoveFactory
from kingside.core.notation import find_move_by_notation, move_to_notation
from kingside.core.position import Position, create_standard_position
from kingside.core.types import parse_square

Loader = Callable[[str], Position]


def notation(position: Position, coords: str) -> str:
    move = MoveFactory.create_move(
        position, parse_square(coords[:2]), parse_square(coords[2:])
    )
    assert not move.is_null, coords
    return str(move)


class TestMoveToNotation:
    def test_pawn_and_piece_moves(self) -> None:
        pos = create_standard_position()
        assert notation(pos, "e2e4") == "e4"
        assert notation(pos, "e2e3") == "e3"
        assert notation(pos, "g1f3") == "Nf3"

    def test_captures(self, load_position: Loader) -> None:
        pos = load_position("4k3/8/8/3p4/4P3/2N5/8/4K3 w - -")
        assert notation(pos, "e4d5") == "exd5"
        assert notation(pos, "c3d5") == "Nxd5"

    def test_en_passant_uses_pawn_capture_form(self, load_position: Loader) -> None:
        pos = load_position("4k3/8/8/3pP3/8/8/8/4K3 w - d6")
        assert notation(pos, "e5d6") == "exd6"

    def test_disambiguating_file(self, load_position: Loader) -> None:
        pos = load_position("4k3/8/8/8/8/8/8/1N2KN2 w - -")
        assert notation(pos, "b1d2") == "Nbd2"
        assert notation(pos, "f1d2") == "Nfd2"
        assert notation(pos, "b1c3") == "Nc3"

    def test_disambiguating_rank(self, load_position: Loader) -> None:
        pos = load_position("7k/8/8/R7/8/8/8/R6K w - -")
        assert notation(pos, "a1a3") == "R1a3"
        assert notation(pos, "a5a3") == "R5a3"

    def test_disambiguating_square(self, load_position: Loader) -> None:
        pos = load_position("7k/8/8/Q1Q5/8/Q7/8/7K w - -")
        # a5 shares its file with a3 and its rank with c5.
        assert notation(pos, "a5b4") == "Qa5b4"
        assert notation(pos, "a3b4") == "Q3b4"
        assert notation(pos, "c5b4") == "Qcb4"

    def test_pinned_twin_does_not_disambiguate(self, load_position: Loader) -> None:
        pos = load_position("4r2k/8/8/8/8/8/4N3/1N2K3 w - -")
        assert notation(pos, "b1c3") == "Nc3"
        assert notation(pos, "e2c3") == "Nec3"

    def test_castles(self, load_position: Loader) -> None:
        pos = load_position("r3k2r/8/8/8/8/8/8/R3K2R w KQkq -")
        assert notation(pos, "e1g1") == "O-O"
        assert notation(pos, "e1c1") == "O-O-O"

    def test_promotion_with_check(self, load_position: Loader) -> None:
        pos = load_position("4k3/P7/8/8/8/8/8/4K3 w - -")
        assert notation(pos, "a7a8") == "a8=Q+"

    def test_checkmate_sign(self) -> None:
        pos = create_standard_position()
        for coords in ("f2f3", "e7e5", "g2g4"):
            move = MoveFactory.create_move(
                pos, parse_square(coords[:2]), parse_square(coords[2:])
            )
            pos = pos.current_player.make_move(move).to_position
        assert notation(pos, "d8h4") == "Qh4#"

    def test_move_to_notation_matches_str(self) -> None:
        pos = create_standard_position()
        for move in pos.current_player.legal_moves:
            assert move_to_notation(move) == str(move)


class TestFindMoveByNotation:
    def test_round_trip_through_factory(self) -> None:
        pos = create_standard_position()
        for move in pos.current_player.legal_moves:
            text = str(move)
            found = find_move_by_notation(pos, text)
            assert found == move
            rebuilt = MoveFactory.create_move(pos, move.current_square, move.destination)
            assert rebuilt == move

    def test_check_suffix_is_optional(self, load_position: Loader) -> None:
        pos = load_position("4k3/P7/8/8/8/8/8/4K3 w - -")
        assert find_move_by_notation(pos, "a8=Q") == find_move_by_notation(
            pos, "a8=Q+"
        )
        assert find_move_by_notation(pos, "a8=Q") is not None

    def test_unknown_notation(self) -> None:
        pos = create_standard_position()
        assert find_move_by_notation(pos, "Ke2") is None
        assert find_move_by_notation(pos, "") is None

    def test_twins_on_one_file_resolve_by_rank(self, load_position: Loader) -> None:
        pos = load_position("7k/8/8/R7/8/8/8/R6K w - -")
        lower = find_move_by_notation(pos, "R1a3")
        upper = find_move_by_notation(pos, "R5a3")
        assert lower is not None and lower.coordinates == "a1a3"
        assert upper is not None and upper.coordinates == "a5a3"
        assert find_move_by_notation(pos, "Raa3") is None
        assert find_move_by_notation(pos, "Ra3") is None

    def test_every_safe_move_has_unique_notation(self, load_position: Loader) -> None:
        pos = load_position("7k/8/8/Q1Q5/8/Q7/8/7K w - -")
        moves = pos.current_player.safe_moves()
        texts = [str(m) for m in moves]
        assert len(set(texts)) == len(texts)
        for move, text in zip(moves, texts):
            assert find_move_by_notation(pos, text) == move
