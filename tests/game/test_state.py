"""Tests for GameState."""

from collections.abc import Callable

from kingside.core.enums import GameResult, MoveStatus, Side
from kingside.core.position import Position, create_standard_position
from kingside.core.types import E2, E4, E5, parse_square
from kingside.game.state import GameState

Loader = Callable[[str], Position]


def new_game(position: Position | None = None) -> GameState:
    gs = GameState()
    gs.setup(position)
    return gs


class TestGameStateSetup:
    def test_setup_default(self) -> None:
        gs = new_game()
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.side_to_move == Side.WHITE
        assert gs.ply_count == 0
        assert gs.position == create_standard_position()
        assert gs.start_position is gs.position

    def test_setup_custom_position(self, load_position: Loader) -> None:
        pos = load_position("4k3/8/8/8/8/8/8/4K2R b K -")
        gs = new_game(pos)
        assert gs.side_to_move == Side.BLACK
        assert gs.start_position is pos

    def test_setup_resets(self) -> None:
        gs = new_game()
        gs.apply_coordinates(E2, E4)
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Side.WHITE

    def test_stalemated_start_is_drawn(self, load_position: Loader) -> None:
        gs = new_game(load_position("7k/5Q2/6K1/8/8/8/8/8 b - -"))
        assert gs.result == GameResult.DRAW
        assert gs.is_game_over
        assert gs.legal_moves() == []


class TestGameStateMoves:
    def test_apply_notation_records(self) -> None:
        gs = new_game()
        transition = gs.apply_notation("e4")
        assert transition.status is MoveStatus.DONE
        assert gs.side_to_move == Side.BLACK
        assert gs.ply_count == 1

        record = gs.move_history[0]
        assert record.notation == "e4"
        assert record.position_after is gs.position
        assert not record.was_check
        assert not record.was_capture

    def test_capture_and_check_flags(self) -> None:
        gs = new_game()
        for text in ("e4", "d5", "exd5", "Qxd5", "Nc3", "Qe5+"):
            assert gs.apply_notation(text).is_done, text
        capture = gs.move_history[2]
        check = gs.move_history[5]
        assert capture.was_capture
        assert check.was_check
        assert check.notation == "Qe5+"

    def test_illegal_move_leaves_state_unchanged(self) -> None:
        gs = new_game()
        before = gs.position
        transition = gs.apply_coordinates(E2, E5)
        assert transition.status is MoveStatus.ILLEGAL_MOVE
        assert gs.position is before
        assert gs.ply_count == 0

        assert gs.apply_notation("Ke2").status is MoveStatus.ILLEGAL_MOVE
        assert gs.ply_count == 0

    def test_self_check_is_rejected(self, load_position: Loader) -> None:
        gs = new_game(load_position("4r1k1/8/8/8/8/8/4B3/4K3 w - -"))
        transition = gs.apply_coordinates(parse_square("e2"), parse_square("d3"))
        assert transition.status is MoveStatus.LEAVES_PLAYER_IN_CHECK
        assert gs.ply_count == 0

    def test_undo_restores(self) -> None:
        gs = new_game()
        before = gs.position
        gs.apply_coordinates(E2, E4)
        undone = gs.undo_last_move()
        assert undone is not None
        assert undone.coordinates == "e2e4"
        assert gs.position == before
        assert gs.ply_count == 0

    def test_undo_empty(self) -> None:
        gs = new_game()
        assert gs.undo_last_move() is None


class TestGameOver:
    FOOLS_MATE = ("f3", "e5", "g4", "Qh4#")

    def test_fools_mate(self) -> None:
        gs = new_game()
        for text in self.FOOLS_MATE:
            assert gs.apply_notation(text).is_done, text
        assert gs.result == GameResult.BLACK_WINS
        assert gs.is_game_over
        assert gs.notation_history() == list(self.FOOLS_MATE)

    def test_no_moves_after_mate(self) -> None:
        gs = new_game()
        for text in self.FOOLS_MATE:
            gs.apply_notation(text)
        assert gs.apply_notation("a3").status is MoveStatus.ILLEGAL_MOVE
        assert gs.ply_count == 4

    def test_undo_reopens_game(self) -> None:
        gs = new_game()
        for text in self.FOOLS_MATE:
            gs.apply_notation(text)
        gs.undo_last_move()
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.side_to_move == Side.BLACK


class TestHistoryQueries:
    def test_last_moves(self) -> None:
        gs = new_game()
        for text in ("e4", "e5", "Nf3"):
            gs.apply_notation(text)
        assert [r.notation for r in gs.last_moves(2)] == ["e5", "Nf3"]
        assert len(gs.last_moves(10)) == 3
        assert gs.last_moves(0) == []

    def test_previous_move(self) -> None:
        gs = new_game()
        assert gs.previous_move() is None
        for text in ("e4", "e5"):
            gs.apply_notation(text)

        last = gs.previous_move()
        assert last is not None and str(last) == "e5"

        first = gs.previous_move(gs.move_history[0].position_after)
        assert first is not None and first.coordinates == "e2e4"
