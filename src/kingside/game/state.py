"""Game state: move history, result tracking and undo over immutable positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kingside.core.enums import GameResult, MoveStatus, PlayerStatus, Side
from kingside.core.move import NULL_MOVE, MoveFactory, MoveTransition
from kingside.core.notation import find_move_by_notation, move_to_notation
from kingside.core.position import create_standard_position

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position
    from kingside.core.types import Square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    position_after: Position
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Owns the move history of one game; positions link back into it by ply.

    This is a pure data/logic class with no threading and no UI. Every move,
    whatever its source, goes through :meth:`Player.make_move` first.
    """

    position: Position = field(init=False)
    start_position: Position = field(init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_position = position or create_standard_position()
        self.position = self.start_position
        self.move_history.clear()
        self.result = GameResult.IN_PROGRESS
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveTransition:
        """Validate and play *move*; history only advances on DONE."""
        if self.is_game_over:
            return MoveTransition(
                self.position, self.position, move, MoveStatus.ILLEGAL_MOVE
            )
        transition = self.position.current_player.make_move(move)
        if not transition.status.is_done:
            return transition

        after = transition.to_position
        self.move_history.append(
            MoveRecord(
                move=move,
                notation=move_to_notation(move),
                position_after=after,
                was_check=after.current_player.is_in_check,
                was_capture=move.is_attack,
            )
        )
        self.position = after
        self._check_game_over()
        return transition

    def apply_coordinates(self, from_sq: Square, to_sq: Square) -> MoveTransition:
        """Play the move between two squares, as a position loader supplies it."""
        return self.apply_move(MoveFactory.create_move(self.position, from_sq, to_sq))

    def apply_notation(self, text: str) -> MoveTransition:
        """Play a move given in short algebraic notation."""
        move = find_move_by_notation(self.position, text)
        return self.apply_move(move if move is not None else NULL_MOVE)

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = record.move.undo()
        self.result = GameResult.IN_PROGRESS
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Moves of the side to move that can actually be played."""
        return self.position.current_player.safe_moves()

    def last_moves(self, count: int) -> list[MoveRecord]:
        """The most recent *count* records, oldest first."""
        if count <= 0:
            return []
        return self.move_history[-count:]

    def previous_move(self, position: Position | None = None) -> Move | None:
        """Move that produced *position* (default: the current one)."""
        target = position or self.position
        index = target.ply - self.start_position.ply - 1
        if 0 <= index < len(self.move_history):
            return self.move_history[index].move
        return None

    def notation_history(self) -> list[str]:
        return [record.notation for record in self.move_history]

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        player = self.position.current_player
        status = player.status
        if status == PlayerStatus.CHECKMATE:
            self.result = (
                GameResult.BLACK_WINS
                if player.side is Side.WHITE
                else GameResult.WHITE_WINS
            )
        elif status == PlayerStatus.STALEMATE:
            self.result = GameResult.DRAW
