"""Game management layer: move history and result tracking.

Quick start::

    from kingside.game import GameState

    state = GameState()
    state.setup()
    state.apply_notation("e4")
"""

from kingside.game.state import GameState, MoveRecord

__all__ = [
    "GameState",
    "MoveRecord",
]
