"""Resolves the default engine class without causing circular imports.

Both ``kingside.engine.__init__`` and ``kingside.engine.qt_bridge`` import from
here instead of from each other, breaking the import cycle.
"""

from __future__ import annotations

from kingside.engine.alpha_beta import AlphaBetaEngine
from kingside.engine.minimax import MinimaxEngine
from kingside.engine.search import TreeSearchEngine

DefaultEngine: type[TreeSearchEngine] = AlphaBetaEngine

ENGINES: dict[str, type[TreeSearchEngine]] = {
    MinimaxEngine.name: MinimaxEngine,
    AlphaBetaEngine.name: AlphaBetaEngine,
}

__all__ = ["DefaultEngine", "ENGINES"]
