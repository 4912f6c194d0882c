"""Chess engine package: tree search, evaluation and Qt worker bridge."""

from kingside.engine._default import ENGINES, DefaultEngine
from kingside.engine.alpha_beta import AlphaBetaEngine
from kingside.engine.book import OpeningBook
from kingside.engine.evaluation import BoardEvaluator, StandardEvaluator
from kingside.engine.minimax import MinimaxEngine
from kingside.engine.search import (
    BookLookup,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "AlphaBetaEngine",
    "BoardEvaluator",
    "BookLookup",
    "CancelCheck",
    "DefaultEngine",
    "ENGINES",
    "IEngine",
    "MinimaxEngine",
    "OpeningBook",
    "SearchLimits",
    "SearchResult",
    "StandardEvaluator",
]
