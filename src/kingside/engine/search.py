"""Shared engine search models, protocol and the common search driver."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter
from typing import TYPE_CHECKING, Protocol

from kingside.engine.evaluation import BoardEvaluator, StandardEvaluator

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.position import Position

_LOGGER = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]
BookLookup = Callable[["Position"], "Move | None"]

INF_SCORE = 1_000_000_000


def _never_cancelled() -> bool:
    return False


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3
    time_limit_ms: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``best_move`` is ``None`` when the side to move has no playable move.
    """

    best_move: Move | None
    score_cp: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for chess engines used by the game layer and the Qt bridge."""

    def search(
        self,
        position: Position,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
        book: BookLookup | None = None,
    ) -> SearchResult: ...


class TreeSearchEngine:
    """Fixed-depth game-tree search driver.

    Subclasses implement :meth:`_search_root`; this class handles limits,
    cancellation, book probing and logging.
    """

    name = "tree"

    __slots__ = ("_evaluator", "_cancel_check", "_deadline", "_nodes")

    def __init__(self, evaluator: BoardEvaluator | None = None) -> None:
        self._evaluator: BoardEvaluator = evaluator or StandardEvaluator()
        self._cancel_check: CancelCheck = _never_cancelled
        self._deadline: float | None = None
        self._nodes = 0

    @property
    def evaluator(self) -> BoardEvaluator:
        return self._evaluator

    def search(
        self,
        position: Position,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
        book: BookLookup | None = None,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._cancel_check = is_cancelled or _never_cancelled
        self._deadline = None
        if limits.time_limit_ms is not None:
            ms = max(limits.time_limit_ms, 1)
            self._deadline = perf_counter() + (ms / 1000.0)

        if book is not None:
            result = self._probe_book(position, book)
            if result is not None:
                return result

        started = perf_counter()
        score, move = self._search_root(position, limits.max_depth)
        if move is None:
            score = self._evaluator.evaluate(position, 0)
        _LOGGER.debug(
            "%s search: side=%s depth=%d nodes=%d best=%s score=%d elapsed=%.1fms",
            self.name,
            position.side_to_move.name,
            limits.max_depth,
            self._nodes,
            move.coordinates if move is not None else None,
            score,
            (perf_counter() - started) * 1000.0,
        )
        return SearchResult(move, score, limits.max_depth, self._nodes)

    def _search_root(self, position: Position, depth: int) -> tuple[int, Move | None]:
        raise NotImplementedError

    # ── Helpers shared by subclasses ─────────────────────────────────────

    def _probe_book(self, position: Position, book: BookLookup) -> SearchResult | None:
        candidate = book(position)
        if candidate is None:
            return None
        transition = position.current_player.make_move(candidate)
        if not transition.status.is_done:
            _LOGGER.warning(
                "Ignoring book move %s: %s",
                candidate.coordinates,
                transition.status.name,
            )
            return None
        _LOGGER.debug("Book move %s", candidate.coordinates)
        score = self._evaluator.evaluate(transition.to_position, 0)
        return SearchResult(candidate, score, 0, 0)

    def _should_stop(self) -> bool:
        if self._cancel_check():
            return True
        return self._deadline is not None and perf_counter() >= self._deadline

    def _evaluate(self, position: Position, depth: int) -> int:
        return self._evaluator.evaluate(position, depth)
