"""Command-line entry point: engine-vs-engine games in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from kingside.core.enums import GameResult
from kingside.engine._default import ENGINES, DefaultEngine
from kingside.engine.book import OpeningBook
from kingside.engine.search import SearchLimits
from kingside.game.state import GameState

_LOGGER = logging.getLogger(__name__)

_RESULT_TEXT = {
    GameResult.IN_PROGRESS: "*",
    GameResult.WHITE_WINS: "1-0",
    GameResult.BLACK_WINS: "0-1",
    GameResult.DRAW: "1/2-1/2",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kingside",
        description="Play a chess game between two search engines.",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(ENGINES),
        default=DefaultEngine.name,
        help="search strategy used by both sides",
    )
    parser.add_argument("--depth", type=int, default=2, help="search depth in plies")
    parser.add_argument(
        "--time-limit-ms",
        type=int,
        default=None,
        help="per-move time limit (default: none)",
    )
    parser.add_argument("--plies", type=int, default=10, help="half-moves to play")
    parser.add_argument(
        "--book",
        action="store_true",
        help="use the built-in opening book",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def play(
    *,
    strategy: str,
    depth: int,
    plies: int,
    time_limit_ms: int | None = None,
    use_book: bool = False,
    out: TextIO | None = None,
) -> GameState:
    """Play up to *plies* half-moves and print each position to *out*."""
    if out is None:
        out = sys.stdout
    engine = ENGINES[strategy]()
    limits = SearchLimits(max_depth=depth, time_limit_ms=time_limit_ms)
    book = OpeningBook.from_lines() if use_book else None

    state = GameState()
    state.setup()
    out.write(state.position.to_display_string())

    while state.ply_count < plies and not state.is_game_over:
        result = engine.search(state.position, limits, book=book)
        if result.best_move is None:
            break
        notation = str(result.best_move)
        transition = state.apply_move(result.best_move)
        if not transition.status.is_done:
            _LOGGER.error("Engine produced unplayable move %s", notation)
            break
        number = state.ply_count // 2 + state.ply_count % 2
        prefix = f"{number}." if state.ply_count % 2 else f"{number}..."
        out.write(f"\n{prefix} {notation}  (score {result.score_cp}, nodes {result.nodes})\n")
        out.write(state.position.to_display_string())

    out.write(f"\n{' '.join(state.notation_history())} {_RESULT_TEXT[state.result]}\n")
    return state


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.depth < 1:
        _LOGGER.error("--depth must be >= 1")
        return 2

    play(
        strategy=args.strategy,
        depth=args.depth,
        plies=args.plies,
        time_limit_ms=args.time_limit_ms,
        use_book=args.book,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
