"""Pseudo-legal move generation, one generator function per piece kind."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from kingside.core.enums import PieceKind, Side
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.tables import BOARD_TABLES, BoardTables
from kingside.core.types import NUM_SQUARES, Square, column_of, row_of

if TYPE_CHECKING:
    from kingside.core.position import Position

KNIGHT_OFFSETS: tuple[int, ...] = (-17, -15, -10, -6, 6, 10, 15, 17)
KING_OFFSETS: tuple[int, ...] = (-9, -8, -7, -1, 1, 7, 8, 9)
BISHOP_VECTORS: tuple[int, ...] = (-9, -7, 7, 9)
ROOK_VECTORS: tuple[int, ...] = (-8, -1, 1, 8)
QUEEN_VECTORS: tuple[int, ...] = BISHOP_VECTORS + ROOK_VECTORS

# Offsets that would wrap around the board edge, keyed by source column.
_KNIGHT_EXCLUSIONS: Mapping[int, frozenset[int]] = {
    0: frozenset({-17, -10, 6, 15}),
    1: frozenset({-10, 6}),
    6: frozenset({-6, 10}),
    7: frozenset({-15, -6, 10, 17}),
}
_STEP_EXCLUSIONS: Mapping[int, frozenset[int]] = {
    0: frozenset({-9, -1, 7}),
    7: frozenset({-7, 1, 9}),
}

_PAWN_CAPTURE_OFFSETS: Mapping[Side, tuple[int, int]] = {
    Side.WHITE: (-9, -7),
    Side.BLACK: (7, 9),
}

_Targets = tuple[tuple[Square, ...], ...]
_Rays = tuple[tuple[tuple[Square, ...], ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _is_excluded(
    tables: BoardTables,
    sq: Square,
    offset: int,
    exclusions: Mapping[int, frozenset[int]],
) -> bool:
    for column, offsets in exclusions.items():
        if tables.columns[column][sq] and offset in offsets:
            return True
    return False


def _build_targets(
    tables: BoardTables,
    offsets: tuple[int, ...],
    exclusions: Mapping[int, frozenset[int]],
) -> _Targets:
    targets: list[tuple[Square, ...]] = []
    for sq in range(NUM_SQUARES):
        targets.append(
            tuple(
                sq + offset
                for offset in offsets
                if 0 <= sq + offset < NUM_SQUARES
                and not _is_excluded(tables, sq, offset, exclusions)
            )
        )
    return tuple(targets)


def _build_rays(tables: BoardTables, vectors: tuple[int, ...]) -> _Rays:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(NUM_SQUARES):
        square_rays: list[tuple[Square, ...]] = []
        for vector in vectors:
            ray: list[Square] = []
            current = sq
            while not _is_excluded(tables, current, vector, _STEP_EXCLUSIONS):
                current += vector
                if not 0 <= current < NUM_SQUARES:
                    break
                ray.append(current)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


class MoveGenerator:
    """Enumerates pseudo-legal moves (they may leave the own king attacked).

    Castling is not generated here; see :class:`kingside.core.player.Player`.
    """

    __slots__ = (
        "tables",
        "_knight_targets",
        "_king_targets",
        "_bishop_rays",
        "_rook_rays",
        "_queen_rays",
        "_pawn_attacks",
        "_generators",
    )

    def __init__(self, tables: BoardTables = BOARD_TABLES) -> None:
        self.tables = tables
        self._knight_targets = _build_targets(tables, KNIGHT_OFFSETS, _KNIGHT_EXCLUSIONS)
        self._king_targets = _build_targets(tables, KING_OFFSETS, _STEP_EXCLUSIONS)
        self._bishop_rays = _build_rays(tables, BISHOP_VECTORS)
        self._rook_rays = _build_rays(tables, ROOK_VECTORS)
        self._queen_rays = _build_rays(tables, QUEEN_VECTORS)
        self._pawn_attacks: dict[Side, _Targets] = {
            side: _build_targets(tables, offsets, _STEP_EXCLUSIONS)
            for side, offsets in _PAWN_CAPTURE_OFFSETS.items()
        }
        self._generators: dict[PieceKind, Callable[[Position, Piece], list[Move]]] = {
            PieceKind.PAWN: self._pawn_moves,
            PieceKind.KNIGHT: self._knight_moves,
            PieceKind.BISHOP: self._bishop_moves,
            PieceKind.ROOK: self._rook_moves,
            PieceKind.QUEEN: self._queen_moves,
            PieceKind.KING: self._king_moves,
        }

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, position: Position, piece: Piece) -> list[Move]:
        """Pseudo-legal moves of a single *piece* standing in *position*."""
        return self._generators[piece.kind](position, piece)

    def side_moves(self, position: Position, side: Side) -> list[Move]:
        """Pseudo-legal moves of every piece of *side*."""
        moves: list[Move] = []
        for piece in position.pieces(side):
            moves.extend(self._generators[piece.kind](position, piece))
        return moves

    def pawn_attack_squares(self, square: Square, side: Side) -> tuple[Square, ...]:
        """Diagonal squares a *side* pawn on *square* attacks."""
        return self._pawn_attacks[side][square]

    # -- Per-kind generators -------------------------------------------------

    def _knight_moves(self, position: Position, piece: Piece) -> list[Move]:
        return self._step_moves(position, piece, self._knight_targets[piece.square])

    def _king_moves(self, position: Position, piece: Piece) -> list[Move]:
        return self._step_moves(position, piece, self._king_targets[piece.square])

    def _bishop_moves(self, position: Position, piece: Piece) -> list[Move]:
        return self._slider_moves(position, piece, self._bishop_rays[piece.square])

    def _rook_moves(self, position: Position, piece: Piece) -> list[Move]:
        return self._slider_moves(position, piece, self._rook_rays[piece.square])

    def _queen_moves(self, position: Position, piece: Piece) -> list[Move]:
        return self._slider_moves(position, piece, self._queen_rays[piece.square])

    def _pawn_moves(self, position: Position, pawn: Piece) -> list[Move]:
        moves: list[Move] = []
        squares = position.squares
        side = pawn.side
        step = side.direction * 8

        one = pawn.square + step
        if 0 <= one < NUM_SQUARES and squares[one] is None:
            if side.is_promotion_square(one):
                moves.append(Move.promotion(position, pawn, one))
            else:
                moves.append(Move.quiet(position, pawn, one))
                two = one + step
                if row_of(pawn.square) == side.pawn_start_row and squares[two] is None:
                    moves.append(Move.pawn_jump(position, pawn, two))

        en_passant = position.en_passant_pawn
        for target in self._pawn_attacks[side][pawn.square]:
            occupant = squares[target]
            if occupant is not None:
                if occupant.side is side:
                    continue
                if side.is_promotion_square(target):
                    moves.append(Move.promotion(position, pawn, target, occupant))
                else:
                    moves.append(Move.capture(position, pawn, target, occupant))
            elif (
                en_passant is not None
                and en_passant.side is not side
                and en_passant.square + step == target
                and column_of(en_passant.square) != column_of(pawn.square)
            ):
                moves.append(Move.en_passant(position, pawn, target, en_passant))
        return moves

    # -- Helpers -------------------------------------------------------------

    @staticmethod
    def _step_moves(
        position: Position,
        piece: Piece,
        targets: tuple[Square, ...],
    ) -> list[Move]:
        moves: list[Move] = []
        squares = position.squares
        for dest in targets:
            occupant = squares[dest]
            if occupant is None:
                moves.append(Move.quiet(position, piece, dest))
            elif occupant.side is not piece.side:
                moves.append(Move.capture(position, piece, dest, occupant))
        return moves

    @staticmethod
    def _slider_moves(
        position: Position,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
    ) -> list[Move]:
        moves: list[Move] = []
        squares = position.squares
        for ray in rays:
            for dest in ray:
                occupant = squares[dest]
                if occupant is None:
                    moves.append(Move.quiet(position, piece, dest))
                    continue
                if occupant.side is not piece.side:
                    moves.append(Move.capture(position, piece, dest, occupant))
                break
        return moves


DEFAULT_MOVE_GENERATOR = MoveGenerator()
