"""Pseudo-legal move generation, one pure function per piece type.

Generators only look at board geometry: they never check whether a move
leaves the mover's own king attacked. Castling and en passant are not
generated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import PROMOTION_TYPES, Move
from chessmoves.core.position import Position

if TYPE_CHECKING:
    from chessmoves.core.board import Board
    from chessmoves.core.interfaces import IBoard
    from chessmoves.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

Offset: TypeAlias = tuple[int, int]  # (d_row, d_column)
GeneratorFn: TypeAlias = Callable[["IBoard", Position], list[Move]]

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Offset, ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[Offset, ...] = QUEEN_DIRS


@dataclass(frozen=True, slots=True)
class _PawnRules:
    advance: int
    start_row: int
    promotion_row: int


_PAWN_RULES: dict[Color, _PawnRules] = {
    Color.WHITE: _PawnRules(advance=1, start_row=2, promotion_row=8),
    Color.BLACK: _PawnRules(advance=-1, start_row=7, promotion_row=1),
}


def _mover(board: IBoard, origin: Position) -> Piece:
    piece = board.piece_at(origin)
    if piece is None:
        raise ValueError(f"No piece on {origin}")
    return piece


# -- Shared walkers ---------------------------------------------------------


def _slide(board: IBoard, origin: Position, directions: tuple[Offset, ...]) -> list[Move]:
    moves: list[Move] = []
    for d_row, d_column in directions:
        target = origin.offset(d_row, d_column)
        while board.is_valid_square(target) and not board.is_friendly(origin, target):
            moves.append(Move(origin, target))
            if board.is_enemy(origin, target):
                break
            target = target.offset(d_row, d_column)
    return moves


def _step(board: IBoard, origin: Position, offsets: tuple[Offset, ...]) -> list[Move]:
    moves: list[Move] = []
    for d_row, d_column in offsets:
        target = origin.offset(d_row, d_column)
        if board.is_valid_square(target) and not board.is_friendly(origin, target):
            moves.append(Move(origin, target))
    return moves


# -- Piece-specific generators ----------------------------------------------


def rook_moves(board: IBoard, origin: Position) -> list[Move]:
    return _slide(board, origin, ROOK_DIRS)


def bishop_moves(board: IBoard, origin: Position) -> list[Move]:
    return _slide(board, origin, BISHOP_DIRS)


def queen_moves(board: IBoard, origin: Position) -> list[Move]:
    return _slide(board, origin, QUEEN_DIRS)


def king_moves(board: IBoard, origin: Position) -> list[Move]:
    return _step(board, origin, KING_OFFSETS)


def knight_moves(board: IBoard, origin: Position) -> list[Move]:
    return _step(board, origin, KNIGHT_OFFSETS)


def pawn_moves(board: IBoard, origin: Position) -> list[Move]:
    """Forward steps, the initial double step and diagonal captures.

    Any target on the promotion row expands into one move per
    :data:`PROMOTION_TYPES` entry.
    """
    rules = _PAWN_RULES[_mover(board, origin).color]
    moves: list[Move] = []

    def add(target: Position) -> None:
        if target.row == rules.promotion_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(origin, target, pt))
        else:
            moves.append(Move(origin, target))

    one_step = origin.offset(rules.advance, 0)
    if board.is_valid_square(one_step) and board.piece_at(one_step) is None:
        add(one_step)
        two_step = one_step.offset(rules.advance, 0)
        if (
            origin.row == rules.start_row
            and board.is_valid_square(two_step)
            and board.piece_at(two_step) is None
        ):
            add(two_step)

    for d_column in (-1, 1):
        target = origin.offset(rules.advance, d_column)
        if board.is_valid_square(target) and board.is_enemy(origin, target):
            add(target)

    return moves


# -- Dispatch ---------------------------------------------------------------

_GENERATORS: dict[PieceType, GeneratorFn] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def _check_exhaustive(table: dict[PieceType, GeneratorFn]) -> None:
    missing = set(PieceType) - table.keys()
    if missing:
        raise RuntimeError(f"No move generator for {sorted(missing)}")


_check_exhaustive(_GENERATORS)


def generator_for(piece_type: PieceType) -> GeneratorFn:
    """The move generator registered for *piece_type*."""
    # PieceType is an IntEnum: plain ints would otherwise hit the table.
    if not isinstance(piece_type, PieceType):
        raise ValueError(f"Unknown piece type: {piece_type!r}")
    return _GENERATORS[piece_type]


def generate_moves(board: IBoard, position: Position) -> list[Move]:
    """All geometrically reachable moves for the piece on *position*."""
    piece = _mover(board, position)
    moves = generator_for(piece.piece_type)(board, position)
    _LOGGER.debug("%r on %s: %d moves", piece, position, len(moves))
    return moves


def generate_all_moves(board: Board, color: Color) -> list[Move]:
    """Pseudo-legal moves for every piece of *color* on *board*."""
    moves: list[Move] = []
    for pos in board.all_pieces(color):
        moves.extend(generate_moves(board, pos))
    return moves


class MoveGenerator:
    """Generates pseudo-legal moves for pieces on a given :class:`Board`.

    The generator never mutates the board; it re-reads it on every call, so
    moves reflect the board's contents at call time.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    def moves_from(self, position: Position) -> list[Move]:
        """Moves for the single piece standing on *position*."""
        return generate_moves(self._board, position)

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        return generate_all_moves(self._board, color)
