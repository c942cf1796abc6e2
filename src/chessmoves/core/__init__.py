"""Core domain layer — pure chess geometry with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Position, generate_moves

    board = Board.initial()
    for move in generate_moves(board, Position(1, 2)):
        print(move)
"""

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.interfaces import IBoard
from chessmoves.core.move import PROMOTION_TYPES, Move
from chessmoves.core.move_generator import (
    MoveGenerator,
    bishop_moves,
    generate_all_moves,
    generate_moves,
    generator_for,
    king_moves,
    knight_moves,
    pawn_moves,
    queen_moves,
    rook_moves,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Constants
    "BOARD_SIZE",
    "PROMOTION_TYPES",
    # Domain objects
    "Board",
    "IBoard",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    # Generators
    "bishop_moves",
    "generate_all_moves",
    "generate_moves",
    "generator_for",
    "king_moves",
    "knight_moves",
    "pawn_moves",
    "queen_moves",
    "rook_moves",
]
