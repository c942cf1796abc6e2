"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.interfaces import IBoard
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(pos: Position) -> int:
    return (pos.row - 1) * BOARD_SIZE + (pos.column - 1)


def _position(index: int) -> Position:
    return Position(index // BOARD_SIZE + 1, index % BOARD_SIZE + 1)


class Board(IBoard):
    """Mutable 64-square board."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[self._checked_index(pos)]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[self._checked_index(pos)] = piece

    def add_piece(self, pos: Position, piece: Piece) -> None:
        """Place *piece* on *pos*, replacing whatever stood there."""
        self[pos] = piece

    def is_empty(self, pos: Position) -> bool:
        return self[pos] is None

    @staticmethod
    def _checked_index(pos: Position) -> int:
        if not pos.on_board:
            raise ValueError(f"Off-board position: {pos}")
        return _index(pos)

    # -- Geometric queries (IBoard) -----------------------------------------

    def is_valid_square(self, pos: Position) -> bool:
        return pos.on_board

    def is_friendly(self, start: Position, target: Position) -> bool:
        mover = self._mover(start)
        occupant = self.piece_at(target)
        return occupant is not None and occupant.color == mover.color

    def is_enemy(self, start: Position, target: Position) -> bool:
        mover = self._mover(start)
        occupant = self.piece_at(target)
        return occupant is not None and occupant.color != mover.color

    def piece_at(self, pos: Position) -> Piece | None:
        if not pos.on_board:
            return None
        return self._squares[_index(pos)]

    def _mover(self, start: Position) -> Piece:
        piece = self.piece_at(start)
        if piece is None:
            raise ValueError(f"No piece on {start}")
        return piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """Yield ``(position, piece)`` for every occupied square, row 1 first."""
        for index, piece in enumerate(self._squares):
            if piece is not None:
                yield _position(index), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Position]:
        """Positions occupied by *color*'s *piece_type*."""
        return [
            pos
            for pos, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Position]:
        """All positions occupied by *color*."""
        return [pos for pos, piece in self.occupied() if piece.color == color]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        b = cls()
        for column, pt in enumerate(_BACK_ROW, start=1):
            b[Position(1, column)] = Piece(Color.WHITE, pt)
            b[Position(2, column)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Position(7, column)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Position(8, column)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from an 8-line diagram, row 8 first.

        Each line holds eight symbols: a piece letter (see
        :meth:`Piece.from_char`) or ``.`` for an empty square. Spaces and
        blank lines are ignored.
        """
        lines = [
            line.replace(" ", "") for line in diagram.splitlines() if line.strip()
        ]
        if len(lines) != BOARD_SIZE:
            raise ValueError(
                f"Invalid diagram (must contain {BOARD_SIZE} rows): {diagram!r}"
            )

        b = cls()
        for offset, line in enumerate(lines):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Invalid diagram row width: {line!r}")
            row = BOARD_SIZE - offset
            for column, ch in enumerate(line, start=1):
                if ch != ".":
                    b[Position(row, column)] = Piece.from_char(ch)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for column in range(1, BOARD_SIZE + 1):
                p = self._squares[_index(Position(row, column))]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(c) for c in range(1, BOARD_SIZE + 1)))
        return "\n".join(rows)
