"""Position — a (row, column) coordinate on the board.

Rows and columns are 1-indexed::

    row 8  (8,1) ... (8,8)
    ...
    row 1  (1,1) ... (1,8)

Positions outside ``[1, 8] x [1, 8]`` can be built (move generators step off
the edge while probing) but every board query treats them as off-board.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board coordinate."""

    row: int
    column: int

    def offset(self, d_row: int, d_column: int) -> Position:
        """Position shifted by (*d_row*, *d_column*)."""
        return Position(self.row + d_row, self.column + d_column)

    @property
    def on_board(self) -> bool:
        return 1 <= self.row <= BOARD_SIZE and 1 <= self.column <= BOARD_SIZE
