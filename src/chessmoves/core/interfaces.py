"""Abstract interfaces for the core layer.

Move generators depend on :class:`IBoard`, not on the concrete
:class:`~chessmoves.core.board.Board`, so any grid that answers these four
queries can be fed to them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmoves.core.piece import Piece
    from chessmoves.core.position import Position


class IBoard(ABC):
    """Read-only geometric queries consumed by move generators."""

    __slots__ = ()

    @abstractmethod
    def is_valid_square(self, pos: Position) -> bool:
        """Is *pos* inside the 8x8 grid? A bounds check only."""

    @abstractmethod
    def is_friendly(self, start: Position, target: Position) -> bool:
        """Does *target* hold a piece of the same color as the one on *start*?

        Raises ``ValueError`` when *start* is empty.
        """

    @abstractmethod
    def is_enemy(self, start: Position, target: Position) -> bool:
        """Does *target* hold a piece of the opposite color to the one on *start*?

        Raises ``ValueError`` when *start* is empty.
        """

    @abstractmethod
    def piece_at(self, pos: Position) -> Piece | None:
        """The piece on *pos*, or ``None`` for an empty or off-board square."""
