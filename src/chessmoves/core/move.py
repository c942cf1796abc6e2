"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import PieceType
from chessmoves.core.position import Position

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single piece move.

    *promotion* is set only for a pawn reaching the far row and must be one
    of :data:`PROMOTION_TYPES`.
    """

    start: Position
    end: Position
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and (
            not isinstance(self.promotion, PieceType)
            or self.promotion not in PROMOTION_TYPES
        ):
            raise ValueError(f"Invalid promotion piece type: {self.promotion!r}")

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None
