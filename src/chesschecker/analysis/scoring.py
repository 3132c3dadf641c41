"""Static material values by piece type."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from chesschecker.core.enums import PieceType

PIECE_VALUES: Mapping[PieceType, int] = MappingProxyType(
    {
        PieceType.PAWN: 1,
        PieceType.KNIGHT: 3,
        PieceType.BISHOP: 3,
        PieceType.ROOK: 5,
        PieceType.QUEEN: 9,
        PieceType.KING: 0,
    }
)


def piece_value(kind: PieceType | None) -> int:
    """Material value of *kind*; 0 for ``None`` or anything unrecognised."""
    if not isinstance(kind, PieceType):
        return 0
    return PIECE_VALUES.get(kind, 0)
