"""Piece: fixed identity plus a one-way "has moved" flag."""

from __future__ import annotations

from chesschecker.core.enums import Color, PieceType
from chesschecker.core.errors import ConstructionError, NullAttributeError

# Letter used by ``str(piece)``; knight is N so it does not clash with king.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class Piece:
    """A chess piece owned by exactly one board cell.

    ``kind`` and ``color`` never change. ``has_moved`` starts false and is
    set by :meth:`mark_moved` the first time the board relocates the piece.
    Equality is identity: two white pawns are different pieces.
    """

    __slots__ = ("_kind", "_color", "_has_moved")

    def __init__(self, kind: PieceType, color: Color) -> None:
        if kind is None:
            raise NullAttributeError("type")
        if color is None:
            raise NullAttributeError("color")
        if not isinstance(kind, PieceType):
            raise ConstructionError(f"Invalid piece type: {kind!r}")
        if not isinstance(color, Color):
            raise ConstructionError(f"Invalid piece color: {color!r}")
        self._kind = kind
        self._color = color
        self._has_moved = False

    @property
    def kind(self) -> PieceType:
        return self._kind

    @property
    def color(self) -> Color:
        return self._color

    @property
    def has_moved(self) -> bool:
        return self._has_moved

    @property
    def value(self) -> int:
        """Per-instance material value.

        Always 0: pieces carry no value of their own, see
        :func:`chesschecker.analysis.scoring.piece_value` for the table.
        """
        return 0

    def mark_moved(self) -> None:
        self._has_moved = True

    def is_of_type(self, kind: PieceType) -> bool:
        return self._kind == kind

    def __str__(self) -> str:
        return f"{_LETTERS[self._kind]}{self._color.letter}"

    def __repr__(self) -> str:
        return (
            f"Piece({self._kind.name}, {self._color.name}, "
            f"has_moved={self._has_moved})"
        )
