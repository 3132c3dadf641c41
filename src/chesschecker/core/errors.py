"""Exception taxonomy for board, piece and analysis failures."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by chesschecker."""


class ConstructionError(ChessError, TypeError):
    """A piece was built with a missing or malformed attribute."""


class NullAttributeError(ConstructionError):
    """A mandatory piece attribute was ``None``."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"Piece {attribute} cannot be None")
        self.attribute = attribute


class OutOfBoundsError(ChessError, IndexError):
    """A coordinate lies outside the 8x8 board."""


class EmptySourceError(ChessError, LookupError):
    """A move was requested from a cell that holds no piece."""


class UnboundBoardError(ChessError, RuntimeError):
    """An analyzer was queried without a board bound to it."""


class NullGridError(ChessError, TypeError):
    """A grid utility was called with ``None`` instead of a grid."""
