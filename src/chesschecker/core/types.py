"""Coordinate and grid aliases plus bounds helpers.

Cells are addressed as ``(row, col)`` with row 0 holding White's back rank.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from chesschecker.core.errors import OutOfBoundsError

if TYPE_CHECKING:
    from chesschecker.core.piece import Piece

BOARD_SIZE = 8

Cell: TypeAlias = tuple[int, int]
Grid: TypeAlias = "list[list[Piece | None]]"


def is_valid_coordinate(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board. Only ints address a cell."""
    if not (isinstance(row, int) and isinstance(col, int)):
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def require_coordinate(row: int, col: int) -> Cell:
    """Return ``(row, col)`` or raise :class:`OutOfBoundsError`."""
    if not is_valid_coordinate(row, col):
        raise OutOfBoundsError(f"Coordinate ({row}, {col}) is outside the board")
    return row, col


def empty_grid() -> Grid:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
