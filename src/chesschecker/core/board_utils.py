"""Stateless queries over a grid as returned by ``Board.board_snapshot()``."""

from __future__ import annotations

from chesschecker.core.enums import Color
from chesschecker.core.errors import NullGridError
from chesschecker.core.types import Grid, require_coordinate


def _require_grid(grid: Grid | None) -> Grid:
    if grid is None:
        raise NullGridError("Grid cannot be None")
    return grid


def is_capture(
    grid: Grid | None, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    """Whether both cells are occupied by pieces of different colors.

    Raises:
        NullGridError: *grid* is ``None``.
        OutOfBoundsError: either cell is off the board.
    """
    grid = _require_grid(grid)
    require_coordinate(from_row, from_col)
    require_coordinate(to_row, to_col)
    start = grid[from_row][from_col]
    end = grid[to_row][to_col]
    return start is not None and end is not None and start.color != end.color


def count_pieces_by_color(grid: Grid | None, color: Color) -> int:
    """Number of pieces of *color* on *grid*."""
    grid = _require_grid(grid)
    return sum(
        1 for row in grid for piece in row if piece is not None and piece.color == color
    )
