"""Plain-text views of a board. Formatting only, never mutates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesschecker.core.types import BOARD_SIZE, Grid

if TYPE_CHECKING:
    from chesschecker.core.board import Board
    from chesschecker.core.enums import Color
    from chesschecker.core.piece import Piece

EMPTY_TOKEN = "."


def cell_token(piece: Piece | None) -> str:
    """First letter of the kind name plus color letter, e.g. ``PW``.

    Knights and kings share the ``K`` prefix in this view; use ``str(piece)``
    for the unambiguous ``N`` spelling.
    """
    if piece is None:
        return EMPTY_TOKEN
    return f"{piece.kind.name[0]}{piece.color.letter}"


def render_grid(grid: Grid) -> str:
    """Detailed view: one line per row, no coordinates."""
    return "\n".join(" ".join(cell_token(piece) for piece in row) for row in grid)


def render_board(board: Board) -> str:
    """Indexed view with a column header and row numbers."""
    lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
    for row_index, row in enumerate(board.board_snapshot()):
        cells = " ".join(str(piece) if piece else EMPTY_TOKEN for piece in row)
        lines.append(f"{row_index} {cells}")
    return "\n".join(lines)


def render_captured(board: Board, color: Color) -> str:
    pieces = " ".join(str(piece) for piece in board.captured_pieces(color))
    return f"{color.name} captured pieces:\n{pieces}"
