"""Core domain layer - board state, pieces and move bookkeeping.

Quick start::

    from chesschecker.core import Board

    board = Board()
    board.move_piece(1, 4, 3, 4)
    print(board.piece_at(3, 4))
"""

from chesschecker.core.board import Board
from chesschecker.core.board_utils import count_pieces_by_color, is_capture
from chesschecker.core.enums import Color, PieceType
from chesschecker.core.errors import (
    ChessError,
    ConstructionError,
    EmptySourceError,
    NullAttributeError,
    NullGridError,
    OutOfBoundsError,
    UnboundBoardError,
)
from chesschecker.core.move import MoveRecord
from chesschecker.core.piece import Piece
from chesschecker.core.rendering import (
    cell_token,
    render_board,
    render_captured,
    render_grid,
)
from chesschecker.core.types import BOARD_SIZE, Cell, Grid, is_valid_coordinate

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessError",
    "ConstructionError",
    "EmptySourceError",
    "NullAttributeError",
    "NullGridError",
    "OutOfBoundsError",
    "UnboundBoardError",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "Grid",
    "is_valid_coordinate",
    # Domain objects
    "Board",
    "MoveRecord",
    "Piece",
    # Queries
    "count_pieces_by_color",
    "is_capture",
    # Rendering
    "cell_token",
    "render_board",
    "render_captured",
    "render_grid",
]
