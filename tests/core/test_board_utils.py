"""Tests for grid query helpers."""

import pytest

from chesschecker.core.board import Board
from chesschecker.core.board_utils import count_pieces_by_color, is_capture
from chesschecker.core.enums import Color, PieceType
from chesschecker.core.errors import NullGridError, OutOfBoundsError
from chesschecker.core.piece import Piece
from chesschecker.core.types import empty_grid


class TestIsCapture:
    def test_different_colors(self) -> None:
        grid = empty_grid()
        grid[3][3] = Piece(PieceType.ROOK, Color.WHITE)
        grid[3][6] = Piece(PieceType.PAWN, Color.BLACK)
        assert is_capture(grid, 3, 3, 3, 6)
        assert is_capture(grid, 3, 6, 3, 3)

    def test_same_color(self, board: Board) -> None:
        assert not is_capture(board.board_snapshot(), 0, 0, 1, 0)

    def test_empty_destination(self, board: Board) -> None:
        assert not is_capture(board.board_snapshot(), 1, 0, 3, 0)

    def test_empty_source(self, board: Board) -> None:
        assert not is_capture(board.board_snapshot(), 3, 0, 6, 0)

    def test_across_the_board(self, board: Board) -> None:
        assert is_capture(board.board_snapshot(), 0, 3, 7, 3)

    def test_none_grid(self) -> None:
        with pytest.raises(NullGridError):
            is_capture(None, 0, 0, 1, 1)

    @pytest.mark.parametrize("move", [(-1, 0, 0, 0), (0, 0, 8, 0), (0, 0, 0, -8)])
    def test_out_of_range_raises(self, board: Board, move: tuple[int, int, int, int]) -> None:
        with pytest.raises(OutOfBoundsError):
            is_capture(board.board_snapshot(), *move)


class TestCountPiecesByColor:
    def test_empty_grid(self) -> None:
        grid = empty_grid()
        assert count_pieces_by_color(grid, Color.WHITE) == 0
        assert count_pieces_by_color(grid, Color.BLACK) == 0

    def test_initial_board(self, board: Board) -> None:
        grid = board.board_snapshot()
        assert count_pieces_by_color(grid, Color.WHITE) == 16
        assert count_pieces_by_color(grid, Color.BLACK) == 16

    def test_after_capture(self, board: Board) -> None:
        board.move_piece(0, 3, 6, 4)
        grid = board.board_snapshot()
        assert count_pieces_by_color(grid, Color.WHITE) == 16
        assert count_pieces_by_color(grid, Color.BLACK) == 15

    def test_none_grid(self) -> None:
        with pytest.raises(NullGridError, match="Grid cannot be None"):
            count_pieces_by_color(None, Color.WHITE)
