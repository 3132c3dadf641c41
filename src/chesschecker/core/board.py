"""Board - mutable 8x8 piece placement with capture and move bookkeeping."""

from __future__ import annotations

import logging

from chesschecker.core.enums import Color, PieceType
from chesschecker.core.errors import ChessError, EmptySourceError
from chesschecker.core.move import MoveRecord
from chesschecker.core.piece import Piece
from chesschecker.core.types import (
    BOARD_SIZE,
    Grid,
    empty_grid,
    is_valid_coordinate,
    require_coordinate,
)

_LOGGER = logging.getLogger(__name__)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
_HOME_ROWS: dict[Color, tuple[int, int]] = {
    # color -> (back rank row, pawn row)
    Color.WHITE: (0, 1),
    Color.BLACK: (7, 6),
}


class Board:
    """Mutable board that relocates pieces without checking chess legality.

    A move only has to start on the board, from an occupied cell, and end on
    the board. Whatever stands on the destination is captured and credited
    to the mover, even a piece of the mover's own color.

    Not thread-safe: callers sharing a board must serialize every move,
    reset and query sequence themselves.
    """

    __slots__ = (
        "_grid",
        "_move_history",
        "_captured",
        "_move_count",
        "_piece_movements",
    )

    def __init__(self) -> None:
        self._grid: Grid = empty_grid()
        self._move_history: list[MoveRecord] = []
        self._captured: dict[Color, list[Piece]] = {color: [] for color in Color}
        self._move_count = 0
        # Lifetime tally per piece type; survives reset().
        self._piece_movements: dict[PieceType, int] = {kind: 0 for kind in PieceType}
        self._setup_initial_layout()

    def _setup_initial_layout(self) -> None:
        # Rows are cleared in place so board_snapshot() callers keep a live view.
        for row in self._grid:
            row[:] = [None] * BOARD_SIZE
        for color, (back_row, pawn_row) in _HOME_ROWS.items():
            for col, kind in enumerate(_BACK_RANK):
                self._grid[back_row][col] = Piece(kind, color)
                self._grid[pawn_row][col] = Piece(PieceType.PAWN, color)

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid_coordinate(row: int, col: int) -> bool:
        return is_valid_coordinate(row, col)

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Piece on ``(row, col)``; ``None`` if empty or off the board."""
        if not is_valid_coordinate(row, col):
            return None
        return self._grid[row][col]

    def board_snapshot(self) -> Grid:
        """The live grid. Later moves and resets are visible through it."""
        return self._grid

    # -- Bookkeeping --------------------------------------------------------

    @property
    def move_count(self) -> int:
        """Moves executed since construction or the last reset."""
        return self._move_count

    @property
    def move_history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._move_history)

    def captured_pieces(self, color: Color) -> tuple[Piece, ...]:
        """Pieces captured by *color*, oldest first."""
        return tuple(self._captured[color])

    def piece_movements(self, kind: PieceType) -> int:
        """How many moves pieces of *kind* have made over the board's lifetime."""
        return self._piece_movements[kind]

    # -- Moves --------------------------------------------------------------

    def validate_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> None:
        """Raise unless the move starts on an occupied cell and ends on the board.

        Raises:
            OutOfBoundsError: either endpoint is off the board.
            EmptySourceError: no piece stands on the source cell.
        """
        require_coordinate(from_row, from_col)
        require_coordinate(to_row, to_col)
        if self._grid[from_row][from_col] is None:
            raise EmptySourceError(
                f"No piece at start coordinate ({from_row}, {from_col})"
            )

    def move_piece(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        """Relocate a piece unconditionally. Returns False if validation fails."""
        try:
            self.validate_move(from_row, from_col, to_row, to_col)
        except ChessError:
            _LOGGER.error(
                "Move validation failed: (%s, %s) -> (%s, %s)",
                from_row,
                from_col,
                to_row,
                to_col,
                exc_info=True,
            )
            return False

        piece = self._grid[from_row][from_col]
        assert piece is not None
        captured = self._grid[to_row][to_col]
        if captured is piece:
            # Moving onto its own cell; a piece cannot capture itself.
            captured = None

        if captured is not None:
            self._captured[piece.color].append(captured)
            _LOGGER.info("Captured %s (value: %d)", captured, captured.value)

        self._grid[from_row][from_col] = None
        self._grid[to_row][to_col] = piece
        piece.mark_moved()

        self._move_count += 1
        self._log_piece_movement(piece)
        self._move_history.append(
            MoveRecord(
                piece=piece,
                from_cell=(from_row, from_col),
                to_cell=(to_row, to_col),
                captured=captured,
                sequence_number=self._move_count,
            )
        )
        return True

    def _log_piece_movement(self, piece: Piece) -> None:
        count = self._piece_movements[piece.kind] + 1
        self._piece_movements[piece.kind] = count
        _LOGGER.info("Moved %s: total %s moves = %d", piece, piece.kind.name, count)

    # -- Reset --------------------------------------------------------------

    def reset(self) -> None:
        """Restore the starting layout with fresh pieces and empty history."""
        self._setup_initial_layout()
        for pieces in self._captured.values():
            pieces.clear()
        self._move_history.clear()
        self._move_count = 0
        _LOGGER.info("Board reset")

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        return f"Board(moves={self._move_count})"
