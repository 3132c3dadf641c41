"""Tests for MoveRecord."""

import dataclasses

import pytest

from chesschecker.core.enums import Color, PieceType
from chesschecker.core.move import MoveRecord
from chesschecker.core.piece import Piece


class TestMoveRecord:
    def test_fields(self) -> None:
        pawn = Piece(PieceType.PAWN, Color.WHITE)
        record = MoveRecord(pawn, (1, 4), (3, 4), None, 1)
        assert record.piece is pawn
        assert record.is_capture is False
        assert str(record) == "1. PW (1, 4)->(3, 4)"

    def test_capture(self) -> None:
        queen = Piece(PieceType.QUEEN, Color.BLACK)
        pawn = Piece(PieceType.PAWN, Color.WHITE)
        record = MoveRecord(queen, (7, 3), (1, 3), pawn, 4)
        assert record.is_capture is True
        assert str(record) == "4. QB (7, 3)->(1, 3) xPW"

    def test_immutable(self) -> None:
        record = MoveRecord(Piece(PieceType.KING, Color.WHITE), (0, 4), (1, 4), None, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.sequence_number = 2  # type: ignore[misc]
