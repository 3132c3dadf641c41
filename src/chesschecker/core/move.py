"""Move history entries."""

from __future__ import annotations

from dataclasses import dataclass

from chesschecker.core.piece import Piece
from chesschecker.core.types import Cell


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single executed relocation, numbered from 1 since the last reset."""

    piece: Piece
    from_cell: Cell
    to_cell: Cell
    captured: Piece | None
    sequence_number: int

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        suffix = f" x{self.captured}" if self.captured is not None else ""
        return (
            f"{self.sequence_number}. {self.piece} "
            f"{self.from_cell}->{self.to_cell}{suffix}"
        )
