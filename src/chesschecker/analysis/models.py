"""Data models produced by game analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ScoreSource(StrEnum):
    """Where the analyzer reads a piece's material value from."""

    PIECE = "piece"  # Piece.value, always 0
    TABLE = "table"  # analysis.scoring.PIECE_VALUES


class Verdict(StrEnum):
    """Which side is ahead on material."""

    WHITE_WINNING = "White is winning."
    BLACK_WINNING = "Black is winning."
    TIED = "The game is currently tied."


@dataclass(slots=True, frozen=True)
class AnalysisReport:
    """Both material scores and the resulting verdict."""

    white_score: int
    black_score: int
    verdict: Verdict

    def summary_lines(self) -> list[str]:
        return [
            f"White score: {self.white_score}",
            f"Black score: {self.black_score}",
            str(self.verdict),
        ]
