"""Material analysis of a live board."""

from __future__ import annotations

from collections.abc import Callable

from chesschecker.analysis.models import AnalysisReport, ScoreSource, Verdict
from chesschecker.analysis.scoring import piece_value
from chesschecker.core.board import Board
from chesschecker.core.enums import Color
from chesschecker.core.errors import UnboundBoardError
from chesschecker.core.piece import Piece

_VALUE_FUNCS: dict[ScoreSource, Callable[[Piece], int]] = {
    ScoreSource.PIECE: lambda piece: piece.value,
    ScoreSource.TABLE: lambda piece: piece_value(piece.kind),
}


class GameAnalyzer:
    """Scores each side from the board's current snapshot.

    With the default :attr:`ScoreSource.PIECE` every piece contributes its
    per-instance ``value``, which is always 0, so both sides always score 0
    and the verdict is always a tie. :attr:`ScoreSource.TABLE` uses the
    material table instead.

    The analyzer may be created without a board; every query then raises
    :class:`UnboundBoardError`.
    """

    __slots__ = ("_board", "_score_source")

    def __init__(
        self,
        board: Board | None,
        *,
        score_source: ScoreSource = ScoreSource.PIECE,
    ) -> None:
        self._board = board
        self._score_source = ScoreSource(score_source)

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def score_source(self) -> ScoreSource:
        return self._score_source

    def _require_board(self) -> Board:
        if self._board is None:
            raise UnboundBoardError("GameAnalyzer has no board bound")
        return self._board

    def calculate_player_score(self, color: Color) -> int:
        """Sum of material values of *color*'s pieces on the board."""
        grid = self._require_board().board_snapshot()
        value_of = _VALUE_FUNCS[self._score_source]
        return sum(
            value_of(piece)
            for row in grid
            for piece in row
            if piece is not None and piece.color == color
        )

    def is_player_winning(self, color: Color) -> bool:
        """Whether *color* is strictly ahead of the opponent."""
        return self.calculate_player_score(color) > self.calculate_player_score(
            color.opposite
        )

    def report(self) -> AnalysisReport:
        if self.is_player_winning(Color.WHITE):
            verdict = Verdict.WHITE_WINNING
        elif self.is_player_winning(Color.BLACK):
            verdict = Verdict.BLACK_WINNING
        else:
            verdict = Verdict.TIED
        return AnalysisReport(
            white_score=self.calculate_player_score(Color.WHITE),
            black_score=self.calculate_player_score(Color.BLACK),
            verdict=verdict,
        )
