"""Material scoring and game analysis APIs."""

from chesschecker.analysis.models import AnalysisReport, ScoreSource, Verdict
from chesschecker.analysis.scoring import PIECE_VALUES, piece_value
from chesschecker.analysis.service import GameAnalyzer

__all__ = [
    "AnalysisReport",
    "GameAnalyzer",
    "PIECE_VALUES",
    "ScoreSource",
    "Verdict",
    "piece_value",
]
