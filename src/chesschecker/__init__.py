"""Mutable chess board state with capture bookkeeping and material scoring."""

from chesschecker.analysis import AnalysisReport, GameAnalyzer, ScoreSource, Verdict
from chesschecker.core import Board, Color, Piece, PieceType

__version__ = "0.1.0"

__all__ = [
    "AnalysisReport",
    "Board",
    "Color",
    "GameAnalyzer",
    "Piece",
    "PieceType",
    "ScoreSource",
    "Verdict",
    "__version__",
]
