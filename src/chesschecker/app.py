"""Command-line driver that plays moves on a fresh board and prints analysis.

Usage:
    chesschecker [--move FR,FC,TR,TC ...] [--score-source piece|table]
        [--log-level LEVEL] [--reset]

Without ``--move`` the demonstration sequence ``1,0,3,0`` ``6,0,4,0`` is
played. Exits with 1 if the board rejected any move.
"""

from __future__ import annotations

import argparse
import logging
import sys

from chesschecker.analysis import GameAnalyzer, ScoreSource
from chesschecker.config import configure_logging, get_settings
from chesschecker.core import (
    Board,
    Color,
    count_pieces_by_color,
    render_board,
    render_captured,
    render_grid,
)

MoveArgs = tuple[int, int, int, int]

DEMO_MOVES: tuple[MoveArgs, ...] = (
    (1, 0, 3, 0),  # white pawn
    (6, 0, 4, 0),  # black pawn
)


def _parse_move(text: str) -> MoveArgs:
    parts = text.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"expected FR,FC,TR,TC, got {text!r}"
        )
    try:
        fr, fc, tr, tc = (int(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"coordinates must be integers, got {text!r}"
        ) from None
    return fr, fc, tr, tc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesschecker",
        description="Move pieces on a chess board and report material scores.",
    )
    parser.add_argument(
        "--move",
        dest="moves",
        action="append",
        type=_parse_move,
        metavar="FR,FC,TR,TC",
        help="move to play (repeatable); defaults to a short demo sequence",
    )
    parser.add_argument(
        "--score-source",
        choices=[source.value for source in ScoreSource],
        default=None,
        help="value per piece: 'piece' (instance value) or 'table' (material table)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(logging.getLevelNamesMapping()),
        default=None,
        help="logging level, e.g. INFO",
    )
    parser.add_argument(
        "--reset", action="store_true", help="reset the board after the moves"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, settings.log_format)
    score_source = ScoreSource(args.score_source or settings.score_source)

    board = Board()
    analyzer = GameAnalyzer(board, score_source=score_source)
    print(render_grid(board.board_snapshot()))
    print()

    exit_code = 0
    for move in args.moves or DEMO_MOVES:
        if not board.move_piece(*move):
            print(f"error: move {move} was rejected", file=sys.stderr)
            exit_code = 1

    print(render_board(board))
    print()
    for line in analyzer.report().summary_lines():
        print(line)
    for color in Color:
        print(render_captured(board, color))

    grid = board.board_snapshot()
    print(f"Total white pieces: {count_pieces_by_color(grid, Color.WHITE)}")
    print(f"Total black pieces: {count_pieces_by_color(grid, Color.BLACK)}")

    if args.reset:
        board.reset()
        print("Board reset!")
        print(render_board(board))
    return exit_code


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    return run(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
