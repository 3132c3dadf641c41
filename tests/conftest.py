"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chesschecker.analysis import GameAnalyzer
from chesschecker.config import get_settings
from chesschecker.core import Board


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def analyzer(board: Board) -> GameAnalyzer:
    return GameAnalyzer(board)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the caller's CHESSCHECKER_* environment."""
    for name in ("CHESSCHECKER_LOG_LEVEL", "CHESSCHECKER_LOG_FORMAT", "CHESSCHECKER_SCORE_SOURCE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo handlers installed by configure_logging() in CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
