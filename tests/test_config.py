"""Tests for centralized configuration."""

import logging

import pytest
from pydantic import ValidationError

from chesschecker.analysis.models import ScoreSource
from chesschecker.config import Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.log_level == "WARNING"
        assert s.score_source == ScoreSource.PIECE
        assert "%(message)s" in s.log_format

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSCHECKER_LOG_LEVEL", "debug")
        monkeypatch.setenv("CHESSCHECKER_SCORE_SOURCE", "table")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.score_source == ScoreSource.TABLE

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSCHECKER_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_score_source(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSCHECKER_SCORE_SOURCE", "vibes")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("info", "%(message)s")
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)
