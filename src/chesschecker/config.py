"""Centralized configuration.

Settings are read from ``CHESSCHECKER_*`` environment variables or an
optional ``.env.chesschecker`` file. Command-line flags take precedence.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chesschecker.analysis.models import ScoreSource


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESSCHECKER_",
        env_file=".env.chesschecker",
        env_file_encoding="utf-8",
    )

    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
    score_source: ScoreSource = ScoreSource.PIECE

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str, fmt: str) -> None:
    """Install a stream handler on the root logger. Called by the CLI only."""
    logging.basicConfig(level=level.upper(), format=fmt, force=True)
