"""
Pool Roulette - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from pool_roulette.engine.base import (
    DEFAULT_BALLS_PER_ROLL,
    DEFAULT_PLAYERS,
    MIN_BALLS_PER_ROLL,
    MIN_PLAYERS,
    TOTAL_BALLS,
)

_SECRET_KEYS = (
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_PLAYERS",
    "DEFAULT_BALLS_PER_ROLL",
    "RANDOM_SEED",
)

_HANDLER_NAME = "pool_roulette.console"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # New session defaults
    default_players: int = Field(
        default=DEFAULT_PLAYERS, ge=MIN_PLAYERS, le=TOTAL_BALLS
    )
    default_balls_per_roll: int = Field(
        default=DEFAULT_BALLS_PER_ROLL, ge=MIN_BALLS_PER_ROLL
    )
    random_seed: int | None = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger at the configured level.

    Streamlit re-executes the app script on every interaction, so the
    handler is only added once.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("pool_roulette")
    logger.setLevel(settings.log_level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    return logger
