"""
Pool Roulette - Settings Tests
"""

import logging

import pytest
from pydantic import ValidationError

from pool_roulette.config.settings import Settings, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DEBUG", "LOG_LEVEL", "DEFAULT_PLAYERS", "DEFAULT_BALLS_PER_ROLL", "RANDOM_SEED"):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.default_players == 2
        assert settings.default_balls_per_roll == 3
        assert settings.random_seed is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DEFAULT_PLAYERS", "4")
        monkeypatch.setenv("RANDOM_SEED", "99")
        settings = Settings(_env_file=None)
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.default_players == 4
        assert settings.random_seed == 99

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None)

    def test_players_below_minimum(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PLAYERS", "1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_more_players_than_balls(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PLAYERS", "16")
        with pytest.raises(ValidationError, match="default_players"):
            Settings(_env_file=None)

    def test_all_balls_one_each(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PLAYERS", "15")
        assert Settings(_env_file=None).default_players == 15

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DEFAULT_BALLS_PER_ROLL=5\n", encoding="utf-8")
        settings = Settings(_env_file=env_file)
        assert settings.default_balls_per_roll == 5


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_level(self):
        logger = configure_logging(Settings(_env_file=None, log_level="WARNING"))
        assert logger.name == "pool_roulette"
        assert logger.level == logging.WARNING

    def test_handler_added_once(self):
        settings = Settings(_env_file=None)
        configure_logging(settings)
        logger = configure_logging(settings)
        ours = [h for h in logger.handlers if h.get_name() == "pool_roulette.console"]
        assert len(ours) == 1

