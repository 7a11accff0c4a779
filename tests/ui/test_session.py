"""
Pool Roulette - Session Engine Tests
"""

from pool_roulette.config.settings import Settings
from pool_roulette.engine import GamePhase
from pool_roulette.ui.session import build_engine


class TestBuildEngine:
    """Tests for build_engine()."""

    def test_uses_session_defaults(self):
        engine = build_engine(
            Settings(_env_file=None, default_players=3, default_balls_per_roll=4)
        )
        assert engine.players == 3
        assert engine.balls_per_roll == 4
        assert engine.phase == GamePhase.SETUP

    def test_default_clamped_to_cap(self):
        engine = build_engine(
            Settings(_env_file=None, default_players=5, default_balls_per_roll=6)
        )
        assert engine.balls_per_roll == 3

    def test_seed_makes_hands_repeat(self):
        settings = Settings(_env_file=None, random_seed=42)
        first = build_engine(settings).start_game()
        second = build_engine(settings).start_game()
        assert first == second
