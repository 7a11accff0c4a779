"""
Pool Roulette - Test Configuration and Fixtures

Common fixtures and helpers for all test modules.
"""

import random

import pytest

from pool_roulette.engine import GamePhase, PoolRouletteEngine


# =============================================================================
# RANDOMNESS
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so shuffles are reproducible."""
    return random.Random(1234)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine(rng) -> PoolRouletteEngine:
    """Default engine: 15 balls, 2 players, 3 balls per roll."""
    return PoolRouletteEngine(rng=rng)


@pytest.fixture
def three_by_three(rng) -> PoolRouletteEngine:
    """15 balls, 3 players, 3 balls per roll."""
    return PoolRouletteEngine(players=3, balls_per_roll=3, rng=rng)


@pytest.fixture
def five_by_three(rng) -> PoolRouletteEngine:
    """15 balls, 5 players, 3 balls per roll (exhausts the pool)."""
    return PoolRouletteEngine(players=5, balls_per_roll=3, rng=rng)


@pytest.fixture
def play_to_end():
    """Start a game and deal/reveal until GAME_OVER."""
    def _play(engine: PoolRouletteEngine) -> None:
        engine.start_game()
        while engine.phase != GamePhase.GAME_OVER:
            engine.deal_next()
            if engine.phase == GamePhase.BETWEEN_TURNS:
                engine.reveal_turn()
    return _play
