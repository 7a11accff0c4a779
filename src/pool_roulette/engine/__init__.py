"""
Pool Roulette Game Engine.

Pure Python game logic with zero UI dependencies.
Handles configuration bounds, shuffling, dealing and turn hand-off.
"""

from pool_roulette.engine.base import (
    MIN_BALLS_PER_ROLL,
    MIN_PLAYERS,
    TOTAL_BALLS,
    GameConfig,
    GamePhase,
    Roll,
    max_balls_per_roll,
)
from pool_roulette.engine.errors import (
    InsufficientPoolForDeal,
    InvalidBallsPerRoll,
    InvalidPhaseError,
    InvalidPlayerCount,
    RouletteError,
)
from pool_roulette.engine.roulette import PoolRouletteEngine

__all__ = [
    # Constants
    "TOTAL_BALLS",
    "MIN_PLAYERS",
    "MIN_BALLS_PER_ROLL",
    "max_balls_per_roll",
    # Data Classes
    "GameConfig",
    "Roll",
    # Enums
    "GamePhase",
    # Errors
    "RouletteError",
    "InvalidPlayerCount",
    "InvalidBallsPerRoll",
    "InsufficientPoolForDeal",
    "InvalidPhaseError",
    # Engine
    "PoolRouletteEngine",
]
