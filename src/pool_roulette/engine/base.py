"""
Pool Roulette - Game Engine Base Classes

This module defines the constants, enums and immutable data structures shared
by the dealing engine and the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from pool_roulette.engine.errors import InvalidBallsPerRoll, InvalidPlayerCount


TOTAL_BALLS = 15
MIN_PLAYERS = 2
MIN_BALLS_PER_ROLL = 1

DEFAULT_PLAYERS = 2
DEFAULT_BALLS_PER_ROLL = 3


class GamePhase(Enum):
    """Phases of a Pool Roulette game."""
    SETUP = "setup"
    PLAYING = "playing"
    BETWEEN_TURNS = "between_turns"  # hand-off gate before the next reveal
    GAME_OVER = "game_over"


def max_balls_per_roll(players: int, total_balls: int = TOTAL_BALLS) -> int:
    """
    Largest hand size that keeps a game well-defined for ``players``.

    Args:
        players: Number of players
        total_balls: Size of the ball universe

    Returns:
        ``min(total_balls // players, total_balls - players + 1)``
    """
    return min(total_balls // players, total_balls - players + 1)


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        players: Number of players sharing the device
        balls_per_roll: Balls dealt to each player
        total_balls: Size of the ball universe (1..total_balls)
    """
    players: int = DEFAULT_PLAYERS
    balls_per_roll: int = DEFAULT_BALLS_PER_ROLL
    total_balls: int = TOTAL_BALLS

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.total_balls < MIN_PLAYERS:
            raise ValueError(
                f"Total balls must be at least {MIN_PLAYERS}, got {self.total_balls}."
            )
        if not MIN_PLAYERS <= self.players <= self.total_balls:
            raise InvalidPlayerCount(
                f"The number of players must be between {MIN_PLAYERS} "
                f"and {self.total_balls}, got {self.players}."
            )
        cap = self.max_balls_per_roll
        if not MIN_BALLS_PER_ROLL <= self.balls_per_roll <= cap:
            raise InvalidBallsPerRoll(
                f"The number of balls per roll must be between "
                f"{MIN_BALLS_PER_ROLL} and {cap}, got {self.balls_per_roll}."
            )

    @property
    def max_balls_per_roll(self) -> int:
        """Hand size cap for the configured player count."""
        return max_balls_per_roll(self.players, self.total_balls)

    @property
    def balls_in_play(self) -> int:
        """Balls dealt over a complete game."""
        return self.players * self.balls_per_roll


@dataclass(frozen=True)
class Roll:
    """
    One player's hand, dealt from the front of the shuffled pool.

    Attributes:
        player: 1-indexed player who received the hand
        drawn: Balls in the order they left the pool
    """
    player: int
    drawn: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.drawn)

    @property
    def balls(self) -> tuple[int, ...]:
        """Balls in ascending (display) order."""
        return tuple(sorted(self.drawn))

    @classmethod
    def from_sequence(cls, player: int, drawn: Sequence[int]) -> "Roll":
        """Create a Roll from any sequence type."""
        return cls(player=player, drawn=tuple(drawn))
