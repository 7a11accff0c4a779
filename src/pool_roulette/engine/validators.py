"""
Pool Roulette - Configuration Validation

Validators either return the validated value or raise a descriptive
RouletteError subclass. They never mutate anything.
"""

from pool_roulette.engine.base import (
    MIN_BALLS_PER_ROLL,
    MIN_PLAYERS,
    TOTAL_BALLS,
    max_balls_per_roll,
)
from pool_roulette.engine.errors import InvalidBallsPerRoll, InvalidPlayerCount


def validate_player_count(
    count: int,
    balls_per_roll: int,
    total_balls: int = TOTAL_BALLS,
) -> int:
    """
    Validate a requested number of players against the current hand size.

    Args:
        count: Requested number of players
        balls_per_roll: Current balls per roll
        total_balls: Size of the ball universe

    Returns:
        Validated count

    Raises:
        InvalidPlayerCount: If count is below the minimum or the game would
            need more balls than exist
    """
    if not isinstance(count, int):
        raise InvalidPlayerCount(
            f"Player count must be an integer, got {type(count).__name__}."
        )

    if count < MIN_PLAYERS or count * balls_per_roll > total_balls:
        raise InvalidPlayerCount(
            f"The number of players must be at least {MIN_PLAYERS} and the total "
            f"balls (players * balls per roll) must not exceed {total_balls}."
        )

    return count


def validate_balls_per_roll(
    value: int,
    players: int,
    total_balls: int = TOTAL_BALLS,
) -> int:
    """
    Validate a requested hand size against the current player count.

    Args:
        value: Requested balls per roll
        players: Current number of players
        total_balls: Size of the ball universe

    Returns:
        Validated value

    Raises:
        InvalidBallsPerRoll: If value is outside
            ``[MIN_BALLS_PER_ROLL, max_balls_per_roll(players)]`` or the game
            would need more balls than exist
    """
    if not isinstance(value, int):
        raise InvalidBallsPerRoll(
            f"Balls per roll must be an integer, got {type(value).__name__}."
        )

    cap = max_balls_per_roll(players, total_balls)
    if (
        value < MIN_BALLS_PER_ROLL
        or value > cap
        or players * value > total_balls
    ):
        raise InvalidBallsPerRoll(
            f"The number of balls per roll must be between {MIN_BALLS_PER_ROLL} "
            f"and {cap}, and the total balls (players * balls per roll) must "
            f"not exceed {total_balls}."
        )

    return value


def clamp_balls_per_roll(
    value: int,
    players: int,
    total_balls: int = TOTAL_BALLS,
) -> int:
    """Lower ``value`` to the cap for ``players``; never raises."""
    if players < MIN_PLAYERS:
        return value
    return min(value, max_balls_per_roll(players, total_balls))
