"""
Pool Roulette - Engine Errors

Every error is recoverable: it is raised before any state changes, and the
presentation layer shows ``title`` and ``message`` to the players.
"""


class RouletteError(ValueError):
    """Base class for rejected engine commands."""

    title = "Invalid Action"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPlayerCount(RouletteError):
    """Player count below the minimum or too large for the hand size."""

    title = "Invalid Setting"


class InvalidBallsPerRoll(RouletteError):
    """Balls per roll outside its range or too large for the player count."""

    title = "Invalid Setting"


class InsufficientPoolForDeal(RouletteError):
    """Fewer balls remain in the pool than one hand needs."""

    title = "Not enough balls"


class InvalidPhaseError(RouletteError):
    """Command is not allowed in the current game phase."""
