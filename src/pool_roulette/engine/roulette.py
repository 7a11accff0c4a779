"""
Pool Roulette - Dealing Engine

Players share one device. A pool of numbered balls is shuffled once per
game and dealt out in equal hands, one hand per player in order. Between
hands the device is passed on, and the next hand stays hidden until its
owner reveals it.

Phase flow:
    SETUP --start_game--> PLAYING --deal_next--> BETWEEN_TURNS
    BETWEEN_TURNS --reveal_turn--> PLAYING
    PLAYING --deal_next (last player)--> GAME_OVER
    any --reset--> SETUP

The engine owns its state. Every command validates first and raises a
RouletteError before mutating anything.
"""

import random

from pool_roulette.engine.base import (
    DEFAULT_BALLS_PER_ROLL,
    DEFAULT_PLAYERS,
    TOTAL_BALLS,
    GameConfig,
    GamePhase,
    Roll,
)
from pool_roulette.engine.errors import InsufficientPoolForDeal, InvalidPhaseError
from pool_roulette.engine.validators import (
    clamp_balls_per_roll,
    validate_balls_per_roll,
    validate_player_count,
)


class PoolRouletteEngine:
    """
    Stateful engine for one Pool Roulette session.

    Args:
        players: Initial number of players
        balls_per_roll: Initial hand size, clamped to the cap for ``players``
        total_balls: Size of the ball universe
        rng: Random source; defaults to the process-wide ``random`` module
    """

    def __init__(
        self,
        players: int = DEFAULT_PLAYERS,
        balls_per_roll: int = DEFAULT_BALLS_PER_ROLL,
        total_balls: int = TOTAL_BALLS,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random
        self._config = GameConfig(
            players=players,
            balls_per_roll=clamp_balls_per_roll(balls_per_roll, players, total_balls),
            total_balls=total_balls,
        )
        self._pool: list[int] = []
        self._rolls: list[Roll] = []
        self._current_player = 1
        self._phase = GamePhase.SETUP
        self.reset()

    # === Queries ===

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def players(self) -> int:
        return self._config.players

    @property
    def balls_per_roll(self) -> int:
        return self._config.balls_per_roll

    @property
    def total_balls(self) -> int:
        return self._config.total_balls

    @property
    def max_balls_per_roll(self) -> int:
        """Hand size cap for the current player count."""
        return self._config.max_balls_per_roll

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def rolls(self) -> tuple[Roll, ...]:
        return tuple(self._rolls)

    @property
    def latest_roll(self) -> Roll | None:
        """Most recently dealt hand, or None before the game starts."""
        return self._rolls[-1] if self._rolls else None

    @property
    def pool(self) -> tuple[int, ...]:
        """Undealt balls in draw order."""
        return tuple(self._pool)

    @property
    def remaining(self) -> int:
        return len(self._pool)

    @property
    def dealt_balls(self) -> frozenset[int]:
        return frozenset(ball for roll in self._rolls for ball in roll.drawn)

    @property
    def can_deal_next(self) -> bool:
        """True while a hand can still be dealt to a later player."""
        return (
            self._phase == GamePhase.PLAYING
            and self._current_player < self._config.players
        )

    # === Configuration ===

    def set_player_count(self, delta: int) -> GameConfig:
        """
        Change the number of players by ``delta`` and reset the game.

        A hand size above the new cap is lowered to the cap rather than
        rejected.

        Raises:
            InvalidPhaseError: Outside SETUP
            InvalidPlayerCount: If the new count breaks a bound
        """
        self._require_phase(GamePhase.SETUP, "change the number of players")
        config = self._config
        players = validate_player_count(
            config.players + delta, config.balls_per_roll, config.total_balls
        )
        self._config = GameConfig(
            players=players,
            balls_per_roll=clamp_balls_per_roll(
                config.balls_per_roll, players, config.total_balls
            ),
            total_balls=config.total_balls,
        )
        self.reset()
        return self._config

    def set_balls_per_roll(self, delta: int) -> GameConfig:
        """
        Change the hand size by ``delta`` and reset the game.

        Raises:
            InvalidPhaseError: Outside SETUP
            InvalidBallsPerRoll: If the new hand size breaks a bound
        """
        self._require_phase(GamePhase.SETUP, "change the balls per roll")
        config = self._config
        balls_per_roll = validate_balls_per_roll(
            config.balls_per_roll + delta, config.players, config.total_balls
        )
        self._config = GameConfig(
            players=config.players,
            balls_per_roll=balls_per_roll,
            total_balls=config.total_balls,
        )
        self.reset()
        return self._config

    # === Game flow ===

    def start_game(self) -> Roll:
        """
        Shuffle the pool and deal the first hand to player 1.

        Returns:
            The first Roll

        Raises:
            InvalidPhaseError: Outside SETUP
            InsufficientPoolForDeal: If the pool cannot fill a hand
        """
        self._require_phase(GamePhase.SETUP, "start a game")
        self._require_pool()

        self._rng.shuffle(self._pool)
        roll = self._draw(player=1)
        self._current_player = 1
        self._phase = GamePhase.PLAYING
        return roll

    def deal_next(self) -> Roll:
        """
        Deal a hand to the next player and pass the device on.

        The hand is drawn before the reveal gate, so ``current_player`` and
        ``latest_roll`` already describe the next player while the phase is
        BETWEEN_TURNS.

        Returns:
            The Roll dealt to the new current player

        Raises:
            InvalidPhaseError: Outside PLAYING, or after the last player
            InsufficientPoolForDeal: If the pool cannot fill a hand
        """
        self._require_phase(GamePhase.PLAYING, "deal the next hand")
        if not self.can_deal_next:
            raise InvalidPhaseError("Every player has already been dealt a hand.")
        self._require_pool()

        roll = self._draw(player=self._current_player + 1)
        self._current_player += 1
        if self._current_player == self._config.players:
            self._phase = GamePhase.GAME_OVER
        else:
            self._phase = GamePhase.BETWEEN_TURNS
        return roll

    def reveal_turn(self) -> None:
        """Let the new current player see their hand."""
        self._require_phase(GamePhase.BETWEEN_TURNS, "reveal a hand")
        self._phase = GamePhase.PLAYING

    def reset(self) -> None:
        """Return to SETUP with the full, ordered pool."""
        self._pool = list(range(1, self._config.total_balls + 1))
        self._rolls = []
        self._current_player = 1
        self._phase = GamePhase.SETUP

    # === Internals ===

    def _draw(self, player: int) -> Roll:
        """Remove one hand from the front of the pool and record it."""
        count = self._config.balls_per_roll
        roll = Roll.from_sequence(player, self._pool[:count])
        del self._pool[:count]
        self._rolls.append(roll)
        return roll

    def _require_phase(self, phase: GamePhase, action: str) -> None:
        if self._phase != phase:
            raise InvalidPhaseError(
                f"Cannot {action} while the game is in the "
                f"'{self._phase.value}' phase."
            )

    def _require_pool(self) -> None:
        if len(self._pool) < self._config.balls_per_roll:
            raise InsufficientPoolForDeal(
                "There are not enough balls left for this roll."
            )
