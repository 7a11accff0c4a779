"""Button actions — maps each UI control onto one engine command."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from pool_roulette.engine import GamePhase, PoolRouletteEngine, RouletteError

logger = logging.getLogger(__name__)


class Action(Enum):
    """Every control the game screen can show."""

    ADD_PLAYER = "add_player"
    REMOVE_PLAYER = "remove_player"
    MORE_BALLS = "more_balls"
    FEWER_BALLS = "fewer_balls"
    START_GAME = "start_game"
    NEXT_PLAYER = "next_player"
    SHOW_BALLS = "show_balls"
    PLAY_AGAIN = "play_again"
    RESET_GAME = "reset_game"


@dataclass(frozen=True)
class ActionOutcome:
    """Result of a button press.

    Attributes:
        action: The action that was applied
        error: The rejection, or None on success
    """

    action: Action
    error: RouletteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def title(self) -> str | None:
        return self.error.title if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None


_SETUP_ACTIONS = (
    Action.REMOVE_PLAYER,
    Action.ADD_PLAYER,
    Action.FEWER_BALLS,
    Action.MORE_BALLS,
    Action.START_GAME,
)


def _dispatch(engine: PoolRouletteEngine, action: Action) -> None:
    if action is Action.ADD_PLAYER:
        engine.set_player_count(1)
    elif action is Action.REMOVE_PLAYER:
        engine.set_player_count(-1)
    elif action is Action.MORE_BALLS:
        engine.set_balls_per_roll(1)
    elif action is Action.FEWER_BALLS:
        engine.set_balls_per_roll(-1)
    elif action is Action.START_GAME:
        engine.start_game()
    elif action is Action.NEXT_PLAYER:
        engine.deal_next()
    elif action is Action.SHOW_BALLS:
        engine.reveal_turn()
    elif action in (Action.PLAY_AGAIN, Action.RESET_GAME):
        engine.reset()
    else:
        raise ValueError(f"Unknown action: {action!r}")


def apply_action(engine: PoolRouletteEngine, action: Action) -> ActionOutcome:
    """Run the engine command behind ``action``.

    Rejections are returned, not raised, so the page can show them.
    """
    try:
        _dispatch(engine, action)
    except RouletteError as exc:
        logger.warning(
            "Rejected %s in phase %s: %s", action.value, engine.phase.value, exc.message
        )
        return ActionOutcome(action=action, error=exc)

    logger.info(
        "Applied %s: phase=%s players=%d balls_per_roll=%d current_player=%d remaining=%d",
        action.value,
        engine.phase.value,
        engine.players,
        engine.balls_per_roll,
        engine.current_player,
        engine.remaining,
    )
    return ActionOutcome(action=action)


def available_actions(engine: PoolRouletteEngine) -> tuple[Action, ...]:
    """Buttons to show for the engine's current phase."""
    phase = engine.phase
    if phase == GamePhase.SETUP:
        return _SETUP_ACTIONS
    if phase == GamePhase.PLAYING:
        if engine.can_deal_next:
            return (Action.NEXT_PLAYER, Action.RESET_GAME)
        return (Action.RESET_GAME,)
    if phase == GamePhase.BETWEEN_TURNS:
        return (Action.SHOW_BALLS, Action.RESET_GAME)
    return (Action.PLAY_AGAIN, Action.RESET_GAME)
