"""
Pool Roulette - Button Action Tests

Tests for the UI command adapter, which needs no running Streamlit app.
"""

import logging

import pytest

from pool_roulette.engine import GamePhase, InvalidPlayerCount
from pool_roulette.ui.actions import (
    Action,
    ActionOutcome,
    apply_action,
    available_actions,
)


class TestApplyAction:
    """Tests for apply_action()."""

    def test_success(self, engine):
        outcome = apply_action(engine, Action.ADD_PLAYER)
        assert isinstance(outcome, ActionOutcome)
        assert outcome.ok is True
        assert outcome.error is None
        assert outcome.title is None
        assert engine.players == 3

    @pytest.mark.parametrize(
        "action,attr,expected",
        [
            (Action.ADD_PLAYER, "players", 3),
            (Action.MORE_BALLS, "balls_per_roll", 4),
            (Action.FEWER_BALLS, "balls_per_roll", 2),
        ],
    )
    def test_setup_steppers(self, engine, action, attr, expected):
        apply_action(engine, action)
        assert getattr(engine, attr) == expected

    def test_rejection_returned_not_raised(self, engine):
        outcome = apply_action(engine, Action.REMOVE_PLAYER)
        assert outcome.ok is False
        assert isinstance(outcome.error, InvalidPlayerCount)
        assert outcome.title == "Invalid Setting"
        assert "at least 2" in outcome.message
        assert engine.players == 2

    def test_full_round(self, three_by_three):
        engine = three_by_three
        assert apply_action(engine, Action.START_GAME).ok
        assert apply_action(engine, Action.NEXT_PLAYER).ok
        assert engine.phase == GamePhase.BETWEEN_TURNS
        assert apply_action(engine, Action.SHOW_BALLS).ok
        assert apply_action(engine, Action.NEXT_PLAYER).ok
        assert engine.phase == GamePhase.GAME_OVER
        assert apply_action(engine, Action.PLAY_AGAIN).ok
        assert engine.phase == GamePhase.SETUP

    def test_reset_game_mid_game(self, engine):
        apply_action(engine, Action.START_GAME)
        outcome = apply_action(engine, Action.RESET_GAME)
        assert outcome.ok
        assert engine.remaining == 15

    def test_wrong_phase_is_rejected(self, engine):
        outcome = apply_action(engine, Action.SHOW_BALLS)
        assert outcome.ok is False
        assert outcome.title == "Invalid Action"
        assert engine.phase == GamePhase.SETUP

    def test_logs_rejection(self, engine, caplog):
        with caplog.at_level(logging.WARNING, logger="pool_roulette.ui.actions"):
            apply_action(engine, Action.REMOVE_PLAYER)
        assert "Rejected remove_player" in caplog.text

    def test_logs_success(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="pool_roulette.ui.actions"):
            apply_action(engine, Action.START_GAME)
        assert "Applied start_game" in caplog.text
        assert "remaining=12" in caplog.text


class TestAvailableActions:
    """Tests for available_actions()."""

    def test_setup(self, engine):
        actions = available_actions(engine)
        assert Action.START_GAME in actions
        assert Action.ADD_PLAYER in actions
        assert Action.RESET_GAME not in actions

    def test_playing_with_players_left(self, three_by_three):
        three_by_three.start_game()
        assert available_actions(three_by_three) == (Action.NEXT_PLAYER, Action.RESET_GAME)

    def test_between_turns(self, three_by_three):
        three_by_three.start_game()
        three_by_three.deal_next()
        assert available_actions(three_by_three) == (Action.SHOW_BALLS, Action.RESET_GAME)

    def test_game_over(self, engine):
        engine.start_game()
        engine.deal_next()
        assert available_actions(engine) == (Action.PLAY_AGAIN, Action.RESET_GAME)

    def test_every_shown_action_succeeds(self, three_by_three):
        """Pressing the main offered button always walks the game forward."""
        engine = three_by_three
        for _ in range(6):
            action = available_actions(engine)[-1 if engine.phase == GamePhase.SETUP else 0]
            assert apply_action(engine, action).ok
