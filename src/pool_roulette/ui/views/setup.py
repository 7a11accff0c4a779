"""Setup page — player count and balls per roll."""

from __future__ import annotations

import streamlit as st

from pool_roulette.engine import MIN_BALLS_PER_ROLL, MIN_PLAYERS
from pool_roulette.ui.actions import Action
from pool_roulette.ui.components.stepper import render_stepper
from pool_roulette.ui.session import get_engine, run_action


def render_setup_page() -> None:
    """Render the setup controls and the Start Game button."""
    engine = get_engine()
    total = engine.total_balls

    player_delta = render_stepper(
        f"Players: {engine.players}",
        engine.players,
        key="players",
        can_decrease=engine.players > MIN_PLAYERS,
        can_increase=(engine.players + 1) * engine.balls_per_roll <= total,
    )
    if player_delta:
        run_action(Action.ADD_PLAYER if player_delta > 0 else Action.REMOVE_PLAYER)

    balls_delta = render_stepper(
        f"Balls per roll: {engine.balls_per_roll}",
        engine.balls_per_roll,
        key="balls_per_roll",
        can_decrease=engine.balls_per_roll > MIN_BALLS_PER_ROLL,
        can_increase=engine.balls_per_roll < engine.max_balls_per_roll,
    )
    if balls_delta:
        run_action(Action.MORE_BALLS if balls_delta > 0 else Action.FEWER_BALLS)

    st.caption(
        f"{engine.config.balls_in_play} of {total} balls will be dealt "
        f"(at most {engine.max_balls_per_roll} per player)."
    )

    if st.button(
        "Start Game", key="btn_start_game", type="primary", use_container_width=True
    ):
        run_action(Action.START_GAME)
