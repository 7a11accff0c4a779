"""Game page — hands, hand-off gate, and game over."""

from __future__ import annotations

import streamlit as st

from pool_roulette.engine import GamePhase
from pool_roulette.ui.actions import Action, available_actions
from pool_roulette.ui.components.ball_tray import render_ball_tray
from pool_roulette.ui.session import (
    final_hand_revealed,
    get_engine,
    reveal_final_hand,
    run_action,
)
from pool_roulette.ui.themes.animations import (
    render_game_over_banner,
    render_handoff_banner,
)

_BUTTON_LABELS: dict[Action, str] = {
    Action.NEXT_PLAYER: "Next Player",
    Action.SHOW_BALLS: "Show My Balls",
    Action.PLAY_AGAIN: "Play Again",
}


def render_game_page() -> None:
    """Render the play area for the current phase."""
    engine = get_engine()
    phase = engine.phase
    roll = engine.latest_roll

    if phase == GamePhase.PLAYING:
        st.markdown(
            f'<div class="player-turn">Player {engine.current_player}\'s Balls</div>',
            unsafe_allow_html=True,
        )
        render_ball_tray(roll.balls if roll else ())
    elif phase == GamePhase.BETWEEN_TURNS:
        # The next hand is already dealt; keep it off screen.
        render_handoff_banner(engine.current_player)
    elif phase == GamePhase.GAME_OVER:
        if not final_hand_revealed():
            # The last hand was dealt while the previous player held the device.
            render_handoff_banner(engine.current_player)
            if st.button(
                "Show My Balls",
                key="btn_show_final_balls",
                type="primary",
                use_container_width=True,
            ):
                reveal_final_hand()
            st.divider()
            if st.button("Reset Game", key="btn_reset_game"):
                run_action(Action.RESET_GAME)
            return
        render_game_over_banner(engine.remaining)
        st.markdown(
            f'<div class="player-turn">Player {engine.current_player}\'s Balls</div>',
            unsafe_allow_html=True,
        )
        render_ball_tray(roll.balls if roll else ())

    actions = available_actions(engine)
    for action in actions:
        label = _BUTTON_LABELS.get(action)
        if label and st.button(
            label, key=f"btn_{action.value}", type="primary", use_container_width=True
        ):
            run_action(action)

    st.divider()
    if Action.RESET_GAME in actions:
        if st.button("Reset Game", key="btn_reset_game"):
            run_action(Action.RESET_GAME)
