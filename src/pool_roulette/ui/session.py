"""Per-browser-session engine storage and flash messages."""

from __future__ import annotations

import logging
import random

import streamlit as st

from pool_roulette.config import Settings, get_settings
from pool_roulette.engine import GamePhase, PoolRouletteEngine
from pool_roulette.ui.actions import Action, apply_action

logger = logging.getLogger(__name__)

_ENGINE_KEY = "engine"
_FLASH_KEY = "_flash_error"
_FINAL_REVEALED_KEY = "_final_hand_revealed"


def build_engine(settings: Settings) -> PoolRouletteEngine:
    """Create a fresh engine from the session defaults in ``settings``."""
    rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
    return PoolRouletteEngine(
        players=settings.default_players,
        balls_per_roll=settings.default_balls_per_roll,
        rng=rng,
    )


def get_engine() -> PoolRouletteEngine:
    """Return this session's engine, creating it on first use."""
    ss = st.session_state
    if _ENGINE_KEY not in ss:
        ss[_ENGINE_KEY] = build_engine(get_settings())
        logger.info("Created engine for new session")
    return ss[_ENGINE_KEY]


def run_action(action: Action) -> None:
    """Apply ``action`` to the session engine and rerun the script.

    A rejection is stashed so the next run can show it.
    """
    engine = get_engine()
    outcome = apply_action(engine, action)
    if not outcome.ok:
        st.session_state[_FLASH_KEY] = (outcome.title, outcome.message)
    elif engine.phase == GamePhase.SETUP:
        st.session_state.pop(_FINAL_REVEALED_KEY, None)
    st.rerun()


def render_flash() -> None:
    """Show and clear the last rejected action, if any."""
    flash = st.session_state.pop(_FLASH_KEY, None)
    if flash:
        title, message = flash
        st.error(f"**{title}**: {message}")


def final_hand_revealed() -> bool:
    """Whether the last player has taken the device at game over."""
    return st.session_state.get(_FINAL_REVEALED_KEY, False)


def reveal_final_hand() -> None:
    """Open the hand-off gate for the last player's hand and rerun.

    The engine is already in GAME_OVER, so the gate lives in the session.
    """
    st.session_state[_FINAL_REVEALED_KEY] = True
    logger.info("Revealed final hand")
    st.rerun()
