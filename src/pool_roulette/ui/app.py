"""Pool Roulette — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from pool_roulette.config import configure_logging, get_settings
from pool_roulette.engine import TOTAL_BALLS, GamePhase


_RULES = f"""\
**Goal:** Everyone gets a secret set of pool balls.

**Setup:**
- Pick the number of players and how many balls each one gets
- Players x balls per roll can never exceed {TOTAL_BALLS}

**Play:**
- Player 1 sees their balls first, then taps **Next Player**
- Pass the device; the next player taps **Show My Balls** to look
- The game ends once the last player has their balls
"""


def _render_debug_panel() -> None:
    """Show the engine's hidden state in the sidebar (DEBUG only)."""
    from pool_roulette.ui.session import get_engine

    engine = get_engine()
    with st.sidebar:
        st.divider()
        st.markdown("### Engine")
        st.json(
            {
                "phase": engine.phase.value,
                "current_player": engine.current_player,
                "pool": list(engine.pool),
                "rolls": [
                    {"player": roll.player, "drawn": list(roll.drawn)}
                    for roll in engine.rolls
                ],
            }
        )


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Pool Roulette",
        page_icon="🎱",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    configure_logging(settings)

    from pool_roulette.ui.session import get_engine, render_flash
    from pool_roulette.ui.themes import load_css

    load_css()
    st.title("Pool Roulette")
    render_flash()

    # Page routing (lazy imports to avoid circular deps)
    if get_engine().phase == GamePhase.SETUP:
        from pool_roulette.ui.views.setup import render_setup_page
        render_setup_page()
    else:
        from pool_roulette.ui.views.game import render_game_page
        render_game_page()

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)

    if settings.debug:
        _render_debug_panel()


if __name__ == "__main__":
    main()
