"""CSS injection and HTML banner helpers for the pool-hall theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the pool-hall CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "pool.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_handoff_banner(player: int) -> None:
    """Render the pass-the-device screen shown between hands."""
    st.markdown(
        '<div class="handoff-banner">'
        f"<h2>Pass the device to Player {player}</h2>"
        "<p>No peeking: the balls stay hidden until they tap the button.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_game_over_banner(remaining: int) -> None:
    """Render the game over banner with the count of undealt balls."""
    st.markdown(
        '<div class="game-over-banner">'
        "<h1>Game Over</h1>"
        f"<p>{remaining} ball{'s' if remaining != 1 else ''} left on the table.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
