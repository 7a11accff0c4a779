"""Ball tray component — renders a hand of numbered balls."""

from __future__ import annotations

from typing import Sequence

import streamlit as st


def render_ball_tray(balls: Sequence[int], placeholder: str = "No balls dealt yet.") -> None:
    """Render balls as a row of numbered pool balls.

    Args:
        balls: Ball numbers, already in display order.
        placeholder: Text shown when there are no balls.
    """
    if not balls:
        st.markdown(
            '<div class="ball-tray">'
            f'<span class="tray-placeholder">{placeholder}</span>'
            "</div>",
            unsafe_allow_html=True,
        )
        return

    html_parts = ['<div class="ball-tray">']
    for ball in balls:
        html_parts.append(f'<div class="ball">{ball}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)
