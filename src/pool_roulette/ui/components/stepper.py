"""Stepper component — a labelled value with - / + buttons."""

from __future__ import annotations

import streamlit as st


def render_stepper(
    label: str,
    value: int,
    key: str,
    can_decrease: bool = True,
    can_increase: bool = True,
) -> int:
    """Render ``label: value`` between a minus and a plus button.

    The buttons are only greyed out as a hint; the engine still rejects
    out-of-range presses on its own.

    Returns:
        ``-1`` or ``1`` for the pressed button, ``0`` if neither was pressed.
    """
    st.markdown(f'<div class="stepper-label">{label}</div>', unsafe_allow_html=True)
    minus_col, value_col, plus_col = st.columns([1, 2, 1])

    delta = 0
    with minus_col:
        if st.button(
            "-",
            key=f"{key}_minus",
            use_container_width=True,
            type="secondary" if can_decrease else "tertiary",
        ):
            delta = -1
    with value_col:
        st.markdown(
            f'<div class="stepper-value">{value}</div>', unsafe_allow_html=True
        )
    with plus_col:
        if st.button(
            "+",
            key=f"{key}_plus",
            use_container_width=True,
            type="secondary" if can_increase else "tertiary",
        ):
            delta = 1
    return delta
