"""UI components for Pool Roulette."""

from pool_roulette.ui.components.ball_tray import render_ball_tray
from pool_roulette.ui.components.stepper import render_stepper

__all__ = [
    "render_ball_tray",
    "render_stepper",
]
