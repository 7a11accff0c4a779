"""Pool-hall theme for Pool Roulette."""

from pool_roulette.ui.themes.animations import (
    load_css,
    render_game_over_banner,
    render_handoff_banner,
)

__all__ = [
    "load_css",
    "render_game_over_banner",
    "render_handoff_banner",
]
