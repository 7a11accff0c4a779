"""Page renderers for Pool Roulette."""

from pool_roulette.ui.views.game import render_game_page
from pool_roulette.ui.views.setup import render_setup_page

__all__ = ["render_game_page", "render_setup_page"]
