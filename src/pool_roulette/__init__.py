"""Pool Roulette - pass-the-device ball dealing game."""

__version__ = "0.1.0"
