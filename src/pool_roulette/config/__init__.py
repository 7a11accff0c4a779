"""
Pool Roulette Configuration.

Environment variables, settings, and logging configuration.
"""

from pool_roulette.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
