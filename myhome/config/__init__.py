"""
Configuration package.

Environment settings, token configuration and logging setup.
"""

from myhome.config.settings import Settings, TokenSettings, get_settings
from myhome.config.logging import configure_logging, get_logger

__all__ = ['Settings', 'TokenSettings', 'get_settings', 'configure_logging', 'get_logger']
