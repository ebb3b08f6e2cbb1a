"""Utility package for general-purpose helpers.

Provides environment configuration and time formatting utilities.
"""

from .env import get_config_dir, get_env_bool, get_env_float, get_env_int, get_store_path
from .time import format_hhmm, format_timestamp, now_iso

__all__ = [
    # Environment utilities
    "get_config_dir",
    "get_store_path",
    "get_env_bool",
    "get_env_float",
    "get_env_int",
    # Time utilities
    "now_iso",
    "format_timestamp",
    "format_hhmm",
]
