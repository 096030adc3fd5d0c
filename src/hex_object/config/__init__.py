"""
Configuration module for hex_object.

Uses pydantic-settings for environment variable loading.
"""

from hex_object.config.settings import (
    ENV_PREFIX,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = ["ENV_PREFIX", "Settings", "get_settings", "reset_settings"]
