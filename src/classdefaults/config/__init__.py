"""Configuration module using Pydantic Settings.

Usage:
    from classdefaults.config import CloneSettings

    settings = CloneSettings(warn_on_locked_skip=True)
"""

from classdefaults.config.settings import CloneSettings, get_settings

__all__ = [
    "CloneSettings",
    "get_settings",
]
