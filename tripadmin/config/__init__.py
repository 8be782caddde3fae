"""
Configuration package for the Trip Planner admin backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    AdminSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "AdminSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
