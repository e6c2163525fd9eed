"""Configuration management module.

This module provides settings storage, loading, and data models for the application.

Submodules:
    manager: SettingsManager for loading/saving XML settings
    schema: Data classes defining settings structure (GameSettings, Settings, etc.)
    paths: AppPaths with the data directory, settings file and log file locations

The settings are stored as XML in <data dir>/settings.xml.
"""

from .manager import SettingsManager
from .schema import (
    AUTO_GAME,
    DEFAULT_LANGUAGE,
    AppConfiguration,
    GameSettings,
    GameType,
    Settings,
    default_game_settings,
)
from .paths import AppPaths

__all__ = [
    "SettingsManager",
    "AUTO_GAME",
    "DEFAULT_LANGUAGE",
    "AppConfiguration",
    "GameSettings",
    "GameType",
    "Settings",
    "default_game_settings",
    "AppPaths",
]
