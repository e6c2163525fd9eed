"""GUI module using CustomTkinter for a modern interface.

This module provides all user interface components for the application.

Components:
    MainWindow: Main application window with the game selector, details of
        the current game and any errors from startup

    SettingsDialog: Dialog for the default game, language and debug logging

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
"""

from .main_window import MainWindow
from .settings_dialog import SettingsDialog

__all__ = [
    "MainWindow",
    "SettingsDialog",
]
