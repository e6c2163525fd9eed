"""Exceptions raised by the session registry and game sessions."""


class LoadOrderError(Exception):
    """Base class for application errors."""


class GameDetectionError(LoadOrderError):
    """No supported game could be selected because none were detected."""


class GameNotFoundError(LoadOrderError):
    """A game was requested by a folder name that matches no detected game."""

    def __init__(self, folder_name: str):
        super().__init__(f"No installed game has the folder name \"{folder_name}\".")
        self.folder_name = folder_name


class NoGameSelectedError(LoadOrderError):
    """The current game was requested before one was selected."""


class GameInitError(LoadOrderError):
    """A game's path-dependent state could not be initialised."""


class SettingsPersistenceError(LoadOrderError):
    """The settings could not be written to disk."""
