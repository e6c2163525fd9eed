"""Core business logic module.

This module contains game detection and the tracking of installed games.

Submodules:
    game: Game, the runtime representation of an installed game
    game_detector: GameDetector for finding installed games on disk and in the registry
    session_registry: SessionRegistry owning the installed games and the current game
    errors: Exceptions raised by the above

The SessionRegistry is the single owner of Game objects; everything else
asks it for the current game when needed.
"""

from .errors import (
    GameDetectionError,
    GameInitError,
    GameNotFoundError,
    LoadOrderError,
    NoGameSelectedError,
    SettingsPersistenceError,
)
from .game import Game
from .game_detector import GameDetector
from .session_registry import SessionRegistry

__all__ = [
    "Game",
    "GameDetector",
    "SessionRegistry",
    "LoadOrderError",
    "GameDetectionError",
    "GameInitError",
    "GameNotFoundError",
    "NoGameSelectedError",
    "SettingsPersistenceError",
]
