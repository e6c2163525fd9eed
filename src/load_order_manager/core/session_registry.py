"""Registry of detected games and the current game selection"""

import threading
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .. import __app_name__, __version__
from ..config.manager import SettingsManager
from ..config.paths import AppPaths
from ..config.schema import AUTO_GAME, DEFAULT_LANGUAGE, AppConfiguration, GameSettings
from ..localization import set_locale, translate
from ..logging_config import enable_debug_logging, get_logger, setup_logging
from .errors import (
    GameDetectionError,
    GameInitError,
    GameNotFoundError,
    NoGameSelectedError,
    SettingsPersistenceError,
)
from .game import Game
from .game_detector import GameDetector

logger = get_logger("session_registry")


class SessionRegistry:
    """Owns the detected games and which of them is current.

    The current game is tracked by its folder name rather than by position,
    so adding or removing games never leaves the selection pointing at the
    wrong game. Every operation that mutates the games, the selection or the
    unapplied change counter holds a single lock for its whole duration,
    including any detection or game initialisation it performs.

    Games returned by get_current_game() may be discarded by the next call
    to load(), so callers should not keep them across it.
    """

    def __init__(
        self,
        settings_manager: SettingsManager,
        detector: Optional[GameDetector] = None,
        paths: Optional[AppPaths] = None,
        debug: bool = False,
    ):
        """Initialize the registry.

        Args:
            settings_manager: Store holding the game settings and preferences
            detector: Detector used to find and construct installed games
            paths: Application paths, defaults to the platform locations
            debug: Log everything to the log file and the console, whatever
                the debug logging setting is
        """
        self.settings_manager = settings_manager
        self.detector = detector or GameDetector()
        self.paths = paths or AppPaths()
        self.debug = debug

        self._lock = threading.Lock()
        self._installed_games: list[Game] = []
        self._current_folder: Optional[str] = None
        self._unapplied_change_counter = 0
        self._init_errors: list[str] = []

    @property
    def init_errors(self) -> tuple[str, ...]:
        """Errors recorded while starting up, in the order they occurred."""
        return tuple(self._init_errors)

    def init(self, cmd_line_game: str = "") -> None:
        """Start up: load settings, detect installed games and select one.

        Problems that still allow the application to run are recorded in
        init_errors rather than raised.

        Args:
            cmd_line_game: Folder name of the game to select, or "" to use
                the stored preferences

        Raises:
            GameDetectionError: If no supported game is installed. The error
                is also recorded in init_errors.
        """
        # Set a locale before any user-facing text is produced
        set_locale(DEFAULT_LANGUAGE, self.paths.l10n_dir)

        if not self.paths.data_dir.exists():
            logger.info("Data folder doesn't exist, creating it.")
            try:
                self.paths.ensure_data_dir()
            except OSError as e:
                self._init_errors.append(
                    translate("Error: Could not create the data folder. {error}").format(error=e)
                )

        if self.settings_manager.exists():
            try:
                self.settings_manager.load()
            except (ET.ParseError, ValueError, OSError) as e:
                self._init_errors.append(
                    translate("Error: Settings parsing failed. {error}").format(error=e)
                )

        settings = self.settings_manager.config.settings
        try:
            setup_logging(self.paths.log_file, debug=self.debug)
        except OSError as e:
            self._init_errors.append(
                translate("Error: Could not open the log file. {error}").format(error=e)
            )
        enable_debug_logging(self.debug or settings.enable_debug_logging)

        logger.info(f"{__app_name__} version: {__version__}")

        # Settings are loaded, so set the locale again for translations
        if settings.language != DEFAULT_LANGUAGE:
            logger.debug("Initialising language settings.")
            set_locale(settings.language, self.paths.l10n_dir)

        with self._lock:
            logger.debug("Detecting installed games.")
            self._installed_games.clear()
            self._current_folder = None
            for game_settings in self.settings_manager.get_game_settings():
                if self.detector.is_installed(game_settings):
                    self._add_game(game_settings)

            try:
                logger.debug("Selecting game.")
                game = self._select_game(cmd_line_game)
            except GameDetectionError as e:
                logger.error(f"Game could not be selected. {e}")
                self._init_errors.append(
                    translate("Error: Game-specific settings could not be initialised. {error}").format(error=e)
                )
                raise

            logger.debug(f"Game selected is {game.name}")
            try:
                logger.debug("Initialising game-specific settings.")
                game.init()
            except GameInitError as e:
                logger.error(f"Game-specific settings could not be initialised. {e}")
                self._init_errors.append(
                    translate("Error: Game-specific settings could not be initialised. {error}").format(error=e)
                )

    def load(self, config: AppConfiguration) -> None:
        """Apply new settings and bring the installed games in line with them.

        Existing games are updated in place, newly listed games are added if
        installed, and games no longer listed are removed. If the current game
        was removed another one is selected, then the current game is
        initialised again in case its path changed.

        Args:
            config: The new configuration

        Raises:
            GameDetectionError: If no installed game is left to select
            GameInitError: If the current game fails to initialise
        """
        with self._lock:
            self.settings_manager.apply(config)

            # Enable/disable debug logging in case it has changed
            enable_debug_logging(self.debug or config.settings.enable_debug_logging)

            logger.debug("Updating existing games and adding new games.")
            kept_folders = set()
            for game_settings in self.settings_manager.get_game_settings():
                game = self._find_game(game_settings.folder_name)
                if game is not None:
                    game.update_from(game_settings)
                elif self.detector.is_installed(game_settings):
                    self._add_game(game_settings)

                kept_folders.add(game_settings.folder_name.casefold())

            logger.debug("Removing deleted games.")
            remaining = []
            for game in self._installed_games:
                if game.folder_name.casefold() in kept_folders:
                    remaining.append(game)
                else:
                    logger.debug(f"Removing game: {game.folder_name}")
            self._installed_games[:] = remaining

            current = self._resolve_current()
            if current is None:
                current = self._select_game("")

            # Re-initialise the current game in case its path was changed
            current.init()

    def select_game(self, preferred_game: str = "") -> Game:
        """Select the current game.

        Args:
            preferred_game: Folder name of the game to select, or "" to use
                the stored preferences

        Returns:
            The selected game

        Raises:
            GameDetectionError: If no games are installed
        """
        with self._lock:
            return self._select_game(preferred_game)

    def change_game(self, folder_name: str) -> Game:
        """Make the installed game with the given folder name current.

        Args:
            folder_name: Folder name of the game, matched case-insensitively

        Returns:
            The new current game

        Raises:
            GameNotFoundError: If no installed game has that folder name. The
                current game is left unchanged.
            GameInitError: If the game was selected but failed to initialise
        """
        with self._lock:
            logger.debug(f"Changing current game to that with folder: {folder_name}")
            game = self._find_game(folder_name)
            if game is None:
                raise GameNotFoundError(folder_name)

            self._current_folder = game.folder_name
            game.init()
            logger.debug(f"New game is {game.name}")
            return game

    def get_current_game(self) -> Game:
        """Get the current game.

        Raises:
            NoGameSelectedError: If no game has been selected
        """
        with self._lock:
            game = self._resolve_current()
            if game is None:
                raise NoGameSelectedError("No game has been selected.")
            return game

    def get_installed_games(self) -> list[str]:
        """Get the folder names of the installed games, in detection order."""
        with self._lock:
            return [game.folder_name for game in self._installed_games]

    def has_unapplied_changes(self) -> bool:
        return self._unapplied_change_counter > 0

    def increment_unapplied_change_counter(self) -> None:
        with self._lock:
            self._unapplied_change_counter += 1

    def decrement_unapplied_change_counter(self) -> None:
        with self._lock:
            if self._unapplied_change_counter > 0:
                self._unapplied_change_counter -= 1

    def update_stored_game_path_setting(self, game: Game) -> None:
        """Store a game's install path in its settings.

        A game without settings is logged and otherwise ignored.

        Args:
            game: The game whose path to store
        """
        with self._lock:
            self._update_stored_game_path_setting(game)

    def save(self, path: Optional[Path] = None) -> None:
        """Save the settings, recording the current game as the last used one.

        Args:
            path: File to write, defaults to the settings manager's path

        Raises:
            SettingsPersistenceError: If the settings file could not be written
        """
        with self._lock:
            self._save(path)

    def apply_settings(self, config: AppConfiguration, path: Optional[Path] = None) -> None:
        """Apply new settings with load() and write them to disk.

        The settings are still saved if only the current game fails to
        initialise, so the file matches what the registry is using. If no game
        is left to select nothing is saved.

        Args:
            config: The new configuration
            path: File to write, defaults to the settings manager's path

        Raises:
            GameDetectionError: If no installed game is left to select
            GameInitError: If the current game fails to initialise
            SettingsPersistenceError: If the settings file could not be written
        """
        try:
            self.load(config)
        except GameInitError:
            self.save(path)
            raise
        self.save(path)

    # Helpers below expect the lock to be held by the caller
    def _add_game(self, game_settings: GameSettings) -> Game:
        logger.debug(f"Adding new installed game entry for: {game_settings.folder_name}")
        game = self.detector.construct(game_settings, self.paths.data_dir)
        self._installed_games.append(game)
        self._update_stored_game_path_setting(game)
        return game

    def _update_stored_game_path_setting(self, game: Game) -> None:
        games_settings = self.settings_manager.get_game_settings()
        for game_settings in games_settings:
            if game.matches(game_settings):
                game_settings.game_path = game.game_path
                self.settings_manager.store_game_settings(games_settings)
                return

        logger.error(f"Could not find the settings for the current game ({game.name})")

    def _save(self, path: Optional[Path]) -> None:
        current = self._resolve_current()
        if current is not None:
            self.settings_manager.store_last_game(current.folder_name)

        self.settings_manager.update_last_version(__version__)
        try:
            self.settings_manager.save(path)
        except OSError as e:
            raise SettingsPersistenceError(f"Could not save settings: {e}") from e

    def _find_game(self, folder_name: str) -> Optional[Game]:
        for game in self._installed_games:
            if game.has_folder(folder_name):
                return game
        return None

    def _resolve_current(self) -> Optional[Game]:
        """Look up the current game, clearing the selection if it's gone."""
        if self._current_folder is None:
            return None

        game = self._find_game(self._current_folder)
        if game is None:
            self._current_folder = None
        return game

    def _select_game(self, preferred_game: str) -> Game:
        if not preferred_game:
            settings = self.settings_manager.config.settings
            if settings.game != AUTO_GAME:
                preferred_game = settings.game
            elif settings.last_game != AUTO_GAME:
                preferred_game = settings.last_game

        if not self._installed_games:
            self._current_folder = None
            raise GameDetectionError("None of the supported games were detected.")

        game = None
        if preferred_game:
            game = self._find_game(preferred_game)
        # Fall back to the first installed game
        if game is None:
            game = self._installed_games[0]

        self._current_folder = game.folder_name
        return game
