"""Runtime representation of a detected game"""

from pathlib import Path
from typing import Optional

from ..config.schema import GameSettings, GameType
from ..logging_config import get_logger
from .errors import GameInitError

logger = get_logger("game")


class Game:
    """A detected, installed game the application can operate on.

    Created by the GameDetector from the game's settings. The settings fields
    are copied so the game can be updated in place when settings change,
    while anything initialised from its paths is kept on the object.
    """

    MASTERLIST_FILE_NAME = "masterlist.yaml"
    USERLIST_FILE_NAME = "userlist.yaml"

    def __init__(self, settings: GameSettings, data_dir: Path):
        """Initialize the game.

        Args:
            settings: Settings of the game, with its install path resolved
            data_dir: Application data directory the game's own data lives in
        """
        self.type: GameType = settings.type
        self.folder_name = settings.folder_name
        self.data_dir = data_dir
        self.initialized = False

        self.name = settings.name
        self.master = settings.master
        self.repo_url = settings.repo_url
        self.repo_branch = settings.repo_branch
        self.game_path: Optional[Path] = settings.game_path
        self.registry_key = settings.registry_key

    def __repr__(self) -> str:
        return f"Game(folder_name={self.folder_name!r}, game_path={self.game_path!r})"

    @property
    def data_folder(self) -> Path:
        """Folder holding the application's data for this game."""
        return self.data_dir / self.folder_name

    @property
    def masterlist_path(self) -> Path:
        return self.data_folder / self.MASTERLIST_FILE_NAME

    @property
    def userlist_path(self) -> Path:
        return self.data_folder / self.USERLIST_FILE_NAME

    def has_folder(self, folder_name: str) -> bool:
        """Check if this game has the given folder name, ignoring case."""
        return self.folder_name.casefold() == folder_name.casefold()

    def matches(self, settings: GameSettings) -> bool:
        """Check if the given settings describe this game.

        Args:
            settings: Game settings to compare against

        Returns:
            True if the folder names match, ignoring case
        """
        return settings.has_folder(self.folder_name)

    def update_from(self, settings: GameSettings) -> "Game":
        """Copy the editable fields from the game's settings.

        Args:
            settings: New settings for this game

        Returns:
            This game, for chaining
        """
        self.name = settings.name
        self.master = settings.master
        self.repo_url = settings.repo_url
        self.repo_branch = settings.repo_branch
        self.game_path = settings.game_path
        self.registry_key = settings.registry_key
        return self

    def init(self) -> None:
        """Initialise the game's path-dependent state.

        Checks that the install folder still exists and creates the game's
        data folder. Safe to call again after the game path has changed.

        Raises:
            GameInitError: If the game path is invalid or the data folder
                can't be created
        """
        self.initialized = False

        if self.game_path is None or not self.game_path.is_dir():
            raise GameInitError(
                f"The path to the {self.name} install folder (\"{self.game_path}\") is invalid."
            )

        try:
            self.data_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GameInitError(f"Could not create the data folder for {self.name}: {e}") from e

        logger.debug(f"Initialised {self.name} at {self.game_path}")
        self.initialized = True
