"""Settings management - load/save XML settings"""

import copy
import dataclasses
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import AppPaths
from .schema import (
    AUTO_GAME,
    DEFAULT_LANGUAGE,
    DEFAULT_REPO_BRANCH,
    AppConfiguration,
    GameSettings,
    GameType,
    Settings,
    default_game_settings,
)
from ..logging_config import get_logger

logger = get_logger("settings_manager")


class SettingsManager:
    """Manages application settings persistence.

    Holds the in-memory AppConfiguration and handles loading and saving it
    to XML format. Until a file is loaded the defaults are used.
    """

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path or AppPaths().settings_file
        self.config: AppConfiguration = self.create_default()

    def exists(self) -> bool:
        """Check if the settings file exists on disk."""
        return self.settings_path.exists()

    def load(self, path: Optional[Path] = None) -> AppConfiguration:
        """Load settings from XML file.

        The in-memory configuration is only replaced once the whole file has
        been parsed successfully.

        Args:
            path: File to read, defaults to the manager's settings path

        Returns:
            AppConfiguration object with loaded settings

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            ET.ParseError: If XML is malformed
            ValueError: If a game entry has an unknown type
        """
        path = path or self.settings_path
        logger.debug(f"Loading settings from {path}")
        tree = ET.parse(path)
        root = tree.getroot()

        # Use defaults if Settings element is missing
        settings_elem = root.find("Settings")
        if settings_elem is not None:
            settings = Settings(
                game=self._get_text(settings_elem, "Game", AUTO_GAME),
                last_game=self._get_text(settings_elem, "LastGame", AUTO_GAME),
                language=self._get_text(settings_elem, "Language", DEFAULT_LANGUAGE),
                enable_debug_logging=self._parse_bool(settings_elem, "EnableDebugLogging", False),
                last_version=self._get_text(settings_elem, "LastVersion", ""),
            )
        else:
            settings = Settings()

        # Missing Games element - use the built-in game list
        games_elem = root.find("Games")
        if games_elem is not None:
            games = []
            for game_elem in games_elem.findall("Game"):
                folder_name = self._get_text(game_elem, "Folder", "")
                if not folder_name:
                    raise ValueError("Game entry is missing its folder name")

                games.append(GameSettings(
                    type=GameType(game_elem.get("type")),
                    name=self._get_text(game_elem, "Name", folder_name),
                    folder_name=folder_name,
                    master=self._get_text(game_elem, "Master", ""),
                    repo_url=self._get_text(game_elem, "RepoURL", ""),
                    repo_branch=self._get_text(game_elem, "RepoBranch", DEFAULT_REPO_BRANCH),
                    game_path=self._parse_path(game_elem, "GamePath"),
                    registry_key=self._get_text(game_elem, "RegistryKey", ""),
                ))
        else:
            games = default_game_settings()

        self.config = AppConfiguration(settings=settings, games=games)
        logger.debug(f"Settings loaded: {len(games)} games")
        return self.config

    def save(self, path: Optional[Path] = None) -> None:
        """Save current settings to XML file.

        Creates the parent directory if it doesn't exist.

        Args:
            path: File to write, defaults to the manager's settings path

        Raises:
            OSError: If the file could not be written
        """
        path = path or self.settings_path
        logger.debug(f"Saving settings to {path}")

        path.parent.mkdir(parents=True, exist_ok=True)

        root = ET.Element("LoadOrderManager", version="1.0")

        # Settings section
        settings = self.config.settings
        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "Game").text = settings.game
        ET.SubElement(settings_elem, "LastGame").text = settings.last_game
        ET.SubElement(settings_elem, "Language").text = settings.language
        ET.SubElement(settings_elem, "EnableDebugLogging").text = str(settings.enable_debug_logging).lower()
        ET.SubElement(settings_elem, "LastVersion").text = settings.last_version

        # Games section
        games_elem = ET.SubElement(root, "Games")
        for game in self.config.games:
            game_elem = ET.SubElement(games_elem, "Game", type=game.type.value)
            ET.SubElement(game_elem, "Name").text = game.name
            ET.SubElement(game_elem, "Folder").text = game.folder_name
            ET.SubElement(game_elem, "Master").text = game.master
            ET.SubElement(game_elem, "RepoURL").text = game.repo_url
            ET.SubElement(game_elem, "RepoBranch").text = game.repo_branch
            ET.SubElement(game_elem, "GamePath").text = str(game.game_path) if game.game_path else ""
            ET.SubElement(game_elem, "RegistryKey").text = game.registry_key

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> AppConfiguration:
        """Create a default configuration.

        Returns:
            New AppConfiguration with default values
        """
        self.config = AppConfiguration(settings=Settings(), games=default_game_settings())
        return self.config

    def apply(self, config: AppConfiguration) -> None:
        """Replace the in-memory configuration wholesale.

        Args:
            config: The configuration to use from now on
        """
        self.config = config

    def get_game_settings(self) -> list[GameSettings]:
        """Get a copy of the settings of every known game.

        Returns:
            List of GameSettings that can be edited without affecting the store
        """
        return [dataclasses.replace(game) for game in self.config.games]

    def store_game_settings(self, games: list[GameSettings]) -> None:
        """Replace the settings of every known game.

        Args:
            games: New list of game settings
        """
        self.config.games = copy.deepcopy(games)

    def store_last_game(self, folder_name: str) -> None:
        """Record the folder of the game that was last in use."""
        self.config.settings.last_game = folder_name

    def update_last_version(self, version: str) -> None:
        """Record the version of the application that last saved settings."""
        self.config.settings.last_version = version

    # Helper methods for XML parsing
    @staticmethod
    def _get_text(parent: ET.Element, tag: str, default: str = "") -> str:
        """Get text content of a child element."""
        elem = parent.find(tag)
        return elem.text if elem is not None and elem.text else default

    @staticmethod
    def _parse_bool(parent: ET.Element, tag: str, default: bool = False) -> bool:
        """Parse a boolean value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text:
            return elem.text.lower() == "true"
        return default

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return AppPaths.expand_path(elem.text)
        return None
