"""Configuration data models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

# Preferred/last game value meaning "let the application decide"
AUTO_GAME = "auto"
DEFAULT_LANGUAGE = "en"
DEFAULT_REPO_BRANCH = "v0.10"


class GameType(Enum):
    """Supported game engines/releases"""
    TES4 = "tes4"
    TES5 = "tes5"
    TES5SE = "tes5se"
    TES5VR = "tes5vr"
    FO3 = "fo3"
    FONV = "fonv"
    FO4 = "fo4"
    FO4VR = "fo4vr"


@dataclass
class GameSettings:
    """Settings describing one supported game"""
    type: GameType
    name: str
    folder_name: str  # Stable identity, compared case-insensitively
    master: str
    repo_url: str = ""
    repo_branch: str = DEFAULT_REPO_BRANCH
    game_path: Optional[Path] = None
    registry_key: str = ""  # "<subkey>\<value name>" under HKEY_LOCAL_MACHINE

    def has_folder(self, folder_name: str) -> bool:
        """Check if these settings belong to the game with the given folder.

        Args:
            folder_name: Folder name to compare, case-insensitively

        Returns:
            True if the folder names match
        """
        return self.folder_name.casefold() == folder_name.casefold()


@dataclass
class Settings:
    """Global application preferences"""
    game: str = AUTO_GAME
    last_game: str = AUTO_GAME
    language: str = DEFAULT_LANGUAGE
    enable_debug_logging: bool = False
    last_version: str = ""


def default_game_settings() -> list[GameSettings]:
    """Build the settings for every game supported out of the box.

    Returns:
        New list of GameSettings, one per supported game
    """
    return [
        GameSettings(
            type=GameType.TES4,
            name="TES IV: Oblivion",
            folder_name="Oblivion",
            master="Oblivion.esm",
            repo_url="https://github.com/loot/oblivion.git",
            registry_key=r"Software\Bethesda Softworks\Oblivion\Installed Path",
        ),
        GameSettings(
            type=GameType.TES5,
            name="TES V: Skyrim",
            folder_name="Skyrim",
            master="Skyrim.esm",
            repo_url="https://github.com/loot/skyrim.git",
            registry_key=r"Software\Bethesda Softworks\Skyrim\Installed Path",
        ),
        GameSettings(
            type=GameType.TES5SE,
            name="TES V: Skyrim Special Edition",
            folder_name="Skyrim Special Edition",
            master="Skyrim.esm",
            repo_url="https://github.com/loot/skyrimse.git",
            registry_key=r"Software\Bethesda Softworks\Skyrim Special Edition\Installed Path",
        ),
        GameSettings(
            type=GameType.TES5VR,
            name="TES V: Skyrim VR",
            folder_name="Skyrim VR",
            master="Skyrim.esm",
            repo_url="https://github.com/loot/skyrimse.git",
            registry_key=r"Software\Bethesda Softworks\Skyrim VR\Installed Path",
        ),
        GameSettings(
            type=GameType.FO3,
            name="Fallout 3",
            folder_name="Fallout3",
            master="Fallout3.esm",
            repo_url="https://github.com/loot/fallout3.git",
            registry_key=r"Software\Bethesda Softworks\Fallout3\Installed Path",
        ),
        GameSettings(
            type=GameType.FONV,
            name="Fallout: New Vegas",
            folder_name="FalloutNV",
            master="FalloutNV.esm",
            repo_url="https://github.com/loot/falloutnv.git",
            registry_key=r"Software\Bethesda Softworks\FalloutNV\Installed Path",
        ),
        GameSettings(
            type=GameType.FO4,
            name="Fallout 4",
            folder_name="Fallout4",
            master="Fallout4.esm",
            repo_url="https://github.com/loot/fallout4.git",
            registry_key=r"Software\Bethesda Softworks\Fallout4\Installed Path",
        ),
        GameSettings(
            type=GameType.FO4VR,
            name="Fallout 4 VR",
            folder_name="Fallout4VR",
            master="Fallout4.esm",
            repo_url="https://github.com/loot/fallout4.git",
            registry_key=r"Software\Bethesda Softworks\Fallout 4 VR\Installed Path",
        ),
    ]


@dataclass
class AppConfiguration:
    """Complete application configuration"""
    settings: Settings = field(default_factory=Settings)
    games: list[GameSettings] = field(default_factory=default_game_settings)
