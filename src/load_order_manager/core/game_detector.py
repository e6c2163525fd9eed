"""Auto-detect installed games"""

import dataclasses
import sys
from pathlib import Path
from typing import Optional

from ..config.schema import GameSettings
from ..logging_config import get_logger
from .game import Game

logger = get_logger("game_detector")


class GameDetector:
    """Auto-detect installed games.

    A game is installed at a folder if the folder contains its master file
    in the Data subfolder. Candidate folders are checked in this order:
    the configured game path, the parent of the working directory (for when
    the application is installed inside the game folder), then the install
    path recorded in the Windows Registry.
    """

    def find_game_path(self, settings: GameSettings) -> Optional[Path]:
        """Find the install folder of a game.

        Args:
            settings: Settings of the game to look for

        Returns:
            The install folder, or None if the game isn't installed
        """
        candidates = []
        if settings.game_path is not None:
            candidates.append(settings.game_path)
        candidates.append(Path.cwd().parent)

        registry_path = self._read_registry_path(settings.registry_key)
        if registry_path is not None:
            candidates.append(registry_path)

        for candidate in candidates:
            if self._has_master(candidate, settings.master):
                logger.debug(f"Found {settings.name} at {candidate}")
                return candidate
        return None

    def is_installed(self, settings: GameSettings) -> bool:
        """Check if a game is installed.

        Args:
            settings: Settings of the game to check

        Returns:
            True if an install folder was found
        """
        return self.find_game_path(settings) is not None

    def construct(self, settings: GameSettings, data_dir: Path) -> Game:
        """Create a game object with its install path resolved.

        Args:
            settings: Settings of an installed game
            data_dir: Application data directory

        Returns:
            The new Game; its game_path is the detected install folder, or
            the configured one if detection fails
        """
        game_path = self.find_game_path(settings) or settings.game_path
        return Game(dataclasses.replace(settings, game_path=game_path), data_dir)

    @staticmethod
    def _has_master(game_path: Path, master: str) -> bool:
        if not master:
            return False
        try:
            return (game_path / "Data" / master).is_file()
        except OSError:
            return False

    @staticmethod
    def _read_registry_path(registry_key: str) -> Optional[Path]:
        """Read an install path from the 32-bit view of HKEY_LOCAL_MACHINE.

        Args:
            registry_key: "<subkey>\\<value name>", e.g.
                "Software\\Bethesda Softworks\\Skyrim\\Installed Path"

        Returns:
            The stored path, or None if unavailable or not on Windows
        """
        if sys.platform != "win32" or "\\" not in registry_key:
            return None

        import winreg

        subkey, value_name = registry_key.rsplit("\\", 1)
        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE,
                subkey,
                0,
                winreg.KEY_READ | winreg.KEY_WOW64_32KEY,
            ) as key:
                value, _ = winreg.QueryValueEx(key, value_name)
        except OSError:
            return None

        return Path(value) if value else None
