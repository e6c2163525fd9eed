"""Default paths for application data, settings and logs"""

import os
import sys
from pathlib import Path
from typing import Optional


class AppPaths:
    """Locations of the files the application reads and writes.

    The data directory defaults to %LOCALAPPDATA%/LoadOrderManager on Windows
    and $XDG_DATA_HOME/LoadOrderManager elsewhere. Everything else lives
    inside it, except the translation catalogues which ship with the package.
    """

    DATA_DIR_NAME = "LoadOrderManager"
    SETTINGS_FILE_NAME = "settings.xml"
    LOG_FILE_NAME = "LoadOrderManagerDebugLog.txt"

    # Translation catalogues are bundled next to the package sources
    L10N_DIR = Path(__file__).resolve().parent.parent / "l10n"

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else self.default_data_dir()

    @classmethod
    def default_data_dir(cls) -> Path:
        """Get the platform's default data directory for the application.

        Returns:
            Path to the (possibly not yet existing) data directory
        """
        if sys.platform == "win32":
            return cls.expand_path(r"%LOCALAPPDATA%") / cls.DATA_DIR_NAME

        xdg_data_home = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
        return base / cls.DATA_DIR_NAME

    @property
    def settings_file(self) -> Path:
        return self.data_dir / self.SETTINGS_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self.data_dir / self.LOG_FILE_NAME

    @property
    def l10n_dir(self) -> Path:
        return self.L10N_DIR

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables in path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str))

    def ensure_data_dir(self) -> Path:
        """Ensure the data directory exists.

        Returns:
            Path to the data directory

        Raises:
            OSError: If the directory could not be created
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir
