"""Main application entry point and orchestrator"""

import argparse
import sys
from typing import Optional

import customtkinter as ctk

from .config.manager import SettingsManager
from .config.paths import AppPaths
from .core.errors import GameDetectionError
from .core.game_detector import GameDetector
from .core.session_registry import SessionRegistry
from .gui.main_window import MainWindow
from .logging_config import get_logger
from . import __app_name__

logger = get_logger("app")


class LoadOrderManagerApp:
    """Main application orchestrator.

    Handles startup, the fatal no-game case and the application lifecycle.
    """

    def __init__(self, game: str = "", debug: bool = False):
        self.game = game
        self.debug = debug
        self.paths = AppPaths()
        self.settings_manager = SettingsManager(self.paths.settings_file)
        self.registry = SessionRegistry(
            self.settings_manager,
            GameDetector(),
            self.paths,
            debug=debug,
        )
        self.main_window: Optional[MainWindow] = None

    def run(self) -> int:
        """Run the application.

        Returns:
            Process exit status
        """
        # Set appearance mode to follow system
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        try:
            self.registry.init(self.game)
        except GameDetectionError:
            logger.exception("No supported game detected")
            self._show_fatal_error()
            return 1

        self.main_window = MainWindow(self.registry)
        self.main_window.mainloop()
        return 0

    def _show_fatal_error(self):
        """Tell the user the application can't run without a game."""
        from tkinter import messagebox

        root = ctk.CTk()
        root.withdraw()
        messagebox.showerror(
            "No Game Detected",
            "\n\n".join(self.registry.init_errors),
        )
        root.destroy()


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="load-order-manager", description=__app_name__)
    parser.add_argument(
        "--game",
        default="",
        help="folder name of the game to select on startup",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log everything, whatever the debug logging setting is",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None):
    """Application entry point."""
    args = parse_args(argv)

    try:
        app = LoadOrderManagerApp(game=args.game, debug=args.debug)
        status = app.run()
    except Exception as e:
        logger.exception("Fatal error during startup")
        # Show error dialog if something goes wrong during startup
        import tkinter as tk
        from tkinter import messagebox

        root = tk.Tk()
        root.withdraw()
        messagebox.showerror(
            "Startup Error",
            f"Failed to start {__app_name__}:\n\n{e}"
        )
        root.destroy()
        sys.exit(1)
    finally:
        logger.info(f"{__app_name__} shutting down")

    sys.exit(status)


if __name__ == "__main__":
    main()
