"""Main application window with game selection and startup diagnostics."""

from tkinter import messagebox

import customtkinter as ctk

from .. import __app_name__, __version__
from ..core.errors import GameInitError, GameNotFoundError, LoadOrderError
from ..core.session_registry import SessionRegistry
from ..logging_config import get_logger
from .settings_dialog import SettingsDialog
from .styles import (
    DETAIL_COLOR,
    DETAIL_FONT,
    ERROR_COLOR,
    HEADING_FONT,
    MAIN_WINDOW_GEOMETRY,
    MAIN_WINDOW_MIN_SIZE,
    MARGIN,
    READY_COLOR,
    ROW_GAP,
    SECTION_FONT,
    SECTION_GAP,
    TEXT_FONT,
    UNAPPLIED_COLOR,
)

logger = get_logger("main_window")


class MainWindow(ctk.CTk):
    """Main application window.

    Layout:
    - Header: title, game selector and settings button
    - Body: details of the current game and any errors from startup
    - Footer: status line showing whether there are unapplied changes
    """

    def __init__(self, registry: SessionRegistry):
        super().__init__()

        self.registry = registry

        self.title(f"{__app_name__} v{__version__}")
        self.geometry(MAIN_WINDOW_GEOMETRY)
        self.minsize(*MAIN_WINDOW_MIN_SIZE)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.game_var = ctk.StringVar()

        self._create_ui()
        self._refresh_ui()

    def _create_ui(self):
        """Create the window UI."""
        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=MARGIN, pady=SECTION_GAP)

        # Header
        header = ctk.CTkFrame(container, fg_color="transparent")
        header.pack(fill="x", pady=(0, SECTION_GAP))

        title = ctk.CTkLabel(header, text=__app_name__, font=HEADING_FONT)
        title.pack(side="left")

        settings_btn = ctk.CTkButton(
            header,
            text="Settings",
            width=90,
            command=self._open_settings,
        )
        settings_btn.pack(side="right")

        self.game_menu = ctk.CTkOptionMenu(
            header,
            values=[],
            variable=self.game_var,
            command=self._on_game_selected,
            width=220,
        )
        self.game_menu.pack(side="right", padx=ROW_GAP)

        # Current game details
        details = ctk.CTkFrame(container)
        details.pack(fill="x", pady=(0, SECTION_GAP))

        details_header = ctk.CTkLabel(details, text="Current Game", font=SECTION_FONT)
        details_header.pack(anchor="w", padx=SECTION_GAP, pady=ROW_GAP)

        self.name_label = ctk.CTkLabel(details, text="", font=TEXT_FONT)
        self.name_label.pack(anchor="w", padx=SECTION_GAP)
        self.path_label = ctk.CTkLabel(details, text="", font=DETAIL_FONT, text_color=DETAIL_COLOR)
        self.path_label.pack(anchor="w", padx=SECTION_GAP)
        self.data_label = ctk.CTkLabel(details, text="", font=DETAIL_FONT, text_color=DETAIL_COLOR)
        self.data_label.pack(anchor="w", padx=SECTION_GAP)
        self.masterlist_label = ctk.CTkLabel(details, text="", font=DETAIL_FONT, text_color=DETAIL_COLOR)
        self.masterlist_label.pack(anchor="w", padx=SECTION_GAP)
        self.userlist_label = ctk.CTkLabel(details, text="", font=DETAIL_FONT, text_color=DETAIL_COLOR)
        self.userlist_label.pack(anchor="w", padx=SECTION_GAP, pady=(0, ROW_GAP))

        # Startup errors, only shown if there were any
        if self.registry.init_errors:
            errors_frame = ctk.CTkFrame(container)
            errors_frame.pack(fill="both", expand=True)

            errors_header = ctk.CTkLabel(
                errors_frame,
                text="Errors During Startup",
                font=SECTION_FONT,
                text_color=ERROR_COLOR,
            )
            errors_header.pack(anchor="w", padx=SECTION_GAP, pady=ROW_GAP)

            errors_box = ctk.CTkTextbox(errors_frame, font=DETAIL_FONT, wrap="word")
            errors_box.pack(fill="both", expand=True, padx=SECTION_GAP, pady=(0, ROW_GAP))
            errors_box.insert("end", "\n".join(self.registry.init_errors))
            errors_box.configure(state="disabled")

        # Status bar
        self.status_label = ctk.CTkLabel(self, text="", font=DETAIL_FONT, anchor="w")
        self.status_label.pack(fill="x", side="bottom", padx=MARGIN, pady=(0, ROW_GAP))

    def _refresh_ui(self):
        """Refresh the game selector, game details and status line."""
        self.game_menu.configure(values=self.registry.get_installed_games())

        try:
            game = self.registry.get_current_game()
        except LoadOrderError:
            game = None

        if game is not None:
            self.game_var.set(game.folder_name)
            state = "" if game.initialized else " (not initialised)"
            self.name_label.configure(text=f"{game.name}{state}")
            self.path_label.configure(text=f"Install folder: {game.game_path}")
            self.data_label.configure(text=f"Data folder: {game.data_folder}")
            self.masterlist_label.configure(text=f"Masterlist: {game.masterlist_path}")
            self.userlist_label.configure(text=f"Userlist: {game.userlist_path}")
        else:
            self.game_var.set("")
            self.name_label.configure(text="No game selected")
            self.path_label.configure(text="")
            self.data_label.configure(text="")
            self.masterlist_label.configure(text="")
            self.userlist_label.configure(text="")

        if self.registry.has_unapplied_changes():
            self.status_label.configure(text="You have unapplied changes.", text_color=UNAPPLIED_COLOR)
        else:
            self.status_label.configure(text="Ready", text_color=READY_COLOR)

    def _confirm_discard_changes(self) -> bool:
        """Ask whether unapplied changes may be discarded."""
        if not self.registry.has_unapplied_changes():
            return True
        return messagebox.askyesno(
            "Unapplied Changes",
            "You have unapplied changes. Continue and discard them?",
            parent=self,
        )

    def _on_game_selected(self, folder_name: str):
        """Handle a game being picked in the game selector."""
        if not self._confirm_discard_changes():
            self._refresh_ui()
            return

        try:
            self.registry.change_game(folder_name)
        except GameNotFoundError as e:
            logger.error(str(e))
            messagebox.showerror("Game Not Found", str(e), parent=self)
        except GameInitError as e:
            logger.error(f"Could not change game: {e}")
            messagebox.showerror(
                "Game Error",
                f"{e}\n\nCheck the game's install path in the settings file.",
                parent=self,
            )

        self._refresh_ui()

    def _open_settings(self):
        """Show the settings dialog and refresh once it closes."""
        dialog = SettingsDialog(self, self.registry)
        self.wait_window(dialog)
        if dialog.settings_changed:
            self._refresh_ui()

    def _on_close(self):
        """Save settings and close the window."""
        if not self._confirm_discard_changes():
            return

        try:
            self.registry.save()
        except LoadOrderError as e:
            logger.error(f"Could not save settings on exit: {e}")
            messagebox.showerror("Settings Error", str(e), parent=self)

        self.destroy()
