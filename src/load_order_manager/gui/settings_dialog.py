"""Settings dialog"""

import copy
from tkinter import messagebox

import customtkinter as ctk

from ..config.schema import AUTO_GAME
from ..core.errors import GameInitError, LoadOrderError
from ..core.session_registry import SessionRegistry
from ..localization import get_language
from ..logging_config import get_logger
from .styles import (
    DETAIL_FONT,
    HEADING_FONT,
    MARGIN,
    SECTION_GAP,
    SETTINGS_DIALOG_GEOMETRY,
    TEXT_FONT,
)

logger = get_logger("settings_dialog")


class SettingsDialog(ctk.CTkToplevel):
    """Dialog for the global preferences.

    Saving goes through SessionRegistry.apply_settings(), so the installed
    games and the current game are brought up to date and the settings file
    is written.
    """

    def __init__(self, parent, registry: SessionRegistry):
        super().__init__(parent)

        self.registry = registry
        self.settings_changed = False

        # Window setup
        self.title("Settings")
        self.geometry(SETTINGS_DIALOG_GEOMETRY)
        self.resizable(False, False)

        self.transient(parent)
        self.grab_set()

        self._create_ui()
        self.focus_force()

    def _create_ui(self):
        """Create the dialog UI."""
        settings = self.registry.settings_manager.config.settings

        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=MARGIN, pady=MARGIN)

        title = ctk.CTkLabel(container, text="Settings", font=HEADING_FONT)
        title.pack(anchor="w", pady=(0, SECTION_GAP))

        # Default game
        game_label = ctk.CTkLabel(container, text="Default Game:", font=TEXT_FONT)
        game_label.pack(anchor="w")
        self.game_var = ctk.StringVar(value=settings.game)
        game_menu = ctk.CTkOptionMenu(
            container,
            values=[AUTO_GAME] + self.registry.get_installed_games(),
            variable=self.game_var,
        )
        game_menu.pack(anchor="w", fill="x", pady=(5, SECTION_GAP))

        # Language
        language_label = ctk.CTkLabel(container, text="Language:", font=TEXT_FONT)
        language_label.pack(anchor="w")
        self.language_entry = ctk.CTkEntry(container)
        self.language_entry.insert(0, settings.language)
        self.language_entry.pack(anchor="w", fill="x", pady=(5, SECTION_GAP))

        # Debug logging
        self.debug_var = ctk.BooleanVar(value=settings.enable_debug_logging)
        debug_cb = ctk.CTkCheckBox(
            container,
            text="Enable debug logging",
            variable=self.debug_var,
            font=TEXT_FONT,
        )
        debug_cb.pack(anchor="w", pady=(0, SECTION_GAP))

        hint = ctk.CTkLabel(
            container,
            text=f"Current language: {get_language()}. Changes take effect after a restart.",
            font=DETAIL_FONT,
            text_color="gray",
        )
        hint.pack(anchor="w")

        self._create_buttons(container)

    def _create_buttons(self, parent):
        """Create the dialog buttons."""
        button_frame = ctk.CTkFrame(parent, fg_color="transparent")
        button_frame.pack(fill="x", side="bottom", pady=(SECTION_GAP, 0))

        cancel_btn = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        )
        cancel_btn.pack(side="left")

        save_btn = ctk.CTkButton(
            button_frame,
            text="Save",
            width=120,
            command=self._save_and_close,
        )
        save_btn.pack(side="right")

    def _save_and_close(self):
        """Apply and save the settings, then close the dialog."""
        config = copy.deepcopy(self.registry.settings_manager.config)
        config.settings.game = self.game_var.get()
        config.settings.language = self.language_entry.get().strip() or config.settings.language
        config.settings.enable_debug_logging = self.debug_var.get()

        try:
            self.registry.apply_settings(config)
        except GameInitError as e:
            # Settings were applied and saved, only the current game is unusable
            logger.error(f"Current game could not be initialised: {e}")
            messagebox.showerror("Game Error", str(e), parent=self)
        except LoadOrderError as e:
            logger.error(f"Could not apply settings: {e}")
            messagebox.showerror("Settings Error", str(e), parent=self)
            return

        if config.settings.language != get_language():
            messagebox.showinfo(
                "Language Changed",
                "Restart the application to use the new language.",
                parent=self,
            )

        self.settings_changed = True
        self.destroy()
