"""Look of the main window and settings dialog.

Widgets take their text styles, status colours and spacing from here so the
two windows stay consistent.
"""

# (family, size[, weight]) for each kind of text
HEADING_FONT = ("Segoe UI", 18, "bold")
SECTION_FONT = ("Segoe UI", 14, "bold")
TEXT_FONT = ("Segoe UI", 12)
DETAIL_FONT = ("Segoe UI", 10)

# Status line and detail colours; tuples are (light mode, dark mode)
READY_COLOR = ("gray10", "gray90")
UNAPPLIED_COLOR = "#ffc107"
ERROR_COLOR = "#dc3545"
DETAIL_COLOR = "#6c757d"

# Outer margin of a window, and the gaps between and inside its sections
MARGIN = 30
SECTION_GAP = 18
ROW_GAP = 10

MAIN_WINDOW_GEOMETRY = "800x560"
MAIN_WINDOW_MIN_SIZE = (640, 440)
SETTINGS_DIALOG_GEOMETRY = "520x420"
