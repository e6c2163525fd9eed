"""Load Order Manager - Game selection and settings manager for Bethesda games.

This application provides:
    - Detection of installed Oblivion, Skyrim, Fallout 3, Fallout: New Vegas
      and Fallout 4 games (including Special Edition and VR releases)
    - Persistence of per-game settings and global preferences
    - Selection of the game the rest of the application operates against
    - Support for command line game selection and debug logging

The application uses CustomTkinter for a modern GUI interface and stores
its data in %LOCALAPPDATA%/LoadOrderManager (or $XDG_DATA_HOME on Linux).

Package Structure:
    app: Main application entry point and orchestrator
    config: Settings persistence, paths and data models
    core: Game sessions, game detection and the session registry
    gui: User interface components (main window, settings dialog)

Quick Start:
    Run from command line::

        load-order-manager --game Skyrim

    Or programmatically::

        from load_order_manager.app import main
        main()

Configuration:
    - Settings file: <data dir>/settings.xml
    - Log file: <data dir>/LoadOrderManagerDebugLog.txt
    - Per-game data: <data dir>/<game folder>/
"""

__version__ = "1.0.0"
__app_name__ = "Load Order Manager"
