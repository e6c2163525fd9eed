"""Shared fixtures for the test suite."""

import copy
import dataclasses
import logging
from pathlib import Path

import pytest

from load_order_manager.config.paths import AppPaths
from load_order_manager.config.schema import (
    DEFAULT_LANGUAGE,
    AppConfiguration,
    GameSettings,
    GameType,
    Settings,
)
from load_order_manager.core.game import Game
from load_order_manager.core.session_registry import SessionRegistry
from load_order_manager.localization import set_locale
from load_order_manager.logging_config import LOGGER_NAME


def make_game_settings(folder_name: str, game_path: Path | None = None) -> GameSettings:
    """Create settings for a test game whose master is <folder>.esm."""
    return GameSettings(
        type=GameType.TES5,
        name=f"{folder_name} Game",
        folder_name=folder_name,
        master=f"{folder_name}.esm",
        repo_url=f"https://example.com/{folder_name.lower()}.git",
        game_path=game_path,
    )


class FakeSettingsStore:
    """In-memory stand-in for the SettingsManager."""

    def __init__(self, games: list[GameSettings], settings: Settings | None = None):
        self.config = AppConfiguration(settings=settings or Settings(), games=games)
        self.saved_to: list[Path | None] = []

    def exists(self) -> bool:
        return False

    def load(self, path=None) -> AppConfiguration:
        return self.config

    def save(self, path=None) -> None:
        self.saved_to.append(path)

    def apply(self, config: AppConfiguration) -> None:
        self.config = config

    def get_game_settings(self) -> list[GameSettings]:
        return [dataclasses.replace(game) for game in self.config.games]

    def store_game_settings(self, games: list[GameSettings]) -> None:
        self.config.games = copy.deepcopy(games)

    def store_last_game(self, folder_name: str) -> None:
        self.config.settings.last_game = folder_name

    def update_last_version(self, version: str) -> None:
        self.config.settings.last_version = version


class FakeDetector:
    """Detector that treats a fixed set of folder names as installed.

    Games without a configured path get a folder created under install_root.
    """

    def __init__(self, install_root: Path, installed: list[str]):
        self.install_root = install_root
        self.installed = {folder.casefold() for folder in installed}
        self.checked: list[str] = []

    def is_installed(self, settings: GameSettings) -> bool:
        self.checked.append(settings.folder_name)
        return settings.folder_name.casefold() in self.installed

    def construct(self, settings: GameSettings, data_dir: Path) -> Game:
        game_path = settings.game_path
        if game_path is None:
            game_path = self.install_root / settings.folder_name
            game_path.mkdir(parents=True, exist_ok=True)
        return Game(dataclasses.replace(settings, game_path=game_path), data_dir)


@pytest.fixture(autouse=True)
def reset_logging():
    """Close any log handlers a test opened."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_locale(tmp_path):
    """Go back to untranslated English after each test."""
    yield
    set_locale(DEFAULT_LANGUAGE, tmp_path)


@pytest.fixture
def paths(tmp_path):
    """Application paths inside the test's temporary directory."""
    return AppPaths(tmp_path / "data")


@pytest.fixture
def install_root(tmp_path):
    root = tmp_path / "games"
    root.mkdir()
    return root


@pytest.fixture
def store():
    """Settings store knowing three games, GameA, GameB and GameC."""
    return FakeSettingsStore([
        make_game_settings("GameA"),
        make_game_settings("GameB"),
        make_game_settings("GameC"),
    ])


@pytest.fixture
def detector(install_root):
    """Detector reporting GameA, GameB and GameC as installed."""
    return FakeDetector(install_root, ["GameA", "GameB", "GameC"])


@pytest.fixture
def registry(store, detector, paths):
    """Registry that has been started up with all three games installed."""
    registry = SessionRegistry(store, detector, paths)
    registry.init()
    return registry
