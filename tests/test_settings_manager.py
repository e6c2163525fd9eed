"""Tests for settings persistence."""

import xml.etree.ElementTree as ET

import pytest

from load_order_manager.config.manager import SettingsManager
from load_order_manager.config.schema import AUTO_GAME, DEFAULT_LANGUAGE, GameType

from .conftest import make_game_settings


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings" / "settings.xml"


def test_new_manager_uses_defaults(settings_path):
    manager = SettingsManager(settings_path)

    assert not manager.exists()
    assert manager.config.settings.game == AUTO_GAME
    assert manager.config.settings.last_game == AUTO_GAME
    assert manager.config.settings.language == DEFAULT_LANGUAGE
    assert [game.folder_name for game in manager.config.games] == [
        "Oblivion",
        "Skyrim",
        "Skyrim Special Edition",
        "Skyrim VR",
        "Fallout3",
        "FalloutNV",
        "Fallout4",
        "Fallout4VR",
    ]


def test_saved_settings_can_be_loaded(settings_path, tmp_path):
    manager = SettingsManager(settings_path)
    manager.config.settings.game = "Skyrim"
    manager.config.settings.language = "de"
    manager.config.settings.enable_debug_logging = True
    manager.store_last_game("Fallout4")
    manager.update_last_version("1.2.3")
    manager.config.games = [make_game_settings("GameA", tmp_path / "GameA")]

    manager.save()
    loaded = SettingsManager(settings_path).load()

    assert loaded.settings == manager.config.settings
    assert loaded.games == manager.config.games


def test_load_without_sections_uses_defaults(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("<LoadOrderManager version=\"1.0\"/>", encoding="utf-8")

    config = SettingsManager(settings_path).load()

    assert config.settings.game == AUTO_GAME
    assert config.settings.enable_debug_logging is False
    assert len(config.games) == 8


def test_load_game_entry_defaults(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(
        "<LoadOrderManager><Games>"
        "<Game type=\"fo4\"><Folder>Fallout4</Folder><Master>Fallout4.esm</Master></Game>"
        "</Games></LoadOrderManager>",
        encoding="utf-8",
    )

    config = SettingsManager(settings_path).load()

    game = config.games[0]
    assert game.type == GameType.FO4
    assert game.name == "Fallout4"
    assert game.game_path is None
    assert game.repo_branch == "v0.10"


def test_load_malformed_file_keeps_previous_settings(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("<LoadOrderManager><Settings>", encoding="utf-8")
    manager = SettingsManager(settings_path)
    previous = manager.config

    with pytest.raises(ET.ParseError):
        manager.load()

    assert manager.config is previous


def test_load_unknown_game_type(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(
        "<LoadOrderManager><Games>"
        "<Game type=\"morrowind\"><Folder>Morrowind</Folder></Game>"
        "</Games></LoadOrderManager>",
        encoding="utf-8",
    )

    with pytest.raises(ValueError):
        SettingsManager(settings_path).load()


def test_load_game_without_folder(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(
        "<LoadOrderManager><Games><Game type=\"tes5\"/></Games></LoadOrderManager>",
        encoding="utf-8",
    )

    with pytest.raises(ValueError):
        SettingsManager(settings_path).load()


def test_game_settings_are_copies(settings_path, tmp_path):
    manager = SettingsManager(settings_path)

    games = manager.get_game_settings()
    games[0].game_path = tmp_path

    assert manager.config.games[0].game_path is None

    manager.store_game_settings(games)
    assert manager.config.games[0].game_path == tmp_path
    games[0].game_path = None
    assert manager.config.games[0].game_path == tmp_path
