"""Tests for logging and localization setup."""

import logging

from load_order_manager import localization
from load_order_manager.logging_config import (
    LOGGER_NAME,
    enable_debug_logging,
    get_logger,
    setup_logging,
)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    logger = setup_logging(log_file)
    get_logger("tests").warning("Something happened")
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == LOGGER_NAME
    assert "Something happened" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(tmp_path / "first.log")
    logger = setup_logging(tmp_path / "second.log", debug=True)

    assert len(logger.handlers) == 2
    assert any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename.endswith("second.log")
        for handler in logger.handlers
    )


def test_enable_debug_logging():
    logger = logging.getLogger(LOGGER_NAME)

    enable_debug_logging(True)
    assert logger.level == logging.DEBUG
    assert get_logger("tests").isEnabledFor(logging.DEBUG)

    enable_debug_logging(False)
    assert logger.level == logging.WARNING
    assert not get_logger("tests").isEnabledFor(logging.INFO)


def test_missing_translations_fall_back_to_source_text(tmp_path):
    localization.set_locale("de", tmp_path)

    assert localization.get_language() == "de"
    assert localization.translate("Error: Settings parsing failed. {error}") == (
        "Error: Settings parsing failed. {error}"
    )

    localization.set_locale("en", tmp_path)
