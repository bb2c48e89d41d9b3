import importlib
import logging
from pathlib import Path

import config.logger as logger_module
import config.settings as settings_module


def test_logger_writes_to_configured_file():
    [file_handler] = [
        h for h in logger_module.logger.handlers if isinstance(h, logging.FileHandler)
    ]

    assert Path(file_handler.baseFilename).name == settings_module.LOG_FILE_NAME
    assert Path(file_handler.baseFilename).parent.name == "logs"


def test_logger_level_follows_settings(monkeypatch):
    monkeypatch.setattr(settings_module, "LOG_LEVEL", "DEBUG")
    try:
        assert importlib.reload(logger_module).logger.level == logging.DEBUG
    finally:
        monkeypatch.undo()
        importlib.reload(logger_module)


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(settings_module, "LOG_LEVEL", "LOUD")
    try:
        assert importlib.reload(logger_module).logger.level == logging.INFO
    finally:
        monkeypatch.undo()
        importlib.reload(logger_module)


def test_reload_does_not_duplicate_handlers():
    before = len(logger_module.logger.handlers)
    importlib.reload(logger_module)
    assert len(logger_module.logger.handlers) == before
