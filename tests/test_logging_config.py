import logging

import pytest
from rich.logging import RichHandler

from cfpulse.logging_config import build_logging_config, resolve_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_log_dir(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging()

    assert (tmp_path / "logs" / "cfpulse.log").exists()
    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_invalid_level_falls_back_to_info(tmp_path, monkeypatch, capsys, restore_root_logger):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    setup_logging()

    assert restore_root_logger.level == logging.INFO
    assert "Invalid LOG_LEVEL 'chatty'" in capsys.readouterr().err


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", (logging.DEBUG, True)), (" Warning ", (logging.WARNING, True)), ("loud", (logging.INFO, False))],
)
def test_resolve_level(raw, expected):
    assert resolve_level(raw) == expected


def test_build_logging_config_quiets_http_loggers(tmp_path):
    config = build_logging_config(str(tmp_path), logging.DEBUG)

    assert config["handlers"]["file"]["filename"] == str(tmp_path / "cfpulse.log")
    assert config["root"]["handlers"] == ["file", "console"]
    assert config["loggers"]["httpx"]["level"] == logging.WARNING
    assert config["loggers"]["httpcore"]["level"] == logging.WARNING
    assert build_logging_config(str(tmp_path), logging.ERROR)["loggers"]["httpx"]["level"] == logging.ERROR
