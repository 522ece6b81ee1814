"""ロギング設定のテスト"""
import logging

import pytest
from hotaru import config
from hotaru.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_hotaru_logger():
    yield
    logger = logging.getLogger("hotaru")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_default_level_follows_debug_mode(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_MODE", False)
    assert setup_logging().level == logging.INFO

    monkeypatch.setattr(config, "DEBUG_MODE", True)
    assert setup_logging().level == logging.DEBUG


def test_explicit_debug_overrides_config(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_MODE", True)
    assert setup_logging(debug=False).level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_debug_records_go_only_to_log_file(tmp_path):
    """ログファイル指定時: DEBUGはファイルのみ、コンソールはINFO以上"""
    log_file = tmp_path / "hotaru.log"
    logger = setup_logging(debug=True, log_file=str(log_file))

    console, file_handler = logger.handlers
    assert console.level == logging.INFO
    assert file_handler.level == logging.DEBUG

    logging.getLogger("hotaru.world").debug("frame=60 populations=[3]")
    assert "frame=60 populations=[3]" in log_file.read_text(encoding="utf-8")


def test_console_gets_debug_without_log_file():
    logger = setup_logging(debug=True)
    (console,) = logger.handlers
    assert console.level == logging.DEBUG
