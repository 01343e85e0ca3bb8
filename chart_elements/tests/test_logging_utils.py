from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from chart_elements import logging_utils


def test_resolve_log_level() -> None:
    assert logging_utils.resolve_log_level(True) == logging.DEBUG
    assert logging_utils.resolve_log_level(False) == logging.INFO


def test_rotating_handler_retention(tmp_path) -> None:
    handler = logging_utils.build_rotating_file_handler(tmp_path / "logs", "x.log", retention=0)
    try:
        assert isinstance(handler, RotatingFileHandler)
        assert handler.backupCount == 0
        assert (tmp_path / "logs").is_dir()
    finally:
        handler.close()


def test_configure_logger_writes_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(logging_utils.PROPAGATE_ENV_VAR, raising=False)
    logger = logging_utils.configure_logger(debug_enabled=True, log_dir=tmp_path)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    logger.debug("hello from test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from test" in (tmp_path / "chart-elements.log").read_text(encoding="utf-8")


def test_env_enables_propagation(monkeypatch) -> None:
    monkeypatch.setenv(logging_utils.PROPAGATE_ENV_VAR, "yes")
    logger = logging_utils.configure_logger()
    assert logger.propagate is True
    assert logger.level == logging.INFO


def test_configure_logger_twice_keeps_one_file_handler(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(logging_utils.PROPAGATE_ENV_VAR, raising=False)
    logging_utils.configure_logger(log_dir=tmp_path)
    logger = logging_utils.configure_logger(log_dir=tmp_path)
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    logger.info("written once")
    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / logging_utils.LOG_FILENAME).read_text(encoding="utf-8")
    assert text.count("written once") == 1
