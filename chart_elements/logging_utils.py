from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "ModernOverlay.ChartElements"
PROPAGATE_ENV_VAR = "CHART_ELEMENTS_PROPAGATE_LOGS"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_FILENAME = "chart-elements.log"


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def propagation_requested() -> bool:
    return os.environ.get(PROPAGATE_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def configure_logger(
    *,
    debug_enabled: bool = False,
    log_dir: Optional[Path] = None,
    retention: int = 5,
) -> logging.Logger:
    """Set up the package logger, optionally writing to a rotating log file."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug_enabled))
    # Opt-in propagation for environments/tests that want logs upstream.
    logger.propagate = propagation_requested()
    formatter = logging.Formatter(LOG_FORMAT)
    if log_dir is not None:
        log_path = (log_dir / LOG_FILENAME).resolve()
        already_attached = any(
            isinstance(existing, RotatingFileHandler)
            and Path(existing.baseFilename).resolve() == log_path
            for existing in logger.handlers
        )
        if not already_attached:
            handler = build_rotating_file_handler(
                log_dir,
                LOG_FILENAME,
                retention=retention,
                formatter=formatter,
            )
            logger.addHandler(handler)
    elif not logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        logger.addHandler(stream)
    return logger
