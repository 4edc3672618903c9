"""Logging setup shared by the storage layer and the planner service."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.settings import LOGGING, LoggingSettings


ROOT_LOGGER = "planner"


def setup_logging(config: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach a rotating file handler to the ``planner`` logger once."""

    cfg = config or LOGGING
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        Path(cfg.path).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            cfg.path,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(cfg.fmt))
        logger.addHandler(handler)
    logger.setLevel(cfg.level)
    if cfg.capture_warnings:
        # StorageWriteWarning ends up in py.warnings; mirror it into our file.
        logging.captureWarnings(True)
        warnings_logger = logging.getLogger("py.warnings")
        for handler in logger.handlers:
            if handler not in warnings_logger.handlers:
                warnings_logger.addHandler(handler)
    return logger


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")


__all__ = ["ROOT_LOGGER", "get_logger", "setup_logging"]
