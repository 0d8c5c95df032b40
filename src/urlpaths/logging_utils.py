from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from urlpaths.config import load_settings

_CONFIGURED_ATTR = "_urlpaths_logging_configured"
_DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_urlpaths_logging(
    log_file: Path | None = None,
    *,
    level: int | None = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach stderr (and optionally rotating file) handlers to the package logger.

    Without an explicit ``level`` the ``URLPATHS_LOG_LEVEL`` setting is used.
    Only the first call has an effect. Returns the ``urlpaths`` logger.
    """
    logger = logging.getLogger("urlpaths")
    if getattr(logger, _CONFIGURED_ATTR, False):
        return logger

    formatter = logging.Formatter(_DEFAULT_LOG_FORMAT)
    handlers: list[logging.Handler] = []

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as exc:
            sys.stderr.write(f"Failed to open urlpaths log file at {log_file}: {exc}\n")

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    handlers.append(stderr_handler)

    logger.handlers.clear()
    if level is None:
        level = load_settings(use_dotenv=False).log_level
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)

    setattr(logger, _CONFIGURED_ATTR, True)
    return logger


def reset_urlpaths_logging() -> None:
    logger = logging.getLogger("urlpaths")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    if hasattr(logger, _CONFIGURED_ATTR):
        delattr(logger, _CONFIGURED_ATTR)


__all__ = ["configure_urlpaths_logging", "reset_urlpaths_logging"]
