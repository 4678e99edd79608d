from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


DEFAULT_STYLE = _env_str("POSSESSIVE_DEFAULT_STYLE", "standard")
MAX_UPLOAD_BYTES = _env_int("POSSESSIVE_MAX_UPLOAD_BYTES", 1_000_000)
LOG_LEVEL = _env_str("POSSESSIVE_LOG_LEVEL", "INFO")


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""
    logger = logging.getLogger("possessive")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
