"""
Centralized logging helper.

Every module gets its logger from get_logger(__name__) so formatting and
handlers are configured once per name.
"""

import logging
from pathlib import Path

from config import LOG_FILE, LOG_LEVEL

_loggers = {}

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_logger(name: str) -> logging.Logger:
    """Attach console (and optional file) handlers to a named logger."""
    logger = logging.getLogger(name)

    # Avoid duplicate handlers on reload
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, LOG_LEVEL))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if LOG_FILE:
        log_path = Path(LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create the configured logger for a module.

    Example:
        from logger import get_logger
        logger = get_logger(__name__)
    """
    if name not in _loggers:
        _loggers[name] = _setup_logger(name)
    return _loggers[name]
