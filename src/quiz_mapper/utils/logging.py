"""Logging for the quiz_mapper package.

Handlers are attached to the ``quiz_mapper`` logger rather than the root
logger, so embedding the analyzer in another application does not change
that application's logging. Records still propagate to the root logger.
"""

import logging
import sys
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "quiz_mapper"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_loggers: dict[str, logging.Logger] = {}
_handlers: list[logging.Handler] = []


def _parse_level(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: dict[str, Any] | None = None, *, verbose: bool = False) -> logging.Logger:
    """Configure the package logger from the ``logging`` config section.

    Config keys: level (name or number), format, file (optional path).
    The first call installs a stdout handler plus the optional file handler
    and sets the level. Later calls leave the setup alone unless ``verbose``
    asks for DEBUG, so the CLI and the batch engine can both call this.
    """
    config = config or {}
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handlers:
        if verbose:
            logger.setLevel(logging.DEBUG)
        return logger
    logger.setLevel(logging.DEBUG if verbose else _parse_level(config.get("level")))

    formatter = logging.Formatter(config.get("format") or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    _handlers.append(logging.StreamHandler(sys.stdout))
    log_file = config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in _handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a cached logger; names outside the package are nested under it."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]
