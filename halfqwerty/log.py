"""Logging for halfqwerty: the TRACE level and the CLI handler setup.

Levels (ascending):
    TRACE =  5  every raw key event, every ignored chord transition
    DEBUG = 10  chord open/close, sticky latches, typing tests
    INFO  = 20  CLI startup (default)

Library modules only do::

    import halfqwerty.log  # registers TRACE level and logger.trace()
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")

and never install handlers; ``setup_logging`` is for the CLI.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "halfqwerty"
DEFAULT_LOG_FILE = "~/.halfqwerty.log"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"

_configured: logging.Logger | None = None


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Patch Logger class once at import time
logging.Logger.trace = _trace  # type: ignore[attr-defined]


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach a rotating file handler and a stderr handler to the package logger.

    The file gets everything from DEBUG up (TRACE too when *debug*); the
    console only shows warnings unless *debug* is set.  Calling it again
    returns the already configured logger.
    """
    global _configured

    if _configured is not None:
        return _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(TRACE if debug else logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    log_path = Path(os.path.expanduser(log_file or DEFAULT_LOG_FILE))
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)
    else:
        file_handler.setLevel(TRACE if debug else logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    _configured = logger
    return logger


def reset_logging() -> None:
    """Detach and close the handlers installed by ``setup_logging``."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    _configured = None
