"""File logging for the session.

The terminal belongs to the UI, so records go to a log file under the
platform's user log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "spotfind.log"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int) -> Path | None:
    """Route ``spotfind`` loggers to the log file at ``level``.

    Returns the log path, or ``None`` when the file cannot be opened and
    records are discarded instead.
    """
    package_logger = logging.getLogger(APP_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    log_path: Path | None = LOG_PATH
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
        log_path = None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return log_path
