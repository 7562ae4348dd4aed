"""Logging setup shared by the CLI and the API server.

Everything logs under the ``sprintsync`` logger tree, to a size-rotated file
and optionally to stderr.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR_ENV = "SPRINTSYNC_LOG_DIR"
LOG_LEVEL_ENV = "SPRINTSYNC_LOG_LEVEL"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "sprintsync.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "sprintsync"

_SECRET_PATTERNS = [
    (re.compile(r"perm:[A-Za-z0-9=._-]+"), "[YOUTRACK_TOKEN]"),
    (re.compile(r"Bearer [A-Za-z0-9:=._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"token=[A-Za-z0-9:._-]+"), "token=[REDACTED]"),
]


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``sprintsync`` logger.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_dir: Where the log file goes. Falls back to SPRINTSYNC_LOG_DIR,
                 then to ./logs. Created if missing.
        log_file: Name of the log file inside log_dir.
        max_bytes: Size at which the file is rotated.
        backup_count: How many rotated files to keep.
        level: Level name such as DEBUG or WARNING. Falls back to
               SPRINTSYNC_LOG_LEVEL, then INFO. Unknown names mean INFO.
        console: Also write to stderr.

    Returns:
        The configured ``sprintsync`` logger.
    """
    if log_dir is None:
        log_dir = os.environ.get(LOG_DIR_ENV, DEFAULT_LOG_DIR)
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    while logger.handlers:
        stale = logger.handlers.pop()
        stale.close()

    log_path = directory / log_file
    _attach(
        logger,
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        ),
        numeric_level,
    )
    if console:
        _attach(logger, logging.StreamHandler(), numeric_level)

    logger.info("sprintsync logging initialized (level=%s, file=%s)", level_name, log_path)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``sprintsync.<name>`` logger, e.g. ``get_logger("cli")``."""
    prefix = f"{ROOT_LOGGER}."
    return logging.getLogger(name if name.startswith(prefix) else prefix + name)


def truncate_output(output: str, max_length: int = 500) -> str:
    """Cut text to max_length characters, noting how much was dropped."""
    overflow = len(output) - max_length
    if overflow <= 0:
        return output
    return f"{output[:max_length]}\n... [truncated, {overflow} more chars]"


def sanitize_for_log(text: str) -> str:
    """Mask YouTrack tokens and bearer credentials in text bound for logs or errors."""
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text
