"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach the playlist console handler and the rotating log file to the ``tracklist`` logger.
Why: Commands reconfigure verbosity at startup without touching feature modules.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from tracklist.config.paths import default_log_file

from .handlers import PlaylistRichHandler

LOGGER_NAME: Final[str] = "tracklist"
LOG_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5

DEFAULT_LOG_FILE: Final[Path] = default_log_file()


def _console_handler(level: int, console: Console | None) -> PlaylistRichHandler:
    # Playback output owns stdout; log lines go to stderr.
    handler = PlaylistRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> RotatingFileHandler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the shared ``tracklist`` logger, replacing earlier handlers.

    Args:
        log_file: Rotating log destination; ``None`` keeps logging on the console only.
        console_level: Threshold for console output.
        file_level: Threshold for the log file.
        console: Console to render on; defaults to a stderr console.

    Returns:
        logging.Logger: The reconfigured logger.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for stale in list(app_logger.handlers):
        app_logger.removeHandler(stale)
        stale.close()

    app_logger.addHandler(_console_handler(console_level, console))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))
    return app_logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
