"""
Logging setup for the headless driver.

Library modules only ever call ``logging.getLogger(__name__)``; configuring
handlers is left to entry points (``scripts/main.py``) via setup_logging.
"""
from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str | int = "INFO",
    log_file: str | Path | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """
    Configure the root logger with a console handler and, optionally, a
    rotating file handler (1 MB per file, 5 backups).

    Existing root handlers are removed first so repeated calls do not
    duplicate output.
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        "Logging initialized (level=%s, file=%s)", logging.getLevelName(root.level), log_file
    )
