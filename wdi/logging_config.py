"""
Logging setup shared by the wdi modules.

Console output is color-coded with colorlog; a plain-text file log is
added when a log directory or file is given.
"""

from __future__ import annotations

import logging
import os
import sys

import colorlog

from .config import LOG_DIR, LOG_LEVEL


def create_logger(
    name: str | None = None,
    log_level: int | str = LOG_LEVEL,
    log_dir: str | None = LOG_DIR,
    log_file: str | None = None,
) -> logging.Logger:
    """Color-coded console logger, plus a plain-text file log when a directory or file is given."""
    logger = colorlog.getLogger(name or "wdi")
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = colorlog.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s[%(levelname)s]%(reset)s "
            "%(blue)s[%(name)s]%(reset)s "
            "%(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    )
    logger.addHandler(console_handler)

    if log_dir or log_file:
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        if not log_file:
            log_file = "wdi.log"
        if log_dir:
            log_file = os.path.join(log_dir, log_file)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
