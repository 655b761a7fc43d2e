# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path

APP_LOGGER_NAME = "tasker"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    return logging.getLevelNamesMapping().get(name.strip().upper(), default)


def setup_logging(
    *,
    log_dir: Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the tasker logger with:
    - Console handler on stderr, quiet by default so command output stays clean
    - File handler with full logs for debugging

    Safe to call more than once; earlier handlers are closed and replaced.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasker.log"

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)
