"""Diagnostic logging setup for flashquiz."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "WARNING", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the `flashquiz` namespace logger.

    Console diagnostics go to stderr; stdout carries only the operator
    dialogue. Calling this again replaces the previous handlers.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file that also receives detailed log records.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger("flashquiz")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if level.upper() == "DEBUG":
        console_fmt = logging.Formatter(
            fmt=DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger
