# utils/logging.py

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger for the endpoint CLI.

    Records go to stderr and, if given, to log_file. stdout is left for the
    generated URI so scripts can capture it. Calling this again replaces the
    handlers installed by the previous call.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    logging.getLogger(__name__).debug(f"Logging configured with level: {level}")


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for name."""
    return logging.getLogger(name)
