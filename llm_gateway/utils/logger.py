"""
Logging utilities.

WHAT: Root logger setup for the gateway and per-module logger access
WHY: Answers go to stdout, diagnostics to stderr and a log file; secrets never
HOW: Python logging with a console handler on stderr and a file handler
"""

import logging
import sys
from pathlib import Path

from ..core.config import settings


def setup_logging(level: str | None = None, log_file: str | None = None, verbose: bool = False):
    """
    Configure the root logger.

    Args:
        level: Root level name (settings.LOG_LEVEL if omitted)
        log_file: Log file path (settings.LOG_FILE if omitted)
        verbose: Show INFO records on the console instead of only warnings
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_path = Path(log_file or settings.LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    root_logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} logging initialized (level={level_name}, file={log_path})")


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def mask_secret(secret: str | None, visible: int = 4) -> str:
    """
    Mask a credential for log output.

    Keeps the last `visible` characters of keys long enough that this does
    not reveal most of the key; shorter values are fully masked.
    """
    if not secret:
        return "<empty>"
    if len(secret) <= visible * 3:
        return "****"
    return f"****{secret[-visible:]}"
