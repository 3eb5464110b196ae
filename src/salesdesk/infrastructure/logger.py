import logging
import sys
from logging.handlers import RotatingFileHandler

from salesdesk.infrastructure import settings


def setup_logger(name: str | None = None, log_level: str | int | None = None) -> logging.Logger:
    """
    Sets up the package logger with both console (StreamHandler) and file (RotatingFileHandler) output.
    """
    level = log_level if log_level is not None else settings.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent adding handlers multiple times if logger is already set up
    if logger.handlers:
        return logger

    # Formatters
    console_format = logging.Formatter("%(levelname)s: %(message)s")
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # 1. Console Handler (stderr keeps command output clean)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # 2. File Handler
    log_dir = settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "salesdesk.log"

    file_handler = RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger
