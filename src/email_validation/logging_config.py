"""
Logging configuration for the validation service.

Uses loguru. Nothing is configured at import time: the API lifespan (or a
script) calls ``setup_logging`` once at start-up.
"""

import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from email_validation.config import settings


def setup_logging(
    level: str | None = None,
    log_dir: Path | None = None,
    rotation: str = "00:00",
    retention: str = "2 weeks",
) -> Path | None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the daily log file. None logs to stderr only.
        rotation: Log rotation setting (e.g., "10 MB", "00:00")
        retention: Log retention setting (e.g., "1 week", "10 files")

    Returns:
        Path of the log file, or None when only stderr is used
    """
    level = level or settings.log_level

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
    )

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"app_{datetime.now():%Y%m%d}.log"

        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            enqueue=True,
        )

    logger.info(f"Logging configured: level={level}")
    return log_file
