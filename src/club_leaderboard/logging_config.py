"""Logger configuration for the club leaderboard."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Send leaderboard logs to stderr, and to a weekly-rotated file if one is configured.

    Args:
        level: Minimum level (CLUB_LOG_LEVEL)
        log_file: Optional log file path (CLUB_LOG_FILE)
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, format=FILE_FORMAT, level=level, rotation="1 week", retention=4)
