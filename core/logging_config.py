import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "WARNING", log_folder: Optional[Path] = None) -> None:
    """
    Sets up loguru for the whole application.

    Args:
        level: Minimum level shown on stderr. The console UI defaults to WARNING
               so log lines do not break up the menus.
        log_folder: If given, a daily rotating DEBUG log file is written there.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())

    if log_folder is not None:
        logger.add(
            str(Path(log_folder) / "gym_records_{time:YYYY-MM-DD}.log"),
            rotation="1 day",
            retention="30 days",
            level="DEBUG",
            encoding="utf-8",
        )
