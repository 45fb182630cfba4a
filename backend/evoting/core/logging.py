"""
Logging configuration for the voting backend.
"""
import sys
from typing import Optional

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, file_level: str = "DEBUG"):
    """
    Configure loguru sinks.

    Console output goes to stderr at ``level``. When ``log_file`` is set a
    second sink writes there at ``file_level``, rotated at 10 MB.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=file_level.upper(),
            rotation="10 MB",
            retention=5,
            enqueue=True,
        )
        logger.info("Logging to {} at {}", log_file, file_level.upper())

    return logger
