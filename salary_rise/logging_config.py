# salary_rise/logging_config.py

import sys
from loguru import logger

from .config import settings

# Drop the default handler so console messages are not duplicated.
logger.remove()

# Console handler, coloured, at the configured level.
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

# File handler: new file every 10 MB, files kept for 30 days, everything from DEBUG up.
if settings.LOG_FILE:
    logger.add(
        settings.LOG_FILE,
        rotation="10 MB",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )

log = logger
