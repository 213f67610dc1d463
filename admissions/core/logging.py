"""
Logging setup

Routes loguru output to stderr at the configured level
"""
import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """Replace the default loguru sink; call once at startup"""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
        ),
        backtrace=False,
        diagnose=False,
    )
