import sys

from loguru import logger


def setup_logging(config) -> None:
    """Configure Loguru once, based on LOG_LEVEL and VERBOSE."""
    level = "DEBUG" if config.VERBOSE else str(config.LOG_LEVEL).upper()

    logger.remove()  # drop default handler(s) so repeated calls don't duplicate output
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )
