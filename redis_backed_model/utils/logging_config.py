import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"


def setup_logging(level: int | str = logging.INFO, stream=None):
    """Configures the root logger for scripts that drive the store mapping."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    # Only one handler, whatever was installed before
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
