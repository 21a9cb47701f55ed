"""
Logging setup for the server time service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, so tests and repeated ``create_app`` calls
do not stack handlers.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Args:
        level (str): Logging level name, case insensitive. Unknown names
            fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)
