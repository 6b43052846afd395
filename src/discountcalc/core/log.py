"""Logging setup for the calculator (console only; the core keeps no files)."""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger with a single stdout handler.

    Args:
        level: Logging level for the ``discountcalc`` logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("discountcalc")
    logger.setLevel(level)

    # Clear existing handlers so repeated calls do not duplicate output
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger
