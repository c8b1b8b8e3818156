"""Package-wide logger."""
import logging
import os
import sys


LOGGER_NAME = "string_calculator"
LOG_LEVEL_ENV = "STRING_CALCULATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Create the package logger writing to stderr.

    The level defaults to WARNING so that the interactive prompt on stdout
    stays readable; set STRING_CALCULATOR_LOG_LEVEL=DEBUG to trace every line.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    # Configure only once, even if the module is reloaded
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    log.setLevel(getattr(logging, level_name, logging.WARNING))
    return log


logger = build_logger()
