"""
Logging helpers shared by every Weatherline module.

Usage:
    from weatherline.utils.log_util import app_logger

    logger = app_logger(__name__)
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def app_logger(name: str, level: str = None) -> logging.Logger:
    """
    Return a configured logger for the given module name.

    Handlers are attached once per logger, so repeated calls (e.g. on a
    Streamlit rerun) do not duplicate output.

    :param name: Logger name, normally ``__name__``.
    :param level: Optional level name; defaults to the LOG_LEVEL environment
        variable or INFO.
    :return: logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel((level or os.environ.get("LOG_LEVEL", "INFO")).upper())
    return logger
