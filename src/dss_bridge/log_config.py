# src/dss_bridge/log_config.py
import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "DSS_BRIDGE_LOG_LEVEL"


def setup_logging(level=None):
    """ Configures basic logging to stdout. """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger() # Get the root logger

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.debug("Logging configured.")


PACKAGE_LOGGER_NAME = "dss_bridge"


def set_package_log_level(level):
    """Sets the level of the dss_bridge loggers only; the root logger is left alone."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)
