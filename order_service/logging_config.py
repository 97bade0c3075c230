"""
logging_config.py — Centralized Logging Configuration for the Order API

This module configures unified logging behavior for the entire service.
All modules log through the standard `logging` package so that log lines
share one format and one set of handlers.

Features:
    • Console output on stdout (picked up by the container platform)
    • Optional additional log file (LOG_FILE)
    • Process ID tagging for multi-process visibility
    • Reduced verbosity for uvicorn's own access log
"""

import logging
import sys

from .config import get_log_file, get_log_level

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s'


def setup_logging():
    """
    Configures the global logging system for the service.

    The configuration includes:
        - Log level: taken from LOG_LEVEL (default INFO)
        - Log format: timestamp, log level, process ID, and message
        - Output destinations:
            1. Console (stdout): real-time logs, Docker/Cloud Run compatible
            2. File: only when LOG_FILE is set
        - uvicorn.access lowered to WARNING, since every request is
          already logged by the request logging middleware
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = get_log_file()
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=get_log_level(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name):
    """
    Returns a logger instance for a given module or component name.

    Args:
        name (str): The logger name, typically the module's __name__.

    Returns:
        logging.Logger: A logger that follows the global format and handlers.
    """
    return logging.getLogger(name)
