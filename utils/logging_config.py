"""
Logging configuration utility for the polysum CLI and services.
"""
import logging
import sys
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(threadName)s - %(module)s::%(funcName)s - %(message)s'


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a -v count to a logging level.

    Args:
        verbosity (int): Verbosity level (0=off, 1=info, 2+=debug).

    Returns:
        int: Logging level; above CRITICAL when verbosity is 0.
    """
    if verbosity <= 0:
        return logging.CRITICAL + 1  # disables all log output
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, logfile: Optional[str] = None) -> None:
    """
    Configure the root logger for a polysum run.

    Console logs go to stderr so they never mix with digest lines on stdout.
    A log file always records at least INFO, even when the console is silent.

    Args:
        verbosity (int): Verbosity level (0=off, 1=info, 2=debug).
        logfile (str, optional): Path to log file. If None, logs only to console.

    Returns:
        None
    """
    console_level = verbosity_to_level(verbosity)
    file_level = min(console_level, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger()
    logger.handlers.clear()
    logger.setLevel(file_level if logfile else console_level)

    if verbosity > 0:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(console_level)
        logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level)
        logger.addHandler(file_handler)

    logger.info(f"Command line: {' '.join(sys.argv)}")
    logger.info(f"Current working directory: {os.getcwd()}")
