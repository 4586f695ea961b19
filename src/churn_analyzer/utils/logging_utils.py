"""Logging configuration for the churn analyzer."""

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """Map a -v count to a logging level (0 WARNING, 1 INFO, 2+ DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int) -> None:
    """Configure the root logger for CLI runs."""
    logging.basicConfig(level=verbosity_to_level(verbosity), format=LOG_FORMAT)
