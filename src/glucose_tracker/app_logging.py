"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "glucose_tracker"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the package logger.

    Repeated calls only adjust the level, so app factories and tests can call
    this freely.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
