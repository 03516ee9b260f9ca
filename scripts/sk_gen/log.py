"""Logging helpers for the script generator."""

import logging
from typing import Optional

_LOGGER_NAME = 'sk_gen'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the sk_gen hierarchy"""
    full_name = f'{_LOGGER_NAME}.{name}' if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the sk_gen logger (for driver scripts)"""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Drop handlers from a previous call so output is not duplicated
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('[sk_gen] %(levelname)s %(message)s'))
    logger.addHandler(handler)
    return logger
