"""
Logging Setup
==============
The game owns the terminal, so diagnostics go to a file or nowhere.
"""

import logging

from .config import GameConfig

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def configure_logging(config: GameConfig) -> logging.Logger:
    """Attach a handler to the package logger according to the config."""
    logger = logging.getLogger('wavebreak')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.log_file:
        handler = logging.FileHandler(config.log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(config.log_level.upper())
    logger.propagate = False
    return logger
