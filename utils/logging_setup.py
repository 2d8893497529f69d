"""
Logging configuration for scripts and interactive sessions.

Library modules only create loggers; handlers are attached here, on demand.
"""

import logging

from constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level: int | str = DEFAULT_LOG_LEVEL, debug: bool = False) -> None:
    """Installs a root handler with the project format. `debug` overrides level."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
