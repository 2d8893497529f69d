"""
Global constants used throughout the project
"""

import logging

# Logging
LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO
