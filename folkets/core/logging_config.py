"""
Logging setup for the command line front end.

Library modules only create module level loggers; handlers are installed here,
once, by the application entry point.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Route log records from the folkets package to stderr."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr, level=level, force=True)
