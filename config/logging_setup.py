"""Centralized logging configuration."""

import logging
import os
from typing import Optional

from config.defaults import LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL, LOG_FORMAT


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger with a console handler.

    The level comes from the argument, then the environment, then the default.
    Calling this more than once does not add duplicate handlers.
    """
    level_name = (log_level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(h, "_warehouse_planner", False) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._warehouse_planner = True
        root_logger.addHandler(handler)

    return root_logger
