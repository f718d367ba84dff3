"""
Logging setup for Lambda handlers and local runs.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = '%(levelname)s - %(message)s'

# Loggers that would write request URLs (and the Mailgun API key) at INFO
QUIET_LOGGERS = ('httpx', 'httpcore')


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    AWS Lambda installs its own handler; a console handler is only added
    when none is present (local testing).

    Args:
        level: Log level name; defaults to LOG_LEVEL env var, then INFO

    Returns:
        logging.Logger: The root logger
    """
    level_name = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        formatter = logging.Formatter(LOG_FORMAT)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
