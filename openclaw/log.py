"""
Logging setup for the engine.

Library modules only create module-level loggers under the ``openclaw``
namespace; applications and tools call setup_logger() once to attach a
handler.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logger(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the ``openclaw`` logger.

    Args:
        level: Logging level (name or number)
        log_file: If given, log to this file (overwritten); otherwise stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("openclaw")
    logger.setLevel(level)

    logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
