"""
Utility functions for shot_catalog.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Libraries that log every request at INFO/DEBUG
NOISY_LOGGERS = ('urllib3', 'requests')


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Configure the root logger for command-line use.

    Log records go to stderr so that listings printed on stdout stay
    parseable. An optional log file receives the same records.

    Args:
        level: Logging level name or number
        log_file: Optional path of a file to append log records to

    Example:
        >>> setup_logging('DEBUG', '~/.shot_catalog/shot_catalog.log')
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
