import logging
import os
import sys
from typing import Optional, TextIO

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(message)s'
DEFAULT_LEVEL = 'INFO'

_LEVEL_ALIASES = {'WARN': 'WARNING'}


def resolve_level(level: Optional[str] = None) -> int:
    """
    Translate a level name into a logging level number.

    Falls back to the LOG_LEVEL environment variable and then to INFO. Unknown names also resolve to INFO.

    Args:
        level (Optional[str]): Level name such as 'debug', 'WARN' or 'ERROR'.

    Returns:
        int: The matching logging level.
    """
    name = (level or os.getenv('LOG_LEVEL') or DEFAULT_LEVEL).strip().upper()
    name = _LEVEL_ALIASES.get(name, name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def build_logger(name: str = 'shop_e2e', level: Optional[str] = None,
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Build the logging handle that is passed into browser sessions and fixtures.

    Calling it again with the same name reconfigures the logger in place, so handlers never pile up
    between builds. Records do not propagate to the root logger.

    Args:
        name (str): Logger name.
        level (Optional[str]): Level name, see resolve_level.
        stream (Optional[TextIO]): Where to write records. Defaults to stderr.

    Returns:
        logging.Logger: A configured logger.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger
