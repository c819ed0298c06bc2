"""
Logging setup for the demo.

Only the ``dating_app`` package logger is configured; the root logger
is never touched.  The level comes from ``Settings`` unless the caller passes
one explicitly, and ``DEBUG=1`` always wins.  Records still propagate
to the root logger.
"""

import logging
from typing import Optional

from .config import Settings, settings as default_settings

PACKAGE_LOGGER = "dating_app"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(config: Settings, level: Optional[str] = None) -> int:
    """Return the numeric level to use.

    ``config.debug`` forces ``DEBUG``.  Otherwise ``level`` (or
    ``config.log_level`` when omitted) is looked up by name; unknown
    names fall back to ``INFO``.
    """
    if config.debug:
        return logging.DEBUG
    name = (level or config.log_level).upper()
    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else logging.INFO


def setup_logging(config: Optional[Settings] = None, level: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the package logger and return it.

    A console handler is always added, plus a file handler when
    ``config.log_file`` is set.  Once the package logger has handlers,
    later calls only update its level.
    """
    config = config or default_settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(config, level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
