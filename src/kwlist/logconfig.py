import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "kwlist"

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> str:
    """Get the logging level for kwlist from ``KWLIST_LOGGING_LEVEL``, defaulting
    to ``WARNING``."""
    return os.getenv("KWLIST_LOGGING_LEVEL", "WARNING")


def get_format() -> str:
    """Get the log record format for kwlist from ``KWLIST_LOGGING_FORMAT``."""
    return os.getenv("KWLIST_LOGGING_FORMAT", DEFAULT_FORMAT)


def get_handler(
    level: Optional[str] = None, fmt: Optional[str] = None
) -> logging.Handler:
    """Get the handler for kwlist log records.

    Records are discarded unless ``KWLIST_USE_DEV_LOGGER`` is ``true``, in which case
    they are written to stderr. Applications embedding the library are expected to
    attach their own handlers."""
    handler: logging.Handler = (
        logging.StreamHandler()
        if os.getenv("KWLIST_USE_DEV_LOGGER", "").lower() == "true"
        else logging.NullHandler()
    )
    handler.setFormatter(logging.Formatter(fmt or get_format()))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: Optional[str] = None, replace: bool = False
) -> logging.Logger:
    """Configure and return the ``kwlist`` logger, which is the parent of every
    module logger in the library.

    If `replace` is True, handlers attached to the logger by earlier calls are
    removed first."""
    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    if replace:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
    logger.setLevel(level)
    logger.addHandler(get_handler(level=level, fmt=fmt))
    return logger
