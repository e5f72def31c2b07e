"""
Logging configuration for form-fields.

The library logs through the ``"form-fields"`` logger and never
configures the root logger on import. Call ``setup_logging`` to see
projection details while developing.
"""

import logging

from form_fields.config import get_config

LOGGER_NAME = "form-fields"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(
    enabled: bool = True,
    console: bool = True,
    level: str | int | None = None,
    file_path: str | None = None,
) -> logging.Logger:
    """
    Configure the form-fields logger.

    Args:
        enabled: Whether log records are emitted at all.
        console: Whether to print records to stderr.
        level: Log level; defaults to ``config.log_level``.
        file_path: Optional file to append records to.

    Example:
        >>> from form_fields.logs import setup_logging
        >>> setup_logging(level="DEBUG")
        >>> # Now every projected field is logged
    """
    if not enabled:
        disable_logging()
        return logger

    enable_logging()
    logger.setLevel(level if level is not None else get_config().log_level)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        logger.addHandler(stream)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def disable_logging() -> None:
    """Silence the form-fields logger."""
    logger.disabled = True


def enable_logging() -> None:
    """Re-enable the form-fields logger."""
    logger.disabled = False
