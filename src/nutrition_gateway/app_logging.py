"""Logging setup for the ``nutrition_gateway`` logger tree."""

import logging

LOGGER_NAME = "nutrition_gateway"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and apply ``level``.

    Level names such as ``"debug"`` are accepted. Later calls only change the
    level, so every app factory may call this.
    """
    if isinstance(level, str):
        level = level.upper()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False
    if not package_logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(stream)
    return package_logger
