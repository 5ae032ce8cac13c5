import logging
import sys

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAME = "testmaker"
LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'


def get_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Return a logger that writes one JSON object per line to stdout.

    Values passed through `extra=` become top-level keys of the record.
    Calling it again for the same name does not add a second handler.
    """
    named = logging.getLogger(name)
    named.setLevel(log_level)
    named.propagate = False

    if not named.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter(LOG_FORMAT))
        named.addHandler(handler)

    return named


def set_log_level(log_level: str) -> None:
    """Apply the configured level to the shared application logger."""
    logger.setLevel(log_level.upper())


logger = get_logger(LOGGER_NAME)
