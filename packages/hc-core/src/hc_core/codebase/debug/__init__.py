import logging
import os
from functools import wraps

_LOGGER_NAME = "hc"
_logger = logging.getLogger(_LOGGER_NAME)
_SPY_LOGGER = logging.getLogger("hc.spy")

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logger(level: int = logging.WARNING) -> None:
    """
    Ensure the hc logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    if not _logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(level)


def spy_enabled() -> bool:
    val = os.getenv("HC_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def spy_trace(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if spy_enabled():
            _SPY_LOGGER.debug("Entering %s", func.__qualname__)
        result = func(*args, **kwargs)
        if spy_enabled():
            _SPY_LOGGER.debug("Exiting %s -> %d finding(s)", func.__qualname__, len(result))
        return result
    return wrapper
