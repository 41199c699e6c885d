import logging
import os
import sys
from functools import wraps

_ROOT_LOGGER = logging.getLogger("closmesh")
_SPY_LOGGER = logging.getLogger("closmesh.spy")
_HANDLER: logging.StreamHandler | None = None


def configure_logger(level: int = logging.WARNING) -> None:
    """
    Attach a stderr handler to the closmesh logger and set its level.
    Each call replaces the handler installed by the previous call, so the
    handler writes to the current sys.stderr.
    """
    global _HANDLER
    if _HANDLER is not None:
        _ROOT_LOGGER.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    _HANDLER.setFormatter(formatter)
    _ROOT_LOGGER.addHandler(_HANDLER)
    _ROOT_LOGGER.setLevel(level)


def spy_enabled() -> bool:
    val = os.getenv("CLOSMESH_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def spy_trace(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if spy_enabled():
            _SPY_LOGGER.debug("Entering %s", func.__qualname__)
        result = func(*args, **kwargs)
        if spy_enabled():
            _SPY_LOGGER.debug("Exiting %s", func.__qualname__)
        return result

    return wrapper
