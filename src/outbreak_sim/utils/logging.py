import functools
import logging
import os
import time
from typing import Any, Callable, Optional, TypeVar

LOG_LEVEL_ENV = "OUTBREAK_SIM_LOG_LEVEL"

F = TypeVar("F", bound=Callable[..., Any])


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic console handler; level falls back to $OUTBREAK_SIM_LOG_LEVEL."""
    level = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def log_call(func: F) -> F:
    """Decorator that logs function entry, exit and runtime at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = logging.getLogger(func.__module__)
        log_debug = logger.isEnabledFor(logging.DEBUG)
        if log_debug:
            logger.debug("Entering %s", func.__qualname__)
        start = time.time()
        result = func(*args, **kwargs)
        runtime_ms = (time.time() - start) * 1000.0
        if log_debug:
            logger.debug("Exiting %s (%.2fms)", func.__qualname__, runtime_ms)
        return result

    return wrapper  # type: ignore[return-value]
