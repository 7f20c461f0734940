"""
Shared helpers for the stream creation library.

Holds the error taxonomy, the logging setup and the argument checks used by
the stream factories.
"""

import logging
import re
import sys
from typing import Any, Callable, Optional

LOGGER_NAME = "stream_creation"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------- Errors ----------

class StreamError(Exception):
    """Base class for every error raised by the library itself."""
    pass


class InvalidArgumentError(StreamError, ValueError):
    """Raised when a factory or operation receives an unusable argument."""
    pass


class IllegalStateError(StreamError, RuntimeError):
    """Raised when a stream or builder is used in a state that forbids it."""
    pass


# ---------- Logging ----------

def setup_logging(level: str = "WARNING", stream=None) -> logging.Logger:
    """Configure the library logger once; later calls only adjust the level."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper()))

    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False

    return root


def get_logger(name: str) -> logging.Logger:
    """Child logger under the library namespace"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = get_logger("utils")


# ---------- Argument checks ----------

def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        logger.debug(f"Rejected None for '{name}'")
        raise InvalidArgumentError(f"'{name}' must not be None")
    return value


def require_callable(value: Any, name: str) -> Callable:
    require_not_none(value, name)
    if not callable(value):
        raise InvalidArgumentError(
            f"'{name}' must be callable, got {type(value).__name__}"
        )
    return value


def require_count(value: Any, name: str) -> int:
    """Validate a non-negative element count such as a limit or a skip."""
    require_not_none(value, name)
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"'{name}' must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"'{name}' must be >= 0, got {value}")
    return value


def require_pattern(value: Any, name: str = "pattern") -> re.Pattern:
    """Accept a compiled regular expression or a pattern string to compile."""
    require_not_none(value, name)
    if isinstance(value, re.Pattern):
        return value
    if isinstance(value, str):
        try:
            return re.compile(value)
        except re.error as e:
            raise InvalidArgumentError(f"Invalid regular expression {value!r}: {e}") from e
    raise InvalidArgumentError(
        f"'{name}' must be a compiled pattern or a string, got {type(value).__name__}"
    )


def describe_callable(fn: Optional[Callable]) -> str:
    """Readable name for a function, used in debug log lines"""
    if fn is None:
        return "None"
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)
