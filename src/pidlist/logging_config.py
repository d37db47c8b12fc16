"""
Logging configuration for the pidlist entry point.

Library code only creates module loggers; the console handler is installed
once by :func:`setup_logging` when pidlist runs as a program. The level comes
from ``PIDLIST_LOG_LEVEL`` (default ``INFO``).
"""

import logging
import sys
import threading
from typing import Optional

from .config import ConfigurationError, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_HANDLER: Optional[logging.Handler] = None
_DEFAULT_LEVEL = "INFO"
_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    name = level or env_str("PIDLIST_LOG_LEVEL", or_value=_DEFAULT_LEVEL) or _DEFAULT_LEVEL
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_format("PIDLIST_LOG_LEVEL", name, "a standard logging level name")
    return resolved


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; later calls are no-ops."""
    global _HANDLER

    with _config_lock:
        if _HANDLER is not None:
            return

        resolved = _resolve_level(level)
        _HANDLER = _build_console_handler(resolved)
        root_logger = logging.getLogger()
        root_logger.addHandler(_HANDLER)
        root_logger.setLevel(resolved)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def reset_logging() -> None:
    """Remove the handler installed by :func:`setup_logging`."""
    global _HANDLER

    with _config_lock:
        if _HANDLER is None:
            return
        logging.getLogger().removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None
