"""
Logging configuration for applications built on baseutils.

The library itself only emits records through module loggers. Applications
that want those records on the console call :func:`setup_logging` once.
"""

import logging
import sys
import threading
from typing import Optional, Union

_config_lock = threading.Lock()
_installed_handler: Optional[logging.Handler] = None

_TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_USER_FRIENDLY_FORMAT = "%(message)s"


def resolve_log_level(level: Union[int, str, None] = None) -> int:
    """
    Translate a level name or number into a logging level.

    None and unknown names resolve to INFO.
    """
    if level is None:
        return logging.INFO
    if isinstance(level, int) and not isinstance(level, bool):
        return level

    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    fmt = _USER_FRIENDLY_FORMAT if user_friendly else _TECHNICAL_FORMAT
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(fmt, "%Y-%m-%d %H:%M:%S"))
    return console_handler


def setup_logging(level: Union[int, str, None] = None, *, user_friendly: bool = False) -> logging.Handler:
    """Attach a stdout handler to the root logger, replacing one installed earlier."""
    global _installed_handler

    with _config_lock:
        root_logger = logging.getLogger()
        if _installed_handler is not None:
            root_logger.removeHandler(_installed_handler)
            _installed_handler.close()

        handler = _build_console_handler(user_friendly)
        root_logger.addHandler(handler)
        root_logger.setLevel(resolve_log_level(level))
        _installed_handler = handler
        return handler


__all__ = ["resolve_log_level", "setup_logging"]
