"""
pathlog package.

Leveled console logging with the caller's file path rendered relative to a
configurable root directory.
"""

from .core.exceptions import CustomError, InvalidPathError, PathErrorType
from .core.config import LoggerConfig
from .logger import (
    Logger,
    debug,
    default_logger,
    error,
    get_colored_log,
    get_log_debug_level,
    get_root_path,
    info,
    set_colored_log,
    set_log_debug_level,
    set_root_path,
    warn,
    warning,
)

__all__ = [
    "core",
    "CustomError",
    "InvalidPathError",
    "PathErrorType",
    "LoggerConfig",
    "Logger",
    "default_logger",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "get_root_path",
    "set_root_path",
    "get_colored_log",
    "set_colored_log",
    "get_log_debug_level",
    "set_log_debug_level",
]
