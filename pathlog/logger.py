from __future__ import annotations

"""
Leveled console logger annotating each line with the caller's relative path.

Typical usage::

    import pathlog

    pathlog.set_root_path("/home/me/project")
    pathlog.set_colored_log(True)
    pathlog.info("server started")
    # [10/19/26 06:06:00] [./app/main.py] [INFO]: server started
"""

from datetime import datetime
import itertools
from typing import Optional

from .core.config import LoggerConfig
from .core.logging import ConsoleSinks, init_logger
from .core.resolver import CallerPathResolver
from .core.stack import StackResolver

_logger_ids = itertools.count(1)

# Frames between Logger._emit and the code calling a public log function.
_CALLER_DEPTH = 2


def _timestamp() -> str:
    return datetime.now().strftime("%x %X")


class Logger:
    """
    Console logger with its own configuration.

    Parameters
    ----------
    config : LoggerConfig, optional
        Settings, by default a new ``LoggerConfig()``.
    stack : StackResolver, optional
        Stack capability used to find the caller file, by default a
        ``FrameStackResolver``.
    stdout : optional
        Stream for DEBUG and INFO lines, by default ``sys.stdout``.
    stderr : optional
        Stream for WARN and ERROR lines, by default ``sys.stderr``.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        stack: Optional[StackResolver] = None,
        stdout=None,
        stderr=None,
    ) -> None:
        init_logger()
        self.config = config if config is not None else LoggerConfig()
        self.resolver = CallerPathResolver(self.config, stack)
        self.sinks = ConsoleSinks(next(_logger_ids), stdout=stdout, stderr=stderr)

    def __del__(self) -> None:
        self.close()

    def close(self) -> None:
        """
        Remove the loguru handlers of this logger.

        Later log calls install them again.
        """
        sinks = getattr(self, "sinks", None)
        if sinks is not None:
            sinks.remove()

    def _emit(self, level: str, message: str) -> None:
        caller = self.resolver.resolve(_CALLER_DEPTH)
        colorize = bool(self.config.colored_log)
        if self.sinks.colorize is not colorize:
            self.sinks.install(colorize)
        self.sinks.emit(level, str(message), _timestamp(), caller or "")

    # ---- log functions ----

    def debug(self, message: str) -> None:
        """
        Log ``message`` at DEBUG level. Nothing happens unless
        ``log_debug_level`` is enabled.
        """
        if self.config.log_debug_level:
            self._emit("DEBUG", message)

    def info(self, message: str) -> None:
        """
        Log ``message`` at INFO level.
        """
        self._emit("INFO", message)

    def warn(self, message: str) -> None:
        """
        Log ``message`` at WARN level, on standard error.
        """
        self._emit("WARNING", message)

    warning = warn

    def error(self, message: str) -> None:
        """
        Log ``message`` at ERROR level, on standard error.
        """
        self._emit("ERROR", message)

    # ---- configuration ----

    def get_root_path(self) -> str:
        return self.config.get_root_path()

    def set_root_path(self, path: str) -> None:
        self.config.set_root_path(path)

    def get_colored_log(self) -> bool:
        return self.config.get_colored_log()

    def set_colored_log(self, new_value: bool) -> None:
        self.config.set_colored_log(new_value)

    def get_log_debug_level(self) -> bool:
        return self.config.get_log_debug_level()

    def set_log_debug_level(self, new_value: bool) -> None:
        self.config.set_log_debug_level(new_value)


default_logger = Logger()


# Module-level API. Each log function calls ``_emit`` directly so the caller
# sits at the same stack depth as with the Logger methods.

def debug(message: str) -> None:
    if default_logger.config.log_debug_level:
        default_logger._emit("DEBUG", message)


def info(message: str) -> None:
    default_logger._emit("INFO", message)


def warn(message: str) -> None:
    default_logger._emit("WARNING", message)


warning = warn


def error(message: str) -> None:
    default_logger._emit("ERROR", message)


def get_root_path() -> str:
    return default_logger.get_root_path()


def set_root_path(path: str) -> None:
    """
    Set the root path of the default logger.

    Raises
    ------
    InvalidPathError
        If ``path`` does not exist, cannot be accessed or is a file.
    """
    default_logger.set_root_path(path)


def get_colored_log() -> bool:
    return default_logger.get_colored_log()


def set_colored_log(new_value: bool) -> None:
    default_logger.set_colored_log(new_value)


def get_log_debug_level() -> bool:
    return default_logger.get_log_debug_level()


def set_log_debug_level(new_value: bool) -> None:
    default_logger.set_log_debug_level(new_value)


__all__ = [
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
