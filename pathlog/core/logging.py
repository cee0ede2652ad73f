"""
Loguru handler setup for pathlog.

Every ``Logger`` owns one pair of loguru handlers: DEBUG and INFO records go to
standard output, WARNING and ERROR records to standard error. Records are
routed to their owner through the ``pathlog_id`` extra.

The handlers live on a loguru logger with its own core, so handlers added to
the global ``loguru.logger`` by the host application neither lose their
configuration nor receive pathlog lines.
"""

import copy
import sys

from loguru import logger
from loguru._logger import Core

_LEVEL_TAGS = {
    "DEBUG": "<blue>DEBUG</blue>",
    "INFO": "<green>INFO</green>",
    "WARNING": "<yellow>WARN</yellow>",
    "ERROR": "<red>ERROR</red>",
}
_LINE_FORMAT = "[{extra[timestamp]}] [{extra[caller]}] [%s]: {message}\n"
_STDERR_LEVEL_NO = 30

_pathlog_logger = None


def init_logger():
    """
    Return the loguru logger pathlog writes through, creating it once.

    It shares the options of ``loguru.logger`` but has an empty handler core
    of its own. The global logger and its handlers are left untouched.

    Returns
    -------
    loguru.Logger
        Logger holding only pathlog handlers.
    """
    global _pathlog_logger
    if _pathlog_logger is None:
        isolated = copy.copy(logger)
        isolated._core = Core()
        _pathlog_logger = isolated
    return _pathlog_logger


def _line_format(record) -> str:
    level_name = record["level"].name
    return _LINE_FORMAT % _LEVEL_TAGS.get(level_name, level_name)


class ConsoleSinks:
    """
    Pair of loguru handlers writing pathlog lines to the console.

    Parameters
    ----------
    owner_id : int
        Value of the ``pathlog_id`` extra this pair accepts.
    stdout : optional
        Stream for DEBUG and INFO lines, by default ``sys.stdout`` at write time.
    stderr : optional
        Stream for WARN and ERROR lines, by default ``sys.stderr`` at write time.
    """

    def __init__(self, owner_id: int, stdout=None, stderr=None) -> None:
        self.owner_id = owner_id
        self._stdout = stdout
        self._stderr = stderr
        self._handler_ids: list[int] = []
        self.colorize = None

    def _write_stdout(self, message) -> None:
        stream = self._stdout if self._stdout is not None else sys.stdout
        stream.write(str(message))
        stream.flush()

    def _write_stderr(self, message) -> None:
        stream = self._stderr if self._stderr is not None else sys.stderr
        stream.write(str(message))
        stream.flush()

    def _accepts_stdout(self, record) -> bool:
        return (
            record["extra"].get("pathlog_id") == self.owner_id
            and record["level"].no < _STDERR_LEVEL_NO
        )

    def _accepts_stderr(self, record) -> bool:
        return (
            record["extra"].get("pathlog_id") == self.owner_id
            and record["level"].no >= _STDERR_LEVEL_NO
        )

    def install(self, colorize: bool) -> None:
        """
        (Re)install both handlers.

        Parameters
        ----------
        colorize : bool
            Render the level tag color markup as ANSI escapes.
        """
        self.remove()
        self._handler_ids = [
            init_logger().add(
                self._write_stdout,
                colorize=colorize,
                format=_line_format,
                filter=self._accepts_stdout,
                level="DEBUG",
                diagnose=False,
            ),
            init_logger().add(
                self._write_stderr,
                colorize=colorize,
                format=_line_format,
                filter=self._accepts_stderr,
                level="DEBUG",
                diagnose=False,
            ),
        ]
        self.colorize = colorize

    def remove(self) -> None:
        for handler_id in self._handler_ids:
            try:
                init_logger().remove(handler_id)
            except ValueError:
                # already removed through init_logger().remove()
                pass
        self._handler_ids = []
        self.colorize = None

    def emit(self, level: str, message: str, timestamp: str, caller: str) -> None:
        init_logger().bind(
            pathlog_id=self.owner_id,
            timestamp=timestamp,
            caller=caller,
        ).log(level, message)


__all__ = [
    "ConsoleSinks",
    "init_logger",
]
