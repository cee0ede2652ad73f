from __future__ import annotations

"""
Logger configuration store.

Holds the root path used for caller-path rendering together with the color
and debug-level switches. One instance is owned by each ``Logger``.
"""

import os
import re
import stat

from .exceptions import InvalidPathError, PathErrorType

_SEPARATORS = re.compile(r"[\\/]")


def split_path(path: str) -> list[str]:
    """
    Split a path on both ``/`` and ``\\`` separators.

    Parameters
    ----------
    path : str
        Path text in POSIX or Windows notation.

    Returns
    -------
    list[str]
        Ordered segments. An absolute POSIX path starts with an empty segment.
    """
    return _SEPARATORS.split(path)


def _check_directory(path: str) -> None:
    try:
        status = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise InvalidPathError(PathErrorType.PATH_NOT_FOUND) from exc
    except PermissionError as exc:
        raise InvalidPathError(PathErrorType.PERMISSION_DENIED) from exc
    except OSError as exc:
        raise InvalidPathError(PathErrorType.UNKNOWN) from exc
    if stat.S_ISREG(status.st_mode):
        raise InvalidPathError(PathErrorType.PATH_IS_FILE)


class LoggerConfig:
    """
    Mutable logger settings.

    Parameters
    ----------
    root_path : str, optional
        Root directory for relative caller paths, by default the current
        working directory. It is validated like ``set_root_path``.
    colored_log : bool, optional
        Colorize level tags with ANSI escapes, by default False.
    log_debug_level : bool, optional
        Emit DEBUG lines, by default False.
    """

    def __init__(
        self,
        root_path: str | None = None,
        colored_log: bool = False,
        log_debug_level: bool = False,
    ) -> None:
        self.root_path_segments: list[str] = split_path(os.getcwd())
        self.colored_log = colored_log
        self.log_debug_level = log_debug_level
        if root_path is not None:
            self.set_root_path(root_path)

    def get_root_path(self) -> str:
        """
        Return the root path joined with the host separator.

        A root set from a relative path is returned in its absolute form,
        resolved against the working directory at the time it was set.
        """
        return os.sep.join(self.root_path_segments)

    def set_root_path(self, path: str) -> None:
        """
        Validate ``path`` and make it the new root path.

        Parameters
        ----------
        path : str
            Existing directory. Relative paths are made absolute against the
            current working directory before they are stored.

        Raises
        ------
        InvalidPathError
            ``PATH_NOT_FOUND``, ``PERMISSION_DENIED``, ``PATH_IS_FILE`` or
            ``UNKNOWN``. The previous root path is kept.
        """
        path = os.fspath(path)
        _check_directory(path)
        if not os.path.isabs(path):
            path = os.path.abspath(path)
        self.root_path_segments = split_path(path)

    def get_colored_log(self) -> bool:
        return self.colored_log

    def set_colored_log(self, new_value: bool) -> None:
        self.colored_log = bool(new_value)

    def get_log_debug_level(self) -> bool:
        return self.log_debug_level

    def set_log_debug_level(self, new_value: bool) -> None:
        self.log_debug_level = bool(new_value)

    def __repr__(self) -> str:
        return (
            f"LoggerConfig(root_path={self.get_root_path()!r}, "
            f"colored_log={self.colored_log}, log_debug_level={self.log_debug_level})"
        )


__all__ = [
    "LoggerConfig",
    "split_path",
]
