"""
Exception types raised by pathlog.

Only root-path configuration raises; caller-path resolution never does.
"""

from enum import Enum


class CustomError(Exception):
    pass


class PathErrorType(Enum):
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    PATH_IS_FILE = "PATH_IS_FILE"
    UNKNOWN = "UNKNOWN"


_ERROR_MESSAGES = {
    PathErrorType.PATH_NOT_FOUND: "The specified path was not found.",
    PathErrorType.PERMISSION_DENIED: "Permission denied.",
    PathErrorType.PATH_IS_FILE: "The specified path is a file.",
    PathErrorType.UNKNOWN: "An unknown error occurred.",
}


class InvalidPathError(CustomError):
    """
    Raised when a root path is missing, unreadable or not a directory.

    Parameters
    ----------
    error_type : PathErrorType
        Failure category. The exception message is fixed per category.
    """

    def __init__(self, error_type: PathErrorType) -> None:
        self.error_type = PathErrorType(error_type)
        super().__init__(_ERROR_MESSAGES[self.error_type])


__all__ = [
    "CustomError",
    "PathErrorType",
    "InvalidPathError",
]
