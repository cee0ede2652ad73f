"""
Core primitives of pathlog: configuration, stack capture, caller-path
resolution and the loguru console handlers.
"""

from .exceptions import CustomError, InvalidPathError, PathErrorType
from .config import LoggerConfig, split_path
from .stack import FixedStackResolver, FrameStackResolver, StackResolver
from .resolver import CallerPathResolver, common_prefix_depth, relative_caller_path
from .logging import ConsoleSinks, init_logger

__all__ = [
    "CustomError",
    "InvalidPathError",
    "PathErrorType",
    "LoggerConfig",
    "split_path",
    "StackResolver",
    "FrameStackResolver",
    "FixedStackResolver",
    "CallerPathResolver",
    "common_prefix_depth",
    "relative_caller_path",
    "ConsoleSinks",
    "init_logger",
]
