from __future__ import annotations

"""
Caller-path resolution.

Renders the source file of a log call relative to the configured root path:
``./pkg/mod.py`` below the root, ``../other/mod.py`` beside it, or the full
path when root and caller share no leading directory.
"""

import os
import platform
from typing import Optional, Sequence

from .config import LoggerConfig, split_path
from .stack import FrameStackResolver, StackResolver


def _host_separator() -> str:
    return "\\" if platform.system() == "Windows" else "/"


def common_prefix_depth(root: Sequence[str], caller: Sequence[str]) -> int:
    """
    Count the leading segments shared by ``root`` and ``caller``.

    Parameters
    ----------
    root : Sequence[str]
        Root path segments.
    caller : Sequence[str]
        Caller path segments.

    Returns
    -------
    int
        Length of the common prefix, scanning from the first segment and
        stopping at the first mismatch or at the end of either sequence.
    """
    depth = 0
    for root_segment, caller_segment in zip(root, caller):
        if root_segment != caller_segment:
            break
        depth += 1
    return depth


def relative_caller_path(
    root_segments: Sequence[str],
    caller_path: str,
    sep: str = os.sep,
) -> str:
    """
    Render ``caller_path`` relative to the root path.

    Parameters
    ----------
    root_segments : Sequence[str]
        Root path segments, as stored by ``LoggerConfig``.
    caller_path : str
        Absolute source-file path, with ``/`` or ``\\`` separators.
    sep : str, optional
        Output separator, by default ``os.sep``.

    Returns
    -------
    str
        ``./`` followed by the remaining segments when the caller is under the
        root, one ``../`` per unshared root segment followed by the remaining
        segments when it branches off inside the root, and the whole caller
        path when nothing is shared.
    """
    # Empty segments (POSIX anchor, doubled or trailing separators) are not
    # directories and take no part in the comparison.
    root = [segment for segment in root_segments if segment]
    caller_parts = split_path(caller_path)
    caller = [segment for segment in caller_parts if segment]

    depth = common_prefix_depth(root, caller)
    if depth == 0:
        return sep.join(caller_parts)

    remainder = sep.join(caller[depth:])
    if depth < len(root):
        return f"..{sep}" * (len(root) - depth) + remainder
    return f".{sep}" + remainder


class CallerPathResolver:
    """
    Resolve the caller of a log function to a root-relative path.

    Parameters
    ----------
    config : LoggerConfig
        Configuration supplying the root path.
    stack : StackResolver, optional
        Stack capability, by default ``FrameStackResolver()``.
    """

    def __init__(self, config: LoggerConfig, stack: Optional[StackResolver] = None) -> None:
        self.config = config
        self.stack = stack if stack is not None else FrameStackResolver()

    def resolve(self, depth: int) -> Optional[str]:
        """
        Resolve the caller ``depth`` frames above the function calling this.

        Parameters
        ----------
        depth : int
            Frames between the calling function and the code that invoked
            the public log function. The log functions of ``Logger`` pass 2.

        Returns
        -------
        Optional[str]
            Root-relative caller path, or None when the stack cannot be
            captured or parsed.
        """
        try:
            caller_path = self.stack.capture_caller_file(depth + 1)
            if not caller_path:
                return None
            return relative_caller_path(
                self.config.root_path_segments,
                caller_path,
                _host_separator(),
            )
        except Exception:
            return None


__all__ = [
    "CallerPathResolver",
    "common_prefix_depth",
    "relative_caller_path",
]
