from __future__ import annotations

"""
Stack introspection used to find the source file of a log call.
"""

import inspect
import os
from typing import Optional


class StackResolver:
    """
    Source of caller file paths.
    """

    def capture_caller_file(self, depth: int) -> Optional[str]:
        """
        Return the source file of a frame above the calling function.

        Parameters
        ----------
        depth : int
            Number of frames above the function that called this method.
            ``0`` is that function itself.

        Returns
        -------
        Optional[str]
            Absolute source-file path, or None when it cannot be captured.
        """
        raise NotImplementedError


class FrameStackResolver(StackResolver):
    """
    Stack resolver walking interpreter frames through ``f_back``.

    Only ``depth + 1`` frames are visited, so the cost does not grow with the
    depth of the whole call stack.
    """

    def capture_caller_file(self, depth: int) -> Optional[str]:
        frame = inspect.currentframe()
        try:
            for _ in range(depth + 1):
                if frame is None:
                    return None
                frame = frame.f_back
            if frame is None:
                return None
            file_name = frame.f_code.co_filename
            # "<stdin>", "<string>" and similar have no file on disk
            if not file_name or file_name.startswith("<"):
                return None
            return os.path.abspath(file_name)
        finally:
            del frame


class FixedStackResolver(StackResolver):
    """
    Stack resolver returning a preset path, for tests and embedding.

    Parameters
    ----------
    file_path : Optional[str]
        Path returned by every capture.
    """

    def __init__(self, file_path: Optional[str]) -> None:
        self.file_path = file_path
        self.capture_count = 0
        self.last_depth: Optional[int] = None

    def capture_caller_file(self, depth: int) -> Optional[str]:
        self.capture_count += 1
        self.last_depth = depth
        return self.file_path


__all__ = [
    "StackResolver",
    "FrameStackResolver",
    "FixedStackResolver",
]
