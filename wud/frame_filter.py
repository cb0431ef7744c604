# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Filtering of raw stack captures down to application-owned frames."""

import logging
import os
import sysconfig
from typing import Callable, Iterable, Sequence

from .models import RawFrame, StackFrame

logger = logging.getLogger(__name__)

MAX_FRAMES = 10

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def default_exclude_markers() -> tuple[str, ...]:
    """Return path markers for dependency, toolchain and reporter code."""
    markers = ["site-packages", "dist-packages", "<frozen", _PACKAGE_DIR]
    stdlib = sysconfig.get_paths().get("stdlib")
    if stdlib:
        markers.append(stdlib)
    return tuple(markers)


class FrameFilter:
    """Reduces a raw stack capture to a bounded list of application frames.

    A resolution is kept when its path contains at least one inclusion
    marker and none of the exclusion markers. Exclusion markers take
    precedence. A custom ``predicate`` replaces the marker heuristic.
    """

    def __init__(
        self,
        include_markers: Iterable[str] | None = None,
        exclude_markers: Iterable[str] | None = None,
        max_frames: int = MAX_FRAMES,
        predicate: Callable[[str], bool] | None = None,
    ):
        """Initialize frame filter.

        Args:
            include_markers: Application-root path markers. Defaults to the
                current working directory.
            exclude_markers: Vendored/toolchain path markers. Defaults to
                ``default_exclude_markers()``.
            max_frames: Number of raw frames considered (default: 10)
            predicate: Optional replacement for the marker heuristic
        """
        if max_frames < 0:
            raise ValueError(f"max_frames must be non-negative, got {max_frames}")

        if include_markers is None:
            include_markers = (os.getcwd(),)
        if exclude_markers is None:
            exclude_markers = default_exclude_markers()

        # An empty marker would match every path
        self.include_markers = tuple(m for m in include_markers if m)
        self.exclude_markers = tuple(m for m in exclude_markers if m)
        self.max_frames = max_frames
        self._predicate = predicate

    def is_application_frame(self, path: str) -> bool:
        """Check whether a source path belongs to the application.

        Args:
            path: Source file path

        Returns:
            True if the frame should be shown in reports
        """
        if self._predicate is not None:
            return self._predicate(path)
        if any(marker in path for marker in self.exclude_markers):
            return False
        return any(marker in path for marker in self.include_markers)

    def filter(self, raw_trace: Sequence[RawFrame]) -> tuple[StackFrame, ...]:
        """Filter a raw capture.

        Args:
            raw_trace: Raw frames in capture order

        Returns:
            Retained frames in their original order
        """
        retained: list[StackFrame] = []
        for raw_frame in list(raw_trace)[:self.max_frames]:
            for symbol in raw_frame.symbols:
                if symbol.filename is None or symbol.lineno is None or symbol.name is None:
                    continue
                if not self.is_application_frame(symbol.filename):
                    continue
                retained.append(
                    StackFrame(
                        file_path=symbol.filename,
                        line_number=symbol.lineno,
                        function_name=symbol.name,
                    )
                )

        # Inlined symbols can yield several resolutions per raw frame
        retained = retained[:self.max_frames]
        logger.debug(f"Retained {len(retained)} application frame(s) from stack capture")
        return tuple(retained)
