# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Stack capture for error reports.

The reporting client depends only on the ``StackCapture`` contract: a
callable returning an ordered sequence of raw frames, innermost first. The
default implementation walks the live interpreter stack; tests and unusual
runtimes can plug in their own.
"""

import sys
import traceback
from typing import Callable, Sequence

from .models import RawFrame, SymbolResolution

StackCapture = Callable[[], Sequence[RawFrame]]


def capture_stack(limit: int | None = None) -> list[RawFrame]:
    """Capture the current call stack, starting at the caller.

    Args:
        limit: Optional maximum number of frames to capture

    Returns:
        Raw frames, innermost (most recent call) first
    """
    frames: list[RawFrame] = []
    for frame, lineno in traceback.walk_stack(sys._getframe(1)):
        if limit is not None and len(frames) >= limit:
            break
        code = frame.f_code
        symbol = SymbolResolution(
            filename=code.co_filename or None,
            lineno=lineno,
            name=getattr(code, "co_qualname", code.co_name) or None,
        )
        frames.append(RawFrame(symbols=(symbol,)))
    return frames
