# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Data models for error events and reporting configuration."""

import math
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigurationError

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class SymbolResolution:
    """One symbol resolved from a captured stack frame.

    Any field may be missing when the capture mechanism could not resolve it.

    Attributes:
        filename: Source file path
        lineno: Line number within the source file
        name: Function or symbol name
    """
    filename: str | None = None
    lineno: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class RawFrame:
    """One entry of a raw stack capture.

    A single frame may resolve to several symbols (inlined calls).
    """
    symbols: tuple[SymbolResolution, ...] = ()


@dataclass(frozen=True)
class StackFrame:
    """A fully resolved, application-owned stack frame.

    Attributes:
        file_path: Source file path
        line_number: Line number within the source file
        function_name: Function name
    """
    file_path: str
    line_number: int
    function_name: str

    def render(self) -> str:
        """Render the frame as a single backtrace line."""
        return f"{self.file_path} in {self.function_name} at {self.line_number}"


@dataclass(frozen=True)
class ErrorEvent:
    """A single error occurrence, ready for formatting and delivery.

    Attributes:
        app_name: Name of the reporting application instance
        error_type: Stable identifier of the error kind
        error_message: Human-readable description of the error
        frames: Application frames, innermost first (at most 10)
    """
    app_name: str
    error_type: str
    error_message: str
    frames: tuple[StackFrame, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            Dictionary representation of the error event
        """
        return {
            "app_name": self.app_name,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "frames": [
                {
                    "file_path": frame.file_path,
                    "line_number": frame.line_number,
                    "function_name": frame.function_name,
                }
                for frame in self.frames
            ],
        }


@dataclass(frozen=True)
class ReportingConfig:
    """Configuration for a reporting client.

    Attributes:
        app_name: Name shown in the header of every report
        webhook_url: Incoming webhook URL (treated as a secret)
        timeout_seconds: Request timeout for webhook delivery
        app_root_markers: Path substrings identifying application code.
            Empty means the frame filter defaults apply.
        exclude_markers: Path substrings identifying vendored or toolchain
            code. Empty means the frame filter defaults apply.
    """
    app_name: str
    webhook_url: str = field(repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    app_root_markers: tuple[str, ...] = ()
    exclude_markers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.app_name:
            raise ConfigurationError("app_name is required")
        if not self.webhook_url:
            raise ConfigurationError("webhook_url is required")
        if not self.webhook_url.startswith(("http://", "https://")):
            raise ConfigurationError("webhook_url must be an http(s) URL")
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"timeout_seconds must be a positive finite number, got {self.timeout_seconds}"
            )
        # Accept lists from callers but store immutable tuples
        object.__setattr__(self, "app_root_markers", tuple(self.app_root_markers))
        object.__setattr__(self, "exclude_markers", tuple(self.exclude_markers))
