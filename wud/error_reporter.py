# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Abstract error reporter interface."""

from abc import ABC, abstractmethod


class ErrorReporter(ABC):
    """Abstract base class for error reporting.

    Application code depends on this interface so a reporter can be swapped
    for a test double without touching call sites.
    """

    @abstractmethod
    def report(self, error: BaseException) -> None:
        """Report an error.

        The error itself stays the caller's responsibility; reporting never
        raises it, wraps it, or replaces it.

        Args:
            error: The error to report

        Raises:
            ReportError: If the report could not be delivered
        """
        pass
