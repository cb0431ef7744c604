# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Exceptions for error reporting operations."""


class WudError(Exception):
    """Base exception for WUD reporting client errors."""
    pass


class ConfigurationError(WudError):
    """Raised when the reporting configuration is missing or invalid."""
    pass


class ReportError(WudError):
    """Raised when a report could not be completed."""
    pass


class DeliveryError(ReportError):
    """Raised when an error event could not be delivered to the webhook."""
    pass
