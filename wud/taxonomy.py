# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Helpers for giving application errors a stable kind identifier."""

from enum import Enum
from typing import Any, ClassVar


class ReportableError(Exception):
    """Base class for application errors that declare their own kind.

    Subclasses set ``error_type`` to a stable discriminant. When a subclass
    does not set one, its module-qualified class name is used.

    Example:
        >>> class InvalidAmount(ReportableError):
        ...     error_type = "InvalidAmount"
        >>> resolve_error_type(InvalidAmount("amount exceeds limit"))
        'InvalidAmount'
    """

    error_type: ClassVar[str | Enum | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "error_type" not in cls.__dict__:
            cls.error_type = qualified_type_name(cls)


def qualified_type_name(cls: type) -> str:
    """Return the module-qualified name of a class.

    Builtin exceptions keep their bare name.
    """
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_error_type(error: BaseException) -> str:
    """Return the stable kind identifier for an error.

    An explicit ``error_type`` attribute wins; enum members contribute their
    name. Otherwise the module-qualified class name is used. The message never
    takes part.

    Args:
        error: The error being reported

    Returns:
        Error type identifier
    """
    explicit = getattr(error, "error_type", None)
    if isinstance(explicit, Enum):
        return explicit.name
    if isinstance(explicit, str) and explicit:
        return explicit
    return qualified_type_name(type(error))


def resolve_error_message(error: BaseException) -> str:
    """Return the human-readable message for an error."""
    return str(error)
