# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argweave.

The value-resolution core raises three structured errors that describe what went
wrong with a single argument, and the parser front-end adds two more for bad
declarations and malformed command lines.

All exceptions inherit from `ArgweaveError`, the base exception for the package.

Exception Hierarchy:
- ArgweaveError
    ├── ArgumentDefinitionError
    ├── ArgumentParseError
    ├── ConversionError
    ├── TypeMismatchError
    └── EmptyValueError

Errors raised by user-supplied actions are not part of this hierarchy. They
propagate unchanged so callers can catch exactly what their action raised.
"""
from __future__ import annotations

from typing import Any


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", None) or repr(value_type)


class ArgweaveError(Exception):
    """Base exception for Argweave."""


class ArgumentDefinitionError(ArgweaveError):
    """Exception raised when an argument is declared with an invalid configuration."""


class ArgumentParseError(ArgweaveError):
    """Exception raised when command-line tokens cannot be matched to arguments."""


class ConversionError(ArgweaveError):
    """Exception raised when raw text cannot be converted to the expected type."""

    def __init__(self, dest: str, value: Any, target_type: Any, reason: str = ""):
        self.dest = dest
        self.value = value
        self.target_type = target_type
        self.reason = reason
        message = (
            f"Invalid value for '{dest}': {value!r} cannot be converted "
            f"to {_type_name(target_type)}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TypeMismatchError(ArgweaveError):
    """Exception raised when a value is retrieved as a type it was not stored as."""

    def __init__(self, dest: str, stored_type: type, requested_type: Any):
        self.dest = dest
        self.stored_type = stored_type
        self.requested_type = requested_type
        super().__init__(
            f"Argument '{dest}' holds a {_type_name(stored_type)}, "
            f"not a {_type_name(requested_type)}"
        )


class EmptyValueError(ArgweaveError):
    """Exception raised when retrieving an argument that has no value."""

    def __init__(self, dest: str):
        self.dest = dest
        super().__init__(f"Argument '{dest}' has no value and no default")
