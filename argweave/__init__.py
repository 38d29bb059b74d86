"""
Argweave Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgumentDefinitionError,
    ArgumentParseError,
    ArgweaveError,
    ConversionError,
    EmptyValueError,
    TypeMismatchError,
)
from .parser import (
    ActionKind,
    Argument,
    ArgumentBinding,
    ArgumentParser,
    ByReference,
    ByValue,
    ParsedArguments,
    TypedValueCell,
)

logger = logging.getLogger("argweave")


__all__ = [
    "ActionKind",
    "Argument",
    "ArgumentBinding",
    "ArgumentDefinitionError",
    "ArgumentParseError",
    "ArgumentParser",
    "ArgweaveError",
    "ByReference",
    "ByValue",
    "ConversionError",
    "EmptyValueError",
    "ParsedArguments",
    "TypeMismatchError",
    "TypedValueCell",
]
