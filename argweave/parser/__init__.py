"""
Argweave Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .action_kind import ActionKind
from .actions import ByReference, ByValue
from .argument import Argument
from .argument_parser import ArgumentParser
from .binding import ArgumentBinding, Resolution
from .parser_types import NOT_SET, NOTHING
from .results import ParsedArguments
from .value_cell import TypedValueCell

__all__ = [
    "ActionKind",
    "Argument",
    "ArgumentBinding",
    "ArgumentParser",
    "ByReference",
    "ByValue",
    "NOT_SET",
    "NOTHING",
    "ParsedArguments",
    "Resolution",
    "TypedValueCell",
]
