# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Text-to-value conversion used when an argument has no action.

This module converts raw command-line text into the argument's declared type,
including `Enum`, `bool`, `datetime`, `Literal` and unions of those.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type.
- type_name: Readable name for a type or typing construct.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

_TRUE_WORDS = {"true", "t", "1", "yes", "y", "on"}
_FALSE_WORDS = {"false", "f", "0", "no", "n", "off", ""}


def type_name(target_type: Any) -> str:
    """Return a readable name for a type, falling back to its repr."""
    return getattr(target_type, "__name__", None) or repr(target_type)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the text is not a recognised boolean word.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_WORDS:
        return True
    elif normalized in _FALSE_WORDS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Args:
        value (Any): The input value to convert.
        enum_type (EnumMeta): The target Enum class.

    Returns:
        Enum: The corresponding Enum instance.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass
        try:
            return enum_type[value.upper()]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union, Literal, Enum, and datetime. Any other
    callable target is applied to the text directly.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if target_type is Any:
        return value

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except Exception:
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    if not callable(target_type):
        raise TypeError(f"{type_name(target_type)} is not a callable type")

    try:
        return target_type(value)
    except TypeError as error:
        raise ValueError(str(error)) from error
