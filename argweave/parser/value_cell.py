# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TypedValueCell`, the per-argument storage slot that remembers the
concrete type of whatever value was last stored in it.

Retrieval compares the stored type against the requested one before handing the
value back, so asking for the wrong type fails loudly instead of returning a value
of an unexpected type.

Matching rules for `retrieve(expected_type)`:
- `None` or `typing.Any`: no check, the stored value is returned as-is.
- A plain class: the stored type must be exactly that class (`bool` is not `int`).
- A parametrised generic (`list[int]`): compared by its origin (`list`).
- A union (`int | str`): matches if any member matches.

Example:
    cell = TypedValueCell("port")
    cell.store(8080)
    cell.retrieve(int)   # 8080
    cell.retrieve(str)   # raises TypeMismatchError
"""
from __future__ import annotations

import types
from typing import Any, TypeVar, Union, get_args, get_origin, overload

from argweave.exceptions import EmptyValueError, TypeMismatchError
from argweave.parser.parser_types import NOT_SET

T = TypeVar("T")


def _matches(stored_type: type, expected_type: Any) -> bool:
    if expected_type is Any:
        return True
    origin = get_origin(expected_type)
    if isinstance(expected_type, types.UnionType) or origin is Union:
        return any(_matches(stored_type, member) for member in get_args(expected_type))
    return stored_type is (origin or expected_type)


class TypedValueCell:
    """
    Holds exactly one resolved value for an argument, tagged with its type.

    Attributes:
        name (str): The argument this cell belongs to, used in error messages.
    """

    __slots__ = ("name", "_value", "_type")

    def __init__(self, name: str, value: Any = NOT_SET) -> None:
        self.name = name
        self._value: Any = NOT_SET
        self._type: type | None = None
        if value is not NOT_SET:
            self.store(value)

    @property
    def is_empty(self) -> bool:
        return self._type is None

    @property
    def stored_type(self) -> type | None:
        """The type of the stored value, or None if the cell is empty."""
        return self._type

    def store(self, value: Any) -> None:
        """Record `value` and its type, replacing any previous content."""
        self._value = value
        self._type = type(value)

    def clear(self) -> None:
        self._value = NOT_SET
        self._type = None

    @overload
    def retrieve(self, expected_type: type[T]) -> T: ...

    @overload
    def retrieve(self, expected_type: Any = None) -> Any: ...

    def retrieve(self, expected_type: Any = None) -> Any:
        """
        Return the stored value, checked against `expected_type`.

        Args:
            expected_type (type | None): The type the caller expects. `None` skips the check.

        Returns:
            Any: The stored value.

        Raises:
            EmptyValueError: If nothing has been stored.
            TypeMismatchError: If the stored type does not match `expected_type`.
        """
        if self._type is None:
            raise EmptyValueError(self.name)
        if expected_type is not None and not _matches(self._type, expected_type):
            raise TypeMismatchError(self.name, self._type, expected_type)
        return self._value

    def __repr__(self) -> str:
        if self._type is None:
            return f"TypedValueCell({self.name!r}, <empty>)"
        return (
            f"TypedValueCell({self.name!r}, {self._type.__name__}={self._value!r})"
        )
