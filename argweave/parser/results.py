# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedArguments`, the read-only view over the value cells produced by
one `ArgumentParser.parse_args()` call.

Values are read with a type check:

    parsed = parser.parse_args(["--port", "8080"])
    parsed.get("port", int)   # 8080
    parsed.get("port", str)   # raises TypeMismatchError
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, TypeVar, overload

from argweave.parser.value_cell import TypedValueCell

T = TypeVar("T")


class ParsedArguments:
    """Typed access to the values resolved by a single parse."""

    def __init__(
        self, cells: Mapping[str, TypedValueCell], present: set[str] | None = None
    ) -> None:
        self._cells = dict(cells)
        self._present = set(present or ())

    def _cell(self, dest: str) -> TypedValueCell:
        try:
            return self._cells[dest]
        except KeyError:
            raise KeyError(f"No argument named '{dest}'") from None

    @overload
    def get(self, dest: str, expected_type: type[T]) -> T: ...

    @overload
    def get(self, dest: str, expected_type: Any = None) -> Any: ...

    def get(self, dest: str, expected_type: Any = None) -> Any:
        """
        Return the value of `dest`, checked against `expected_type`.

        Raises:
            KeyError: If no argument named `dest` was declared.
            EmptyValueError: If the argument has no value.
            TypeMismatchError: If the stored value is not an `expected_type`.
        """
        return self._cell(dest).retrieve(expected_type)

    def present(self, dest: str) -> bool:
        """Return True if `dest` appeared on the command line."""
        self._cell(dest)
        return dest in self._present

    def has_value(self, dest: str) -> bool:
        return not self._cell(dest).is_empty

    def stored_type(self, dest: str) -> type | None:
        return self._cell(dest).stored_type

    def as_dict(self) -> dict[str, Any]:
        """Return all arguments that hold a value, keyed by name."""
        return {
            dest: cell.retrieve()
            for dest, cell in self._cells.items()
            if not cell.is_empty
        }

    def __getitem__(self, dest: str) -> Any:
        return self.get(dest)

    def __contains__(self, dest: object) -> bool:
        return dest in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        values = ", ".join(
            f"{dest}={'<empty>' if cell.is_empty else repr(cell.retrieve())}"
            for dest, cell in self._cells.items()
        )
        return f"ParsedArguments({values})"

