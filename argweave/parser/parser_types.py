# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Sentinels and small state models shared by the Argweave parser.

Contents:
- `NOT_SET`: Marks an argument with no declared default or implicit value.
  `None` cannot be used for this because `None` is a legitimate stored value.
- `NOTHING`: Returned by an action to say "leave the stored value alone".
- `ArgumentState`: Tracks whether an `Argument` has been consumed during parsing,
  and which raw tokens were attributed to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from argweave.parser.argument import Argument


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Sentinel:
        return self

    def __deepcopy__(self, memo: dict) -> _Sentinel:
        return self


NOT_SET: Final = _Sentinel("NOT_SET")
NOTHING: Final = _Sentinel("NOTHING")


@dataclass
class ArgumentState:
    """Tracks an argument and whether it has been consumed."""

    arg: Argument
    consumed: bool = False
    tokens: list[str] = field(default_factory=list)

    def set_consumed(self, tokens: list[str]) -> None:
        """Mark this argument as consumed with the tokens attributed to it."""
        self.consumed = True
        self.tokens = list(tokens)
