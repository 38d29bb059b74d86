# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentBinding`, the declared configuration of one argument: its
default value and the action that turns raw tokens into a stored value.

Resolution rules:
- No action declared: the tokens are converted to the declared type and stored.
- Converting action: its return value is stored, replacing any default, even when
  it has a different type from the default.
- Side-effecting action: it is called, and the stored value is left as it was.
- Argument absent from the command line: `resolve` is never called and the cell
  keeps the default (or stays empty).

Errors raised by a user action are re-raised unchanged, with a note naming the
argument attached for diagnostics.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from argweave.logger import logger
from argweave.parser.action_kind import ActionKind
from argweave.parser.actions import (
    BaseArgumentAction,
    BoundAction,
    DefaultConversion,
    make_action,
)
from argweave.parser.parser_types import NOT_SET, NOTHING
from argweave.parser.value_cell import TypedValueCell


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one argument's tokens."""

    dest: str
    value: Any = NOTHING
    stored: bool = False

    def apply(self, cell: TypedValueCell) -> None:
        """Write the resolved value into `cell` if there is one."""
        if self.stored:
            cell.store(self.value)


class ArgumentBinding:
    """
    Default value and action for a single declared argument.

    Attributes:
        dest (str): Name of the argument.
        value_type (Any): Type used by the default conversion.
        nargs (int | str | None): Arity, used by the default conversion to decide
            between a scalar and a list.
        default (Any): Value seeded into the cell before parsing, or `NOT_SET`.
        implicit (Any): Value stored when the argument appears with no tokens and
            no action is declared, or `NOT_SET`.
    """

    def __init__(
        self,
        dest: str,
        value_type: Any = str,
        nargs: int | str | None = None,
        default: Any = NOT_SET,
        implicit: Any = NOT_SET,
    ) -> None:
        self.dest = dest
        self.value_type = value_type
        self.nargs = nargs
        self.default = default
        self.implicit = implicit
        self._action: BoundAction | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not NOT_SET

    @property
    def has_action(self) -> bool:
        return self._action is not None

    @property
    def action(self) -> BaseArgumentAction:
        """The action that runs on resolve; the default conversion if none was set."""
        if self._action is not None:
            return self._action
        return DefaultConversion(self.dest, self.value_type, self.nargs, self.implicit)

    def set_default(self, value: Any) -> None:
        self.default = value

    def clear_default(self) -> None:
        self.default = NOT_SET

    def set_action(
        self,
        function: Callable[..., Any],
        *bound_args: Any,
        kind: ActionKind | str = ActionKind.AUTO,
        **bound_kwargs: Any,
    ) -> None:
        """
        Attach an action, replacing any previous one.

        Args:
            function (Callable): The callable to run when the argument is present.
            *bound_args: Leading arguments captured now; wrap in `ByReference` or
                `ByValue` to make the capture mode explicit.
            kind (ActionKind | str): Whether the result is stored. See `ActionKind`.
            **bound_kwargs: Keyword arguments captured now.
        """
        self._action = make_action(
            self.dest, function, *bound_args, kind=kind, **bound_kwargs
        )

    def clear_action(self) -> None:
        self._action = None

    def seed(self, cell: TypedValueCell) -> None:
        """Reset `cell` to this argument's default, or empty it."""
        if self.default is NOT_SET:
            cell.clear()
            return
        try:
            value = deepcopy(self.default)
        except TypeError:
            # locks, streams and sockets are shared rather than copied
            value = self.default
        cell.store(value)

    def resolve(self, tokens: Sequence[str]) -> Resolution:
        """
        Run the action (or default conversion) for the raw tokens of this argument.

        Args:
            tokens (Sequence[str]): Raw tokens attributed to this argument.

        Returns:
            Resolution: Whether a value should be stored, and which.

        Raises:
            ConversionError: If the default conversion cannot parse a token.
            Exception: Anything the user action raises, unchanged.
        """
        action = self.action
        logger.debug("[%s] Resolving %d token(s) with %r", self.dest, len(tokens), action)
        if isinstance(action, DefaultConversion):
            value = action.invoke(tokens)
        else:
            try:
                value = action.invoke(tokens)
            except Exception as error:
                logger.debug("[%s] Action failed: %s", self.dest, error)
                error.add_note(f"raised by the action for argument '{self.dest}'")
                raise
        if value is NOTHING:
            logger.debug("[%s] Nothing to store; keeping current value", self.dest)
            return Resolution(self.dest)
        return Resolution(self.dest, value, stored=True)

    def __repr__(self) -> str:
        return (
            f"ArgumentBinding(dest={self.dest!r}, default={self.default!r}, "
            f"action={self.action!r})"
        )
