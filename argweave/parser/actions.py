# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the actions an argument can run when it appears on the command line.

Every action exposes a single method, `invoke(tokens)`, which receives the raw
token(s) attributed to the argument and returns either the value to store or
`NOTHING` to leave the stored value alone.

Variants:
- `DefaultConversion`: No user action. Converts the tokens to the argument's
  declared type with `coerce_value`.
- `ConvertingAction`: Calls a user function and stores what it returns.
- `SideEffectAction`: Calls a user function for its effects only.

Bound arguments:
User actions may be declared with leading arguments captured at declaration time.
At invocation those come first, followed by the raw token(s):

    function(*bound_args, *tokens, **bound_kwargs)

- `ByReference(obj)` passes the caller's object itself, so any mutation made by the
  action is visible through the caller's reference. The caller must keep the object
  alive for as long as the parser may resolve the argument.
- `ByValue(obj)` snapshots a deep copy at declaration time and hands the action a
  fresh copy of that snapshot on every call.
- Any other bound value is passed as-is.

Example:
    class Image:
        def resize(self, geometry: str) -> None: ...

    img = Image()
    make_action("size", Image.resize, ByReference(img))    # mutates img
    make_action("format", Image.create, 400, 300)          # stores Image.create(400, 300, token)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Any, Callable, Sequence

from argweave.exceptions import ArgumentDefinitionError, ConversionError
from argweave.logger import logger
from argweave.parser.action_kind import ActionKind
from argweave.parser.parser_types import NOT_SET, NOTHING
from argweave.parser.signature import check_bound_prefix, returns_nothing
from argweave.parser.utils import coerce_value


class ByReference:
    """Marks a bound argument that is passed to the action as the caller's own object."""

    __slots__ = ("target",)

    def __init__(self, target: Any) -> None:
        self.target = target

    def get(self) -> Any:
        return self.target

    def __repr__(self) -> str:
        return f"ByReference({self.target!r})"


class ByValue:
    """Marks a bound argument that is captured as an independent copy."""

    __slots__ = ("snapshot",)

    def __init__(self, value: Any) -> None:
        self.snapshot = deepcopy(value)

    def get(self) -> Any:
        return deepcopy(self.snapshot)

    def __repr__(self) -> str:
        return f"ByValue({self.snapshot!r})"


def _unwrap(value: Any) -> Any:
    if isinstance(value, (ByReference, ByValue)):
        return value.get()
    return value


class BaseArgumentAction(ABC):
    """Base class for everything that can resolve an argument's raw tokens."""

    kind: ActionKind = ActionKind.AUTO

    def __init__(self, dest: str) -> None:
        self.dest = dest

    @abstractmethod
    def invoke(self, tokens: Sequence[str]) -> Any:
        """Return the value to store for `tokens`, or `NOTHING`."""
        raise NotImplementedError("invoke must be implemented by subclasses")


class DefaultConversion(BaseArgumentAction):
    """Converts raw tokens to the argument's declared type."""

    kind = ActionKind.CONVERT

    def __init__(
        self,
        dest: str,
        value_type: Any = str,
        nargs: int | str | None = None,
        implicit: Any = NOT_SET,
    ) -> None:
        super().__init__(dest)
        self.value_type = value_type
        self.nargs = nargs
        self.implicit = implicit

    def _convert(self, token: str) -> Any:
        try:
            return coerce_value(token, self.value_type)
        except Exception as error:
            raise ConversionError(
                self.dest, token, self.value_type, str(error)
            ) from error

    def invoke(self, tokens: Sequence[str]) -> Any:
        if not tokens:
            if self.implicit is NOT_SET:
                return NOTHING
            return deepcopy(self.implicit)
        if self.nargs in (None, 1, "?"):
            return self._convert(tokens[0])
        return [self._convert(token) for token in tokens]

    def __repr__(self) -> str:
        return (
            f"DefaultConversion(dest={self.dest!r}, "
            f"type={getattr(self.value_type, '__name__', self.value_type)}, "
            f"nargs={self.nargs!r})"
        )


class BoundAction(BaseArgumentAction):
    """A user callable with a prefix of arguments captured at declaration time."""

    def __init__(
        self,
        dest: str,
        function: Callable[..., Any],
        *bound_args: Any,
        **bound_kwargs: Any,
    ) -> None:
        super().__init__(dest)
        if not callable(function):
            raise ArgumentDefinitionError(
                f"Action for '{dest}' must be callable, got {type(function).__name__}"
            )
        self.function = function
        self.bound_args: tuple[Any, ...] = bound_args
        self.bound_kwargs: dict[str, Any] = bound_kwargs

    def call(self, tokens: Sequence[str]) -> Any:
        args = [_unwrap(arg) for arg in self.bound_args]
        kwargs = {key: _unwrap(value) for key, value in self.bound_kwargs.items()}
        return self.function(*args, *tokens, **kwargs)

    @property
    def name(self) -> str:
        return getattr(self.function, "__qualname__", None) or repr(self.function)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dest={self.dest!r}, function={self.name}, "
            f"bound_args={self.bound_args!r})"
        )


class ConvertingAction(BoundAction):
    """
    Stores whatever the bound callable returns.

    With `store_none=False` a `None` result is treated as "nothing to store", which
    is how plain functions with no return statement behave when declared with
    `ActionKind.AUTO`.
    """

    kind = ActionKind.CONVERT

    def __init__(
        self,
        dest: str,
        function: Callable[..., Any],
        *bound_args: Any,
        store_none: bool = True,
        **bound_kwargs: Any,
    ) -> None:
        super().__init__(dest, function, *bound_args, **bound_kwargs)
        self.store_none = store_none

    def invoke(self, tokens: Sequence[str]) -> Any:
        result = self.call(tokens)
        if result is None and not self.store_none:
            return NOTHING
        return result


class SideEffectAction(BoundAction):
    """Calls the bound callable and never stores its result."""

    kind = ActionKind.SIDE_EFFECT

    def invoke(self, tokens: Sequence[str]) -> Any:
        self.call(tokens)
        return NOTHING


def make_action(
    dest: str,
    function: Callable[..., Any],
    *bound_args: Any,
    kind: ActionKind | str = ActionKind.AUTO,
    **bound_kwargs: Any,
) -> BoundAction:
    """
    Build the action variant for `function` according to `kind`.

    Args:
        dest (str): Name of the argument the action belongs to.
        function (Callable): Free function, bound method, lambda or class.
        *bound_args: Leading arguments captured at declaration time.
        kind (ActionKind | str): How the result is treated. See `ActionKind`.
        **bound_kwargs: Keyword arguments captured at declaration time.

    Returns:
        BoundAction: A `ConvertingAction` or `SideEffectAction`.

    Raises:
        ArgumentDefinitionError: If `function` is not callable, `kind` is invalid,
            or the bound arguments do not fit the callable's signature.
    """
    if not callable(function):
        raise ArgumentDefinitionError(
            f"Action for '{dest}' must be callable, got {type(function).__name__}"
        )
    if not isinstance(kind, ActionKind):
        try:
            kind = ActionKind(kind)
        except ValueError as error:
            raise ArgumentDefinitionError(str(error)) from error

    check_bound_prefix(function, bound_args, bound_kwargs, dest)

    if kind == ActionKind.AUTO:
        kind = ActionKind.SIDE_EFFECT if returns_nothing(function) else kind
    logger.debug("[%s] Declared %s action %r", dest, kind, function)

    if kind == ActionKind.SIDE_EFFECT:
        return SideEffectAction(dest, function, *bound_args, **bound_kwargs)
    return ConvertingAction(
        dest,
        function,
        *bound_args,
        store_none=kind == ActionKind.CONVERT,
        **bound_kwargs,
    )
