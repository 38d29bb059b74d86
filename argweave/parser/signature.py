# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides utilities for introspecting the callables attached to arguments as
actions.

Functions:
- safe_signature: `inspect.signature` that returns None for callables without one.
- returns_nothing: Check whether a callable is annotated as returning `None`.
- check_bound_prefix: Validate that leading bound arguments fit a callable.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, get_type_hints

from argweave.exceptions import ArgumentDefinitionError
from argweave.logger import logger


def safe_signature(func: Callable[..., Any]) -> inspect.Signature | None:
    """Return the signature of `func`, or None if it cannot be introspected."""
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        logger.debug("No signature available for %r", func)
        return None


def returns_nothing(func: Callable[..., Any]) -> bool:
    """
    Return True when `func` is annotated to return `None`.

    Handles string annotations produced by `from __future__ import annotations`.
    Unannotated callables return False.
    """
    signature = safe_signature(func)
    if signature is None:
        return False
    annotation = signature.return_annotation
    if annotation is inspect.Signature.empty:
        return False
    if annotation is None or annotation is type(None) or annotation == "None":
        return True
    if isinstance(annotation, str):
        target = inspect.unwrap(func)
        target = getattr(target, "__func__", target)
        try:
            hints = get_type_hints(target)
        except (NameError, TypeError, AttributeError):
            return False
        return hints.get("return", object) is type(None)
    return False


def check_bound_prefix(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    dest: str,
) -> None:
    """
    Validate that `args` and `kwargs` can be bound ahead of the raw token(s).

    Args:
        func (Callable): The action callable.
        args (tuple): Leading positional arguments captured at declaration time.
        kwargs (dict): Keyword arguments captured at declaration time.
        dest (str): Argument name, for the error message.

    Raises:
        ArgumentDefinitionError: If the callable cannot accept the bound arguments.
    """
    signature = safe_signature(func)
    if signature is None:
        return
    try:
        signature.bind_partial(*args, **kwargs)
    except TypeError as error:
        raise ArgumentDefinitionError(
            f"Action {getattr(func, '__qualname__', func)!r} for '{dest}' "
            f"cannot accept the bound arguments: {error}"
        ) from error
