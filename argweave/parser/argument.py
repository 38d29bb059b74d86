# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass used by `ArgumentParser` to represent one
declared command-line parameter.

An `Argument` carries what the front-end needs to match tokens (flags, arity,
whether it is positional or required) and owns the `ArgumentBinding` that decides
what gets stored once tokens are matched.

Arguments are created with `ArgumentParser.add_argument()`, which returns the
`Argument` so defaults and actions can be attached fluently:

    parser.add_argument("--size").set_action(Image.resize, ByReference(img))
    parser.add_argument("input").set_default("bar").set_action(pick_choice)

Key Attributes:
- `flags`: One or more short/long flags (e.g. `-v`, `--verbose`), or a single name
- `dest`: Name used as the key in parsed results
- `nargs`: Number of tokens (`None`, `int`, `'?'`, `'*'`, `'+'`)
- `binding`: Default value and action for the argument
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from argweave.parser.action_kind import ActionKind
from argweave.parser.binding import ArgumentBinding
from argweave.parser.parser_types import NOT_SET


@dataclass(eq=False)
class Argument:
    """
    Represents a command-line argument.

    Attributes:
        flags (tuple[str, ...]): Short and long flags for the argument.
        dest (str): The destination name for the argument.
        nargs (int | str | None): Number of tokens expected.
        required (bool): True if the argument must appear on the command line.
        help (str): Help text for the argument.
        positional (bool): True if the argument is positional (no leading - or --).
        binding (ArgumentBinding): Default value and action for the argument.
    """

    flags: tuple[str, ...]
    dest: str
    nargs: int | str | None = None
    required: bool = False
    help: str = ""
    positional: bool = False
    binding: ArgumentBinding = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.binding is None:
            self.binding = ArgumentBinding(self.dest, nargs=self.nargs)

    @property
    def type(self) -> Any:
        return self.binding.value_type

    @property
    def default(self) -> Any:
        return self.binding.default

    def set_default(self, value: Any) -> Argument:
        """Set the value used when the argument does not appear. Returns self."""
        self.binding.set_default(value)
        return self

    def set_action(
        self,
        function: Callable[..., Any],
        *bound_args: Any,
        kind: ActionKind | str = ActionKind.AUTO,
        **bound_kwargs: Any,
    ) -> Argument:
        """Attach an action to the argument. Returns self. See `ArgumentBinding.set_action`."""
        self.binding.set_action(function, *bound_args, kind=kind, **bound_kwargs)
        return self

    def takes_no_values(self) -> bool:
        return self.nargs == 0

    def get_usage_text(self) -> str:
        """Get the usage text for the argument, e.g. `--size SIZE` or `[files ...]`."""
        name = self.dest if self.positional else self.dest.upper()
        if self.nargs == "?":
            name = f"[{name}]"
        elif self.nargs == "*":
            name = f"[{name} ...]"
        elif self.nargs == "+":
            name = f"{name} [{name} ...]"
        elif isinstance(self.nargs, int):
            name = " ".join([name] * self.nargs)
        if self.positional:
            return name
        return f"{self.flags[0]} {name}".rstrip()

    def __str__(self) -> str:
        return (
            f"Argument(dest={self.dest!r}, flags={self.flags}, nargs={self.nargs!r}, "
            f"required={self.required}, default="
            f"{'<unset>' if self.default is NOT_SET else repr(self.default)})"
        )
