# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the front-end that matches raw
command-line tokens to declared arguments and hands them to each argument's
binding for resolution.

The parser is deliberately small. It declares arguments, tokenizes option syntax,
counts tokens per argument according to `nargs`, and checks for missing or unknown
arguments. What gets stored for an argument is decided by its `ArgumentBinding`,
and values are read back through `ParsedArguments` with a type check.

Public Interface:
- `add_argument(...)`: Declare an argument; returns the `Argument` for chaining.
- `parse_args(...)`: Resolve a token list into `ParsedArguments`.
- `get(dest, expected_type)`: Typed access to the most recent parse.

Example Usage:
    parser = ArgumentParser(prog="render")
    parser.add_argument("--size").set_action(Image.resize, ByReference(image))
    parser.add_argument("format").set_action(Image.create, 400, 300)

    parsed = parser.parse_args(["--size", "320x98", "720p"])
    parsed.get("format", Image)

Parsing Rules:
- Options may be given as `--name value` or `--name=value`.
- `--` ends option parsing; everything after it is positional.
- An argument may appear at most once per parse.
- Each parse starts from the declared defaults; nothing carries over between parses.
"""
from __future__ import annotations

import re
import sys
from typing import Any, Callable, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from argweave.console import console
from argweave.exceptions import ArgumentDefinitionError, ArgumentParseError, ArgweaveError
from argweave.logger import logger
from argweave.parser.action_kind import ActionKind
from argweave.parser.argument import Argument
from argweave.parser.binding import ArgumentBinding
from argweave.parser.parser_types import NOT_SET, ArgumentState
from argweave.parser.results import ParsedArguments
from argweave.parser.value_cell import TypedValueCell

_NEGATIVE_NUMBER = re.compile(r"^-\d+(\.\d+)?([eE][-+]?\d+)?$")


class ArgumentParser:
    """
    Declarative argument parser built on per-argument bindings and typed value cells.

    Features:
    - Positional and optional arguments with short and long flags.
    - Fixed and variable arity (`nargs`).
    - Default values and actions, including actions with bound arguments.
    - Typed retrieval of results.
    - Optional conversion of parse errors into a printed message and exit code 2.
    """

    def __init__(
        self,
        prog: str = "",
        description: str = "",
        exit_on_error: bool = False,
    ) -> None:
        self.console: Console = console
        self.prog: str = prog
        self.description: str = description
        self.exit_on_error: bool = exit_on_error
        self._arguments: list[Argument] = []
        self._positional: dict[str, Argument] = {}
        self._keyword: dict[str, Argument] = {}
        self._dest_set: set[str] = set()
        self._last_result: ParsedArguments | None = None

    def _is_positional(self, flags: tuple[str, ...]) -> bool:
        """Check if the flags are positional."""
        positional = False
        if any(not flag.startswith("-") for flag in flags):
            positional = True

        if positional and len(flags) > 1:
            raise ArgumentDefinitionError(
                "Positional arguments cannot have multiple flags"
            )
        return positional

    def _get_dest_from_flags(self, flags: tuple[str, ...], dest: str | None) -> str:
        """Convert flags to a destination name."""
        if not dest:
            for flag in flags:
                if flag.startswith("--"):
                    dest = flag.lstrip("-").replace("-", "_").lower()
                    break
                elif flag.startswith("-"):
                    dest = flag.lstrip("-").replace("-", "_").lower()
                else:
                    dest = flag.replace("-", "_").lower()
        assert dest is not None, "dest should not be None"
        if not dest.replace("_", "").isalnum():
            raise ArgumentDefinitionError(
                "dest must be a valid identifier (letters, digits, and underscores only)"
            )
        if dest[0].isdigit():
            raise ArgumentDefinitionError("dest must not start with a digit")
        return dest

    def _validate_flags(self, flags: tuple[str, ...]) -> None:
        """Validate the flags provided for the argument."""
        if not flags:
            raise ArgumentDefinitionError("No flags provided")
        for flag in flags:
            if not isinstance(flag, str):
                raise ArgumentDefinitionError(f"Flag '{flag}' must be a string")
            if flag in ("-", "--"):
                raise ArgumentDefinitionError(f"Flag '{flag}' is reserved")
            if flag.startswith("--") and len(flag) < 3:
                raise ArgumentDefinitionError(
                    f"Flag '{flag}' must be at least 3 characters long"
                )
            if flag.startswith("-") and not flag.startswith("--") and len(flag) > 2:
                raise ArgumentDefinitionError(
                    f"Flag '{flag}' must be a single character or start with '--'"
                )
            if flag.startswith("-") and "=" in flag:
                raise ArgumentDefinitionError(f"Flag '{flag}' must not contain '='")
            if flag in self._keyword:
                existing = self._keyword[flag]
                raise ArgumentDefinitionError(
                    f"Flag '{flag}' is already used by argument '{existing.dest}'"
                )

    def _validate_nargs(
        self, nargs: int | str | None, positional: bool
    ) -> int | str | None:
        if nargs is None:
            return None
        allowed_nargs = ("?", "*", "+")
        if isinstance(nargs, bool):
            raise ArgumentDefinitionError(f"nargs must be an int or one of {allowed_nargs}")
        if isinstance(nargs, int):
            if nargs < 0:
                raise ArgumentDefinitionError("nargs must not be negative")
            if nargs == 0 and positional:
                raise ArgumentDefinitionError(
                    "nargs=0 is only allowed for optional arguments"
                )
        elif isinstance(nargs, str):
            if nargs not in allowed_nargs:
                raise ArgumentDefinitionError(f"Invalid nargs value: {nargs}")
        else:
            raise ArgumentDefinitionError(
                f"nargs must be an int or one of {allowed_nargs}"
            )
        return nargs

    def _register_argument(self, argument: Argument) -> None:
        self._dest_set.add(argument.dest)
        self._arguments.append(argument)
        if argument.positional:
            self._positional[argument.dest] = argument
        else:
            for flag in argument.flags:
                self._keyword[flag] = argument

    def add_argument(
        self,
        *flags: str,
        type: Any = str,
        default: Any = NOT_SET,
        nargs: int | str | None = None,
        required: bool = False,
        help: str = "",
        dest: str | None = None,
        implicit: Any = NOT_SET,
        action: Callable[..., Any] | None = None,
        bind: Sequence[Any] = (),
        kind: ActionKind | str = ActionKind.AUTO,
    ) -> Argument:
        """
        Define a new argument for the parser.

        Args:
            *flags (str): The flag(s) or name identifying the argument (e.g., "-v", "--verbose").
            type (Any): Type used to convert tokens when no action is declared.
            default (Any): Value used when the argument does not appear.
            nargs (int | str | None): Number of tokens the argument consumes.
            required (bool): Whether an optional argument must appear.
            help (str): Help text for the argument.
            dest (str | None): Custom destination name in the results.
            implicit (Any): Value stored when the argument appears with no tokens.
            action (Callable | None): Action to run when the argument appears.
            bind (Sequence): Leading arguments bound to `action`.
            kind (ActionKind | str): How the action's result is treated.

        Returns:
            Argument: The declared argument, for fluent `set_default` / `set_action`.

        Raises:
            ArgumentDefinitionError: If the declaration is invalid.
        """
        self._validate_flags(flags)
        positional = self._is_positional(flags)
        dest = self._get_dest_from_flags(flags, dest)
        if dest in self._dest_set:
            raise ArgumentDefinitionError(
                f"Destination '{dest}' is already defined. "
                "Define a unique 'dest' for each argument."
            )
        nargs = self._validate_nargs(nargs, positional)
        if required and positional:
            raise ArgumentDefinitionError(
                "'required' is not valid for positional arguments; use nargs instead"
            )
        if bind and action is None:
            raise ArgumentDefinitionError("bind requires an action")

        binding = ArgumentBinding(
            dest, value_type=type, nargs=nargs, default=default, implicit=implicit
        )
        if action is not None:
            binding.set_action(action, *bind, kind=kind)

        argument = Argument(
            flags=flags,
            dest=dest,
            nargs=nargs,
            required=required,
            help=help,
            positional=positional,
            binding=binding,
        )
        self._register_argument(argument)
        logger.debug("[%s] Declared %s", dest, argument)
        return argument

    def get_argument(self, dest: str) -> Argument | None:
        """Return the Argument object for a given destination name."""
        return next((a for a in self._arguments if a.dest == dest), None)

    @property
    def arguments(self) -> list[Argument]:
        return list(self._arguments)

    def _is_required(self, argument: Argument) -> bool:
        if not argument.positional:
            return argument.required
        if argument.binding.has_default:
            return False
        return argument.nargs not in ("?", "*")

    def _raise_unrecognized(self, token: str) -> None:
        close = [flag for flag in self._keyword if flag.startswith(token[:3])]
        if close:
            raise ArgumentParseError(
                f"Unrecognized option '{token}'. Did you mean one of: {', '.join(close)}?"
            )
        raise ArgumentParseError(f"Unrecognized option '{token}'")

    def _looks_like_option(self, token: str) -> bool:
        return (
            token.startswith("-")
            and token != "-"
            and not _NEGATIVE_NUMBER.match(token)
        )

    def _is_flag(self, token: str) -> bool:
        """True for a declared flag, bare or in `--name=value` form."""
        if token in self._keyword:
            return True
        name, has_inline, _ = token.partition("=")
        return bool(has_inline) and token.startswith("-") and name in self._keyword

    def _consume_option_values(
        self, args: list[str], start: int, spec: Argument, end: int
    ) -> tuple[list[str], int]:
        """Collect the values following an option, stopping at the next known flag."""
        values: list[str] = []
        i = start
        if isinstance(spec.nargs, int):
            while len(values) < spec.nargs and i < end and not self._is_flag(args[i]):
                values.append(args[i])
                i += 1
            if len(values) != spec.nargs:
                raise ArgumentParseError(
                    f"Argument '{spec.flags[0]}' expects {spec.nargs} value(s), "
                    f"got {len(values)}"
                )
            return values, i
        if spec.nargs in ("*", "+"):
            while i < end and not self._is_flag(args[i]):
                values.append(args[i])
                i += 1
            if spec.nargs == "+" and not values:
                raise ArgumentParseError(
                    f"Expected at least one value for '{spec.flags[0]}'"
                )
            return values, i
        if i < end and not self._is_flag(args[i]):
            return [args[i]], i + 1
        if spec.nargs is None:
            raise ArgumentParseError(f"Argument '{spec.flags[0]}' requires a value")
        return [], i

    def _consume_positionals(
        self,
        tokens: list[str],
        arg_states: dict[str, ArgumentState],
        cells: dict[str, TypedValueCell],
    ) -> int:
        """Distribute a run of positional tokens over the unconsumed positionals."""
        remaining = [
            spec for spec in self._positional.values() if not arg_states[spec.dest].consumed
        ]
        i = 0
        for index, spec in enumerate(remaining):
            available = len(tokens) - i
            if available <= 0:
                break
            min_required = 0
            for next_spec in remaining[index + 1 :]:
                if not self._is_required(next_spec):
                    continue
                if isinstance(next_spec.nargs, int):
                    min_required += next_spec.nargs
                else:
                    min_required += 1
            budget = max(available - min_required, 0)

            if spec.nargs in ("*", "+"):
                take = budget
            elif isinstance(spec.nargs, int):
                take = spec.nargs if available >= spec.nargs else available
            else:
                take = min(1, budget) if not self._is_required(spec) else 1

            if take == 0:
                continue
            values = tokens[i : i + take]
            if isinstance(spec.nargs, int) and len(values) != spec.nargs:
                raise ArgumentParseError(
                    f"Argument '{spec.dest}' expects {spec.nargs} value(s), got {len(values)}"
                )
            i += take
            self._resolve(spec, values, arg_states, cells)
        return i

    def _resolve(
        self,
        spec: Argument,
        values: list[str],
        arg_states: dict[str, ArgumentState],
        cells: dict[str, TypedValueCell],
    ) -> None:
        state = arg_states[spec.dest]
        if state.consumed:
            name = spec.dest if spec.positional else "/".join(spec.flags)
            raise ArgumentParseError(f"Argument '{name}' was given more than once")
        state.set_consumed(values)
        spec.binding.resolve(values).apply(cells[spec.dest])

    def _parse(self, args: list[str]) -> ParsedArguments:
        cells = {arg.dest: TypedValueCell(arg.dest) for arg in self._arguments}
        for arg in self._arguments:
            arg.binding.seed(cells[arg.dest])
        arg_states = {arg.dest: ArgumentState(arg) for arg in self._arguments}

        end = args.index("--") if "--" in args else len(args)
        trailing = args[end + 1 :]
        pending: list[str] = []

        i = 0
        while i < end:
            token = args[i]
            name, has_inline, inline = token.partition("=")
            if self._is_flag(token):
                if pending:
                    self._flush_positionals(pending, arg_states, cells)
                    pending = []
                spec = self._keyword[token if token in self._keyword else name]
                if token in self._keyword:
                    values, i = self._consume_option_values(args, i + 1, spec, end)
                else:
                    if spec.takes_no_values() or (
                        isinstance(spec.nargs, int) and spec.nargs > 1
                    ):
                        raise ArgumentParseError(
                            f"Argument '{name}' does not accept an inline value"
                        )
                    values, i = [inline], i + 1
                self._resolve(spec, values, arg_states, cells)
            elif self._looks_like_option(token):
                self._raise_unrecognized(token)
            else:
                pending.append(token)
                i += 1

        pending.extend(trailing)
        if pending:
            self._flush_positionals(pending, arg_states, cells)

        for spec in self._arguments:
            if self._is_required(spec) and not arg_states[spec.dest].consumed:
                help_text = f" help: {spec.help}" if spec.help else ""
                raise ArgumentParseError(
                    f"Missing required argument '{spec.dest}': "
                    f"{spec.get_usage_text()}{help_text}"
                )

        present = {dest for dest, state in arg_states.items() if state.consumed}
        logger.debug("Parsed %d token(s); present: %s", len(args), sorted(present))
        return ParsedArguments(cells, present)

    def _flush_positionals(
        self,
        tokens: list[str],
        arg_states: dict[str, ArgumentState],
        cells: dict[str, TypedValueCell],
    ) -> None:
        consumed = self._consume_positionals(tokens, arg_states, cells)
        if consumed < len(tokens):
            extra = tokens[consumed:]
            plural = "s" if len(extra) > 1 else ""
            raise ArgumentParseError(
                f"Unexpected positional argument{plural}: {', '.join(extra)}"
            )

    def parse_args(self, args: Sequence[str] | None = None) -> ParsedArguments:
        """
        Parse tokens into typed results.

        Every call starts from the declared defaults. Actions run in the order their
        arguments are matched.

        Args:
            args (Sequence[str] | None): Tokens to parse, without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            ParsedArguments: Typed access to the resolved values.

        Raises:
            ArgumentParseError: If tokens cannot be matched to arguments.
            ConversionError: If a token cannot be converted to its argument's type.
            Exception: Anything raised by a user action, unchanged.
        """
        if args is None:
            args = sys.argv[1:]
        self._last_result = None
        try:
            result = self._parse(list(args))
        except ArgweaveError as error:
            if not self.exit_on_error:
                raise
            self.error(str(error))
        self._last_result = result
        return result

    def get(self, dest: str, expected_type: Any = None) -> Any:
        """
        Return the value of `dest` from the most recent parse.

        Raises:
            ArgumentParseError: If nothing has been parsed yet.
            KeyError: If no argument named `dest` was declared.
            EmptyValueError: If the argument has no value.
            TypeMismatchError: If the stored value is not an `expected_type`.
        """
        if self._last_result is None:
            raise ArgumentParseError("No arguments have been parsed yet")
        return self._last_result.get(dest, expected_type)

    def get_usage(self) -> str:
        """Return a one-line usage string."""
        parts = [self.prog] if self.prog else []
        for arg in self._arguments:
            if arg.positional:
                parts.append(arg.get_usage_text())
            elif arg.required:
                parts.append(arg.get_usage_text())
            else:
                parts.append(f"[{arg.get_usage_text()}]")
        return " ".join(parts)

    def error(self, message: str) -> NoReturn:
        """Print `message` with the usage line and exit with status 2."""
        self.console.print(f"[usage]usage:[/] {escape(self.get_usage())}")
        self.console.print(f"[error]error:[/] {escape(message)}")
        raise SystemExit(2)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(arg.positional for arg in self._arguments)
        required = sum(self._is_required(arg) for arg in self._arguments)
        return (
            f"ArgumentParser(args={len(self._arguments)}, "
            f"flags={len(self._keyword)}, positional={positional}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
