# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declaring Argweave parsers in YAML or TOML.

Example (YAML):
    prog: render
    arguments:
      - flags: ["--size"]
        action: my_app.images.parse_geometry
      - flags: ["format"]
        action: my_app.images.create
        bind: [400, 300]
      - flags: ["-r", "--retries"]
        type: int
        default: 3
"""
from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from argweave.exceptions import ArgumentDefinitionError
from argweave.logger import logger
from argweave.parser.action_kind import ActionKind
from argweave.parser.actions import ByValue
from argweave.parser.argument_parser import ArgumentParser
from argweave.parser.parser_types import NOT_SET

TYPE_NAMES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


def import_object(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ArgumentDefinitionError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ArgumentDefinitionError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ArgumentDefinitionError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


def resolve_type(name: str) -> Any:
    """Map a configured type name or dotted path to a type."""
    if name in TYPE_NAMES:
        return TYPE_NAMES[name]
    return import_object(name)


class RawArgument(BaseModel):
    """Raw argument model for Argweave configuration."""

    flags: list[str]
    dest: str | None = None
    type: str = "str"
    default: Any = None
    nargs: int | str | None = None
    required: bool = False
    help: str = ""
    action: str | None = None
    kind: ActionKind = ActionKind.AUTO
    bind: list[Any] = Field(default_factory=list)

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("flags must contain at least one flag or name")
        return value

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ActionKind:
        if isinstance(value, ActionKind):
            return value
        return ActionKind(value)

    def add_to(self, parser: ArgumentParser) -> None:
        fields_set = self.model_fields_set
        argument = parser.add_argument(
            *self.flags,
            type=resolve_type(self.type),
            default=self.default if "default" in fields_set else NOT_SET,
            nargs=self.nargs,
            required=self.required,
            help=self.help,
            dest=self.dest,
        )
        if self.action:
            bound = [ByValue(value) for value in self.bind]
            argument.set_action(import_object(self.action), *bound, kind=self.kind)
        elif self.bind:
            raise ArgumentDefinitionError(
                f"Argument '{argument.dest}' declares bind without an action"
            )


class ParserConfig(BaseModel):
    """Argweave parser configuration model."""

    prog: str = ""
    description: str = ""
    exit_on_error: bool = False
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> ArgumentParser:
        parser = ArgumentParser(
            prog=self.prog,
            description=self.description,
            exit_on_error=self.exit_on_error,
        )
        for raw_argument in self.arguments:
            raw_argument.add_to(parser)
        return parser


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Load an `ArgumentParser` from a YAML or TOML file.

    The file should contain a dictionary with a list of arguments. Each argument
    needs at least `flags`; `type` names one of str, int, float, bool, path,
    datetime or a dotted import path, and `action` is a dotted import path to a
    callable. Values in `bind` are captured by value.

    Args:
        file_path (str | Path): Path to the config file (YAML or TOML).

    Returns:
        ArgumentParser: A parser with the configured arguments declared.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is invalid.
        ArgumentDefinitionError: If an argument declaration is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "prog: 'render'\n"
            "arguments:\n"
            "  - flags: ['--size']\n"
            "    action: 'my_module.parse_size'"
        )

    logger.debug("Loading parser configuration from %s", path)
    return ParserConfig.model_validate(raw_config).to_parser()
