# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ActionKind`, an enum describing what an argument's action does with
its result.

An action either converts the raw token(s) into the value that gets stored for
the argument, or it exists only for its side effects and the stored value is
left untouched. `AUTO` lets Argweave decide from the callable itself.

Supports alias coercion for shorthand or config-friendly values.

Example:
    ActionKind("convert")     → ActionKind.CONVERT
    ActionKind("store")       → ActionKind.CONVERT (via alias)
    ActionKind("void")        → ActionKind.SIDE_EFFECT (via alias)
"""
from __future__ import annotations

from enum import Enum


class ActionKind(Enum):
    """
    Defines how the result of an argument action is treated.

    Members:
        AUTO: Infer from the callable. A `-> None` return annotation means
              SIDE_EFFECT; otherwise the result is stored unless it is `None`.
        CONVERT: Always store the action's return value, `None` included.
        SIDE_EFFECT: Never store anything; the action is called for its effects.

    Aliases:
        - "store", "converting" → "convert"
        - "effect", "side-effect", "call", "void" → "side_effect"
        - "infer" → "auto"
    """

    AUTO = "auto"
    CONVERT = "convert"
    SIDE_EFFECT = "side_effect"

    @classmethod
    def choices(cls) -> list[ActionKind]:
        """Return a list of all action kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "store": "convert",
            "converting": "convert",
            "effect": "side_effect",
            "side-effect": "side_effect",
            "call": "side_effect",
            "void": "side_effect",
            "infer": "auto",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ActionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the action kind."""
        return self.value
