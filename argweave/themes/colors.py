# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour constants and the rich `Theme` used for Argweave console output.

Usage:
    from argweave.themes import OneColors
    console.print("error", style=OneColors.DARK_RED)
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired colour palette as rich style strings."""

    DARK_RED = "#BE5046"
    BLUE = "#61AFEF"

    BLUE_b = f"bold {BLUE}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    """Return the rich theme with semantic style names used by Argweave."""
    return Theme(
        {
            "error": OneColors.DARK_RED_b,
            "usage": OneColors.BLUE_b,
        }
    )
