# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argweave output."""
from rich.console import Console

from argweave.themes import get_theme

console = Console(theme=get_theme(), stderr=True)
