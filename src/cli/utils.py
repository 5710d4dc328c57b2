"""Shared utilities for CLI commands."""

from rich.console import Console

# Rich console for colored output
console = Console()
