"""Shared rich console for CLI output."""

from rich.console import Console

# Singleton console instance
_console: Console | None = None


def get_console() -> Console:
    """Get the shared console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console
