import sys
from io import StringIO

from rich.console import Console


def create_console() -> Console:
    """Create a new console instance (factory function).

    This is the preferred way to get a console instance for dependency injection.

    Returns:
        Console: A Rich Console; colour and markup are disabled when stdout is
        not a terminal.
    """
    if not sys.stdout.isatty():
        return Console(no_color=True, highlight=False)
    return Console()


def captured_console(width: int = 120) -> Console:
    """Return a console that captures output to a string."""
    return Console(file=StringIO(), width=width, no_color=True)
