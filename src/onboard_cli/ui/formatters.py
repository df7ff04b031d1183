"""Message formatting utilities for onboard-cli.

Panels for the outcome of a command, kept consistent across commands.
"""

from typing import Optional

from rich.panel import Panel
from rich.text import Text


def format_error_message(error: str, suggestion: Optional[str] = None) -> Panel:
    """Format error message with optional suggestion.

    Args:
        error: Error message
        suggestion: Optional suggestion for fixing the error

    Returns:
        Panel: Formatted error panel
    """
    text = Text()
    text.append("✗ ", style="bold red")
    text.append(error, style="red")

    if suggestion:
        text.append("\n\n")
        text.append("Suggestion: ", style="bold yellow")
        text.append(suggestion, style="yellow")

    return Panel(
        text,
        title="[bold red]Error[/bold red]",
        border_style="red",
        padding=(1, 2),
        expand=False,
    )


def format_success_message(message: str, details: Optional[str] = None) -> Panel:
    """Format success message.

    Args:
        message: Success message text
        details: Optional extra lines shown dimmed below the message

    Returns:
        Panel: Formatted success panel
    """
    text = Text()
    text.append("✓ ", style="bold green")
    text.append(message, style="green")

    if details:
        text.append("\n\n")
        text.append(details, style="dim")

    return Panel(
        text,
        title="[bold green]Success[/bold green]",
        border_style="green",
        padding=(1, 2),
        expand=False,
    )
