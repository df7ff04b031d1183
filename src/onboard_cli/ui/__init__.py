"""Rich terminal UI pieces for onboard-cli."""

from onboard_cli.ui.console import captured_console, create_console
from onboard_cli.ui.formatters import format_error_message, format_success_message
from onboard_cli.ui.prompter import RichPrompter, SelectOption, WizardPrompter

__all__ = [
    "RichPrompter",
    "SelectOption",
    "WizardPrompter",
    "captured_console",
    "create_console",
    "format_error_message",
    "format_success_message",
]
