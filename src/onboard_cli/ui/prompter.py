"""Interactive prompt surface used by the onboarding flows."""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt
from rich.table import Table
from rich.text import Text


@dataclass(frozen=True)
class SelectOption:
    """One entry of a select menu."""

    value: str
    label: str
    hint: str = ""


class WizardPrompter(Protocol):
    """Async prompt operations the onboarding flows depend on."""

    async def note(self, body: str, title: str) -> None: ...

    async def select(
        self,
        message: str,
        options: Sequence[SelectOption],
        initial_value: Optional[str] = None,
    ) -> str: ...

    async def text(self, message: str, default: str = "") -> str: ...

    async def confirm(self, message: str, default: bool = True) -> bool: ...


class RichPrompter:
    """WizardPrompter backed by Rich output and prompt_toolkit input."""

    def __init__(
        self,
        console: Optional[Console] = None,
        session: Optional[PromptSession] = None,
    ) -> None:
        """
        Initialize the prompter.

        Args:
            console: Rich Console instance for output (injected dependency)
            session: prompt_toolkit session for free-text input (created on first use)
        """
        self.console = console or Console()
        self._session = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession()
        return self._session

    async def note(self, body: str, title: str) -> None:
        self.console.print(
            Panel(Text(body), title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan", padding=(1, 2))
        )

    async def select(
        self,
        message: str,
        options: Sequence[SelectOption],
        initial_value: Optional[str] = None,
    ) -> str:
        """
        Present a numbered menu and return the chosen option's value.

        Args:
            message: Question shown above the menu
            options: Options to choose from (must be non-empty)
            initial_value: Value selected when the user just presses Enter

        Returns:
            The ``value`` of the selected option
        """
        if not options:
            raise ValueError("select() requires at least one option")

        default_index = 1
        for i, option in enumerate(options, 1):
            if option.value == initial_value:
                default_index = i
                break

        table = Table(title=message, show_header=True, title_style="bold")
        table.add_column("ID", style="cyan", width=4)
        table.add_column("Option", style="white")
        table.add_column("Hint", style="dim")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), option.label, option.hint)
        self.console.print(table)

        while True:
            choice = IntPrompt.ask(
                "Select option",
                default=default_index,
                show_default=True,
                console=self.console,
            )
            if 1 <= choice <= len(options):
                return options[choice - 1].value
            self.console.print(f"[red]Please enter a number between 1 and {len(options)}[/red]")

    async def text(self, message: str, default: str = "") -> str:
        return await self.session.prompt_async(f"{message}: ", default=default)

    async def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
