"""Exception hierarchy for onboard-cli."""


class OnboardError(Exception):
    """Base class for all onboard-cli errors."""


class ConfigError(OnboardError):
    """Raised when the configuration file cannot be loaded or saved."""


class UnknownAuthChoiceError(OnboardError, ValueError):
    """Raised when an auth choice does not name a local provider preset."""

    def __init__(self, choice: object) -> None:
        super().__init__(f"Not a local auth choice: {choice!r}")
        self.choice = choice
