"""Shared pytest fixtures for onboard-cli tests.

Fixtures are organized by category:
- Prompt mocks: a WizardPrompter stand-in whose methods are AsyncMocks
- HTTP mocks: httpx transports serving canned /models responses
- Configuration: default settings and temporary config paths
"""

from pathlib import Path
from typing import Callable, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from onboard_cli.config.settings import Settings
from onboard_cli.onboarding.custom import CustomApiResult


# =============================================================================
# Prompt Mocks
# =============================================================================


class FakePrompter:
    """WizardPrompter whose operations are recorded AsyncMocks.

    ``text`` echoes the default it is given, ``select`` returns
    ``select_value`` and ``confirm`` returns its default.
    """

    def __init__(self, select_value: str = "continue") -> None:
        self.note = AsyncMock(return_value=None)
        self.select = AsyncMock(return_value=select_value)
        self.text = AsyncMock(side_effect=lambda message, default="": default)
        self.confirm = AsyncMock(side_effect=lambda message, default=True: default)

    def note_titles(self) -> list[str]:
        return [call.args[1] for call in self.note.await_args_list]

    def note_bodies(self, title: Optional[str] = None) -> list[str]:
        return [
            call.args[0]
            for call in self.note.await_args_list
            if title is None or call.args[1] == title
        ]


@pytest.fixture
def prompter() -> FakePrompter:
    """
    Prompter that continues past every preflight failure.

    Example:
        async def test_flow(prompter):
            await apply_local_auth_choice("ollama-local", Settings(), prompter, ...)
            assert "Ollama local setup" in prompter.note_titles()
    """
    return FakePrompter()


@pytest.fixture
def make_prompter() -> Callable[..., FakePrompter]:
    return FakePrompter


# =============================================================================
# HTTP Mocks
# =============================================================================


class CountingTransport(httpx.MockTransport):
    """MockTransport that records every request it serves."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def make_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], CountingTransport]:
    return CountingTransport


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Default settings with no providers configured."""
    return Settings()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file path inside a temporary directory (file not created)."""
    return tmp_path / ".onboard_cli" / "config.toml"


@pytest.fixture
def custom_prompt(settings: Settings) -> AsyncMock:
    """Custom provider prompt that returns the settings unchanged."""
    return AsyncMock(
        return_value=CustomApiResult(config=settings, provider_id="stub", model_ref="stub/model")
    )
