"""Unit tests for the Rich-backed prompter."""

import logging

import pytest

from onboard_cli.config.settings import LoggingConfig
from onboard_cli.logging_setup import configure_logging
from onboard_cli.ui import prompter as prompter_module
from onboard_cli.ui.console import captured_console
from onboard_cli.ui.prompter import RichPrompter, SelectOption

OPTIONS = [
    SelectOption(value="retry", label="Retry preflight", hint="Re-check endpoint + model before continuing"),
    SelectOption(value="continue", label="Continue setup anyway", hint="Use custom provider prompts"),
]


@pytest.fixture
def console():
    return captured_console()


@pytest.fixture
def int_answers(monkeypatch):
    """Queue answers for IntPrompt.ask and record the defaults it was given."""
    answers: list[int] = []
    defaults: list[int] = []

    def ask(prompt, default=None, **kwargs):
        defaults.append(default)
        return answers.pop(0) if answers else default

    monkeypatch.setattr(prompter_module.IntPrompt, "ask", staticmethod(ask))
    return answers, defaults


@pytest.mark.asyncio
async def test_note_renders_title_and_body(console):
    await RichPrompter(console=console).note("Couldn't reach Ollama at http://127.0.0.1:11434/v1.", "Ollama preflight")

    output = console.file.getvalue()
    assert "Ollama preflight" in output
    assert "Couldn't reach Ollama" in output


@pytest.mark.asyncio
async def test_select_default_is_initial_value(console, int_answers):
    answers, defaults = int_answers

    value = await RichPrompter(console=console).select("Ollama preflight check", OPTIONS, initial_value="continue")

    assert value == "continue"
    assert defaults == [2]
    output = console.file.getvalue()
    assert "Ollama preflight check" in output
    assert "Retry preflight" in output


@pytest.mark.asyncio
async def test_select_reasks_out_of_range(console, int_answers):
    answers, defaults = int_answers
    answers.extend([0, 3, 1])

    value = await RichPrompter(console=console).select("Pick", OPTIONS, initial_value="retry")

    assert value == "retry"
    assert len(defaults) == 3
    assert "between 1 and 2" in console.file.getvalue()


@pytest.mark.asyncio
async def test_select_requires_options(console):
    with pytest.raises(ValueError):
        await RichPrompter(console=console).select("Pick", [])


def test_configure_logging_with_file(tmp_path):
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "onboard.log"
    try:
        configure_logging(LoggingConfig(level="WARNING", file=str(log_file)))

        assert root.level == logging.WARNING
        assert log_file.parent.exists()
        logging.getLogger("onboard_cli.test").warning("probe failed")
        for handler in root.handlers:
            handler.flush()
        assert "probe failed" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


def test_configure_logging_debug_flag():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        configure_logging(LoggingConfig(), debug=True)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
