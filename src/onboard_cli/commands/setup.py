"""Onboarding and preflight commands for onboard-cli."""

import asyncio
import logging
import sys
from typing import Optional

import click
from rich.console import Console

from ..config.settings import ConfigManager, Settings
from ..exceptions import ConfigError
from ..onboarding.auth_choices import (
    GROUP_TITLES,
    build_auth_choice_groups,
    build_auth_choice_options,
)
from ..onboarding.checks import (
    PreflightOutcome,
    display_preflight_results,
    probe_local_endpoint,
)
from ..onboarding.custom import prompt_custom_api_config
from ..onboarding.local import apply_local_auth_choice
from ..onboarding.presets import LOCAL_AUTH_CHOICES, AuthChoice, resolve_preset
from ..ui.formatters import format_error_message, format_success_message
from ..ui.prompter import RichPrompter

logger = logging.getLogger(__name__)

AUTH_CHOICE_VALUES = [choice.value for choice in AuthChoice]
LOCAL_CHOICE_VALUES = [choice.value for choice in LOCAL_AUTH_CHOICES]


async def _run_onboarding(
    choice: Optional[str],
    config: Settings,
    prompter: RichPrompter,
) -> Settings:
    """Pick an auth choice (if not given) and run the matching handler."""
    if choice is None:
        choice = await prompter.select(
            message="How should the assistant reach a model?",
            options=[option.as_select_option() for option in build_auth_choice_options()],
            initial_value=AuthChoice.OLLAMA_LOCAL.value,
        )

    updated = await apply_local_auth_choice(choice, config, prompter, probe=probe_local_endpoint)
    if updated is None:
        result = await prompt_custom_api_config(prompter, config)
        updated = result.config
    return updated


@click.command()
@click.option(
    "--auth-choice",
    type=click.Choice(AUTH_CHOICE_VALUES),
    help="Provider to configure (prompted if omitted)",
)
@click.pass_context
def onboard(ctx: click.Context, auth_choice: Optional[str]) -> None:
    """
    Configure the model provider.

    Local providers (Ollama, LM Studio) are checked first: the server's
    /models listing must be reachable and include the default model.
    You can retry the check or continue and adjust the settings by hand.
    """
    console: Console = ctx.obj["console"]
    manager: ConfigManager = ctx.obj["config_manager"]
    settings: Settings = ctx.obj["settings"]

    prompter = RichPrompter(console=console)
    updated = asyncio.run(_run_onboarding(auth_choice, settings, prompter))
    try:
        manager.save(updated)
    except ConfigError as e:
        console.print(format_error_message(str(e), suggestion="Check that the config directory is writable."))
        sys.exit(1)

    console.print(
        format_success_message(
            f"Configuration saved to {manager.config_path}",
            details=f"Default model: {updated.default_model}",
        )
    )


async def _probe_presets(choices: list[str], timeout_ms: int) -> list[tuple[str, str, PreflightOutcome]]:
    results = []
    for choice in choices:
        preset = resolve_preset(choice)
        outcome = await probe_local_endpoint(
            preset.base_url, preset.expected_model_id, timeout_ms=timeout_ms
        )
        results.append((preset.display_name, preset.base_url, outcome))
    return results


@click.command()
@click.option(
    "--auth-choice",
    type=click.Choice(LOCAL_CHOICE_VALUES),
    help="Only check this local provider (default: all)",
)
@click.pass_context
def preflight(ctx: click.Context, auth_choice: Optional[str]) -> None:
    """
    Check local model servers without changing configuration.

    Exits with status 1 if any checked server is unreachable or does not
    list its default model.
    """
    console: Console = ctx.obj["console"]
    settings: Settings = ctx.obj["settings"]

    choices = [auth_choice] if auth_choice else LOCAL_CHOICE_VALUES
    results = asyncio.run(_probe_presets(choices, settings.preflight.timeout_ms))

    if not display_preflight_results(results, console):
        sys.exit(1)


@click.command()
@click.pass_context
def providers(ctx: click.Context) -> None:
    """List the provider choices available to `onboard`."""
    console: Console = ctx.obj["console"]

    for group, options in build_auth_choice_groups().items():
        console.print(f"\n[bold]{GROUP_TITLES[group]}[/bold]")
        for option in options:
            console.print(f"  [cyan]{option.value:<16}[/cyan] {option.label} [dim]({option.hint})[/dim]")
