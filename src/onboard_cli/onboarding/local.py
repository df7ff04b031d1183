"""Local provider onboarding (Ollama, LM Studio) with endpoint preflight."""

import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from ..config.settings import Settings
from ..ui.prompter import SelectOption, WizardPrompter
from .checks import (
    PREFLIGHT_TIMEOUT_MS,
    PreflightFailureReason,
    PreflightOutcome,
    probe_local_endpoint,
)
from .custom import CustomApiResult, prompt_custom_api_config
from .presets import LocalPreset, is_local_auth_choice, resolve_preset

logger = logging.getLogger(__name__)

ProbeFn = Callable[..., Awaitable[PreflightOutcome]]
CustomPromptFn = Callable[..., Awaitable[CustomApiResult]]


class PreflightState(str, Enum):
    PROBING = "probing"
    AWAITING_DECISION = "awaiting-decision"
    RESOLVED = "resolved"


class PreflightDecision(str, Enum):
    RETRY = "retry"
    CONTINUE = "continue"


PREFLIGHT_OPTIONS = [
    SelectOption(
        value=PreflightDecision.RETRY.value,
        label="Retry preflight",
        hint="Re-check endpoint + model before continuing",
    ),
    SelectOption(
        value=PreflightDecision.CONTINUE.value,
        label="Continue setup anyway",
        hint="Use custom provider prompts to adjust model/base URL",
    ),
]


def local_setup_hint(preset: LocalPreset) -> str:
    """Setup tips shown once before the first probe."""
    if preset.is_ollama:
        step = f"- Install/start Ollama and run `ollama pull {preset.expected_model_id}`."
    else:
        step = "- Start LM Studio local server mode and load a model."
    return "\n".join(
        [
            "Local setup tips:",
            step,
            f"- onboard-cli will connect to {preset.base_url}.",
        ]
    )


def preflight_hint(preset: LocalPreset, reason: PreflightFailureReason) -> str:
    """Remediation text for a failed probe."""
    if reason is PreflightFailureReason.ENDPOINT_UNREACHABLE:
        if preset.is_ollama:
            lines = [
                f"Couldn't reach {preset.display_name} at {preset.base_url}.",
                "Start Ollama (`ollama serve`) and retry.",
                f"If this is your first run, pull a model first: `ollama pull {preset.expected_model_id}`.",
            ]
        else:
            lines = [
                f"Couldn't reach {preset.display_name} at {preset.base_url}.",
                "Start LM Studio local server mode on port 1234 and retry.",
                "Then load a model and confirm `/v1/models` returns entries.",
            ]
        return "\n".join(lines)

    if preset.is_ollama:
        remedy = f"Run: ollama pull {preset.expected_model_id}"
    else:
        remedy = "Load/select a model in LM Studio local server mode."
    return "\n".join(
        [
            f'Connected to {preset.display_name}, but model "{preset.expected_model_id}" is not listed.',
            remedy,
            "You can still continue and pick a different model ID in the next step.",
        ]
    )


async def note_local_setup(prompter: WizardPrompter, preset: LocalPreset) -> None:
    await prompter.note(local_setup_hint(preset), f"{preset.display_name} local setup")


async def note_preflight_hint(
    prompter: WizardPrompter,
    preset: LocalPreset,
    reason: PreflightFailureReason,
) -> None:
    await prompter.note(preflight_hint(preset, reason), f"{preset.display_name} preflight")


async def resolve_local_preflight(
    prompter: WizardPrompter,
    preset: LocalPreset,
    *,
    probe: ProbeFn = probe_local_endpoint,
    timeout_ms: int = PREFLIGHT_TIMEOUT_MS,
) -> PreflightOutcome:
    """
    Probe the preset's endpoint until it passes or the user chooses to continue.

    Every failure is explained with a note before the retry/continue choice.
    There is no retry limit.

    Args:
        prompter: Prompt surface
        preset: Local server preset to check
        probe: Probe coroutine, ``probe(base_url, expected_model_id, timeout_ms=...)``
        timeout_ms: Per-probe timeout

    Returns:
        The last probe outcome (informational; callers continue either way)
    """
    state = PreflightState.PROBING
    outcome: Optional[PreflightOutcome] = None
    attempts = 0

    while state is not PreflightState.RESOLVED:
        if state is PreflightState.PROBING:
            attempts += 1
            outcome = await probe(preset.base_url, preset.expected_model_id, timeout_ms=timeout_ms)
            if outcome.ok:
                logger.info(f"{preset.display_name} preflight passed (attempt {attempts})")
                state = PreflightState.RESOLVED
            else:
                logger.info(f"{preset.display_name} preflight failed: {outcome.reason.value} ({outcome.detail})")
                await note_preflight_hint(prompter, preset, outcome.reason)
                state = PreflightState.AWAITING_DECISION
        else:
            decision = await prompter.select(
                message=f"{preset.display_name} preflight check",
                options=PREFLIGHT_OPTIONS,
                initial_value=PreflightDecision.RETRY.value,
            )
            if decision == PreflightDecision.RETRY.value:
                state = PreflightState.PROBING
            else:
                logger.info(f"Continuing {preset.display_name} setup without a passing preflight")
                state = PreflightState.RESOLVED

    return outcome


async def apply_local_auth_choice(
    choice: str,
    config: Settings,
    prompter: WizardPrompter,
    *,
    probe: ProbeFn = probe_local_endpoint,
    custom_prompt: CustomPromptFn = prompt_custom_api_config,
) -> Optional[Settings]:
    """
    Configure a local provider, checking the endpoint first.

    Args:
        choice: Auth choice value, e.g. ``"ollama-local"``
        config: Current settings
        prompter: Prompt surface
        probe: Probe coroutine used by the preflight loop
        custom_prompt: Provider prompt seeded with the preset values

    Returns:
        Updated settings, or None if ``choice`` is not a local provider
    """
    if not is_local_auth_choice(choice):
        return None

    preset = resolve_preset(choice)
    await note_local_setup(prompter, preset)
    await resolve_local_preflight(
        prompter,
        preset,
        probe=probe,
        timeout_ms=config.preflight.timeout_ms,
    )

    result = await custom_prompt(
        prompter,
        config,
        initial_base_url=preset.base_url,
        initial_model_id=preset.expected_model_id,
        initial_provider_id=preset.provider_id,
        initial_alias=preset.alias,
        compatibility="openai",
        skip_compatibility_prompt=True,
    )
    return result.config
