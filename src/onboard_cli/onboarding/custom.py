"""Prompt for a custom OpenAI/Anthropic-compatible provider."""

import logging
from dataclasses import dataclass

from ..config.settings import SUPPORTED_APIS, ProviderConfig, Settings
from ..ui.prompter import SelectOption, WizardPrompter

logger = logging.getLogger(__name__)

COMPATIBILITY_OPTIONS = [
    SelectOption(value="openai", label="OpenAI-compatible", hint="/v1/models + /v1/chat/completions"),
    SelectOption(value="anthropic", label="Anthropic-compatible", hint="/v1/messages"),
]


@dataclass
class CustomApiResult:
    """Outcome of the custom provider prompt."""

    config: Settings
    provider_id: str
    model_ref: str


async def _ask_required(prompter: WizardPrompter, message: str, default: str) -> str:
    while True:
        value = (await prompter.text(message, default=default)).strip()
        if value:
            return value
        await prompter.note(f"{message} cannot be empty.", "Invalid value")


async def _ask_base_url(prompter: WizardPrompter, default: str) -> str:
    while True:
        value = await _ask_required(prompter, "API base URL", default)
        if value.startswith(("http://", "https://")):
            return value
        await prompter.note(
            f"{value} is not an http:// or https:// URL.",
            "Invalid base URL",
        )


async def prompt_custom_api_config(
    prompter: WizardPrompter,
    config: Settings,
    *,
    initial_base_url: str = "",
    initial_model_id: str = "",
    initial_provider_id: str = "",
    initial_alias: str = "",
    compatibility: str = "openai",
    skip_compatibility_prompt: bool = False,
) -> CustomApiResult:
    """
    Collect provider settings and merge them into a copy of ``config``.

    Args:
        prompter: Prompt surface
        config: Current settings (not mutated)
        initial_base_url: Pre-filled base URL
        initial_model_id: Pre-filled model id
        initial_provider_id: Pre-filled provider id
        initial_alias: Pre-filled model alias (may be left blank)
        compatibility: Wire compatibility mode used when the prompt is skipped
        skip_compatibility_prompt: Use ``compatibility`` without asking

    Returns:
        CustomApiResult with the updated settings
    """
    if compatibility not in SUPPORTED_APIS:
        raise ValueError(f"compatibility must be one of {list(SUPPORTED_APIS)}, got: {compatibility}")

    if not skip_compatibility_prompt:
        compatibility = await prompter.select(
            message="API compatibility",
            options=COMPATIBILITY_OPTIONS,
            initial_value=compatibility,
        )

    base_url = await _ask_base_url(prompter, initial_base_url)
    model_id = await _ask_required(prompter, "Model ID", initial_model_id)
    provider_id = await _ask_required(prompter, "Provider ID", initial_provider_id)
    alias = (await prompter.text("Model alias (optional)", default=initial_alias)).strip()

    model_ref = f"{provider_id}/{model_id}"
    updated = config.model_copy(deep=True)

    provider = updated.providers.get(provider_id)
    models = list(provider.models) if provider and provider.base_url == base_url else []
    if model_id not in models:
        models.append(model_id)

    updated.providers[provider_id] = ProviderConfig(base_url=base_url, api=compatibility, models=models)
    updated.default_model = model_ref
    if alias:
        updated.model_aliases[alias] = model_ref

    logger.info(f"Configured provider {provider_id!r} at {base_url} (default model {model_ref})")
    return CustomApiResult(config=updated, provider_id=provider_id, model_ref=model_ref)
