"""
Onboarding flows for onboard-cli.

Local provider setup (Ollama, LM Studio) probes the server's OpenAI-compatible
``/models`` listing before handing off to the custom provider prompt.
"""

from .auth_choices import (
    AuthChoiceOption,
    build_auth_choice_groups,
    build_auth_choice_options,
)
from .checks import (
    PreflightFailureReason,
    PreflightOutcome,
    build_models_url,
    display_preflight_results,
    parse_model_ids,
    probe_local_endpoint,
)
from .custom import CustomApiResult, prompt_custom_api_config
from .local import (
    PreflightDecision,
    PreflightState,
    apply_local_auth_choice,
    resolve_local_preflight,
)
from .presets import AuthChoice, LocalPreset, is_local_auth_choice, resolve_preset

__all__ = [
    "AuthChoice",
    "AuthChoiceOption",
    "CustomApiResult",
    "LocalPreset",
    "PreflightDecision",
    "PreflightFailureReason",
    "PreflightOutcome",
    "PreflightState",
    "apply_local_auth_choice",
    "build_auth_choice_groups",
    "build_auth_choice_options",
    "build_models_url",
    "display_preflight_results",
    "is_local_auth_choice",
    "parse_model_ids",
    "probe_local_endpoint",
    "prompt_custom_api_config",
    "resolve_local_preflight",
    "resolve_preset",
]
